from web3 import AsyncWeb3

from sandwiched.dto.schemas import BlockInfo


class BlockService:
    def __init__(self, async_web3: AsyncWeb3):
        self.async_web3 = async_web3
        self._cache: dict[int, BlockInfo] = {}

    async def lookup(self, block_number: int) -> BlockInfo:
        if block_number not in self._cache:
            block = await self.async_web3.eth.get_block(
                block_number, full_transactions=False
            )
            self._cache[block_number] = BlockInfo(
                number=block["number"], timestamp=block["timestamp"]
            )
        return self._cache[block_number]
