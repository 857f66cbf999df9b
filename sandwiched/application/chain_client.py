from typing import Optional

from web3 import AsyncWeb3

from sandwiched.application.blocks import BlockService
from sandwiched.application.pools import PoolService
from sandwiched.application.swaps import (
    get_swaps,
    get_transfer_tx_hashes,
    swaps_from_receipt,
)
from sandwiched.dto.schemas import SwapLog


class ChainClient:
    """
    Agrupa o acesso à chain usado pela busca de sanduíches: logs de swap,
    transações e os serviços de metadados de pool e bloco.
    """

    def __init__(
        self,
        async_web3: AsyncWeb3,
        pools: Optional[PoolService] = None,
        blocks: Optional[BlockService] = None,
    ):
        self.async_web3 = async_web3
        self.pools = pools or PoolService(async_web3)
        self.blocks = blocks or BlockService(async_web3)

    async def get_swaps(
        self,
        pool_address: Optional[str],
        sender: Optional[str],
        to: Optional[str],
        from_block: int,
        to_block: int,
    ) -> list[SwapLog]:
        return await get_swaps(
            self.async_web3, pool_address, sender, to, from_block, to_block
        )

    async def get_transaction(self, tx_hash: str):
        return await self.async_web3.eth.get_transaction(tx_hash)

    async def get_transaction_swaps(self, tx_hash: str) -> list[SwapLog]:
        receipt = await self.async_web3.eth.get_transaction_receipt(tx_hash)
        return swaps_from_receipt(receipt)

    async def get_transfer_tx_hashes(
        self, sender: str, from_block: int, to_block: int
    ) -> list[str]:
        return await get_transfer_tx_hashes(
            self.async_web3, sender, from_block, to_block
        )
