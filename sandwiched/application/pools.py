from typing import Callable, Optional
import asyncio

from web3 import AsyncWeb3, Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from sandwiched.dbo.db_functions import get_pool_metadata, insert_pool_metadata
from sandwiched.dto.schemas import Pool, Token
from sandwiched.utils.get_dex_name import get_dex_name
from sandwiched.utils.loggers import logger
from sandwiched.utils.tokens_price import get_price_reference_id

PAIR_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "token0",
        "outputs": [{"name": "", "type": "address"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "token1",
        "outputs": [{"name": "", "type": "address"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "factory",
        "outputs": [{"name": "", "type": "address"}],
        "type": "function",
    },
]

ERC20_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function",
    },
]

# Tokens antigos (ex.: MKR) retornam symbol como bytes32
ERC20_BYTES32_SYMBOL_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "bytes32"}],
        "type": "function",
    },
]


class PoolService:
    """
    Resolve os metadados de um par (tokens, decimais, ids de preço e DEX).

    Ordem de busca: cache em memória, tabela pool_metadata e por fim a
    própria chain. Pares cujas chamadas revertem, ou cuja factory não é
    de uma DEX V2 conhecida, resultam em None.
    """

    def __init__(
        self, async_web3: AsyncWeb3, session_factory: Optional[Callable] = None
    ):
        self.async_web3 = async_web3
        self.session_factory = session_factory
        self._cache: dict[str, Pool] = {}

    async def lookup(self, address: str) -> Optional[Pool]:
        address = Web3.to_checksum_address(address)
        if address in self._cache:
            return self._cache[address]

        pool = None
        if self.session_factory is not None:
            async with self.session_factory() as session:
                pool = await get_pool_metadata(session, address)

        if pool is None:
            pool = await self._fetch_pool(address)
            if pool is None:
                return None
            if self.session_factory is not None:
                async with self.session_factory() as session:
                    await insert_pool_metadata(session, pool)

        self._cache[address] = pool
        return pool

    async def _fetch_pool(self, address: str) -> Optional[Pool]:
        pair = self.async_web3.eth.contract(address=address, abi=PAIR_ABI)
        try:
            addr0, addr1, factory = await asyncio.gather(
                pair.functions.token0().call(),
                pair.functions.token1().call(),
                pair.functions.factory().call(),
            )
        except (BadFunctionCallOutput, ContractLogicError) as e:
            logger.info(f"{address} não é um par V2: {e}")
            return None

        dex_name = await get_dex_name(pool_address=address, factory_address=factory)
        if dex_name is None:
            logger.info(f"{address} não pertence a uma DEX V2 conhecida")
            return None

        token0, token1 = await asyncio.gather(
            self._fetch_token(addr0),
            self._fetch_token(addr1),
        )
        return Pool(address=address, token0=token0, token1=token1, dex=dex_name)

    async def _fetch_token(self, address: str) -> Token:
        contract = self.async_web3.eth.contract(address=address, abi=ERC20_ABI)
        symbol, decimals, cg_id = await asyncio.gather(
            self._fetch_symbol(address),
            contract.functions.decimals().call(),
            get_price_reference_id(address),
        )
        return Token(address=address, symbol=symbol, decimals=decimals, cg_id=cg_id)

    async def _fetch_symbol(self, address: str) -> str:
        contract = self.async_web3.eth.contract(address=address, abi=ERC20_ABI)
        try:
            return await contract.functions.symbol().call()
        except (BadFunctionCallOutput, ContractLogicError):
            logger.info(f"symbol() de {address} não é string, tentando bytes32")

        contract = self.async_web3.eth.contract(
            address=address, abi=ERC20_BYTES32_SYMBOL_ABI
        )
        try:
            raw = await contract.functions.symbol().call()
            return raw.rstrip(b"\x00").decode("utf-8", errors="ignore")
        except (BadFunctionCallOutput, ContractLogicError):
            return address  # fallback: mostra address
