from typing import Optional

from web3 import Web3
import httpx

from sandwiched.config import AppConfig
from sandwiched.utils.loggers import logger

DEX_FACTORIES = {
    "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f": "UniswapV2",
    "0xC0AEe478e3658e2610c5F7A4A2E1777cE9e4f2Ac": "SushiSwapV2",
}

CONTRACT_NAME_MAP = {
    "UniswapV2Pair": "UniswapV2",
    "UniswapV2PairV8": "UniswapV2",
    "SushiSwapPair": "SushiSwapV2",
    "SushiV2Pair": "SushiSwapV2",
    "SushiPair": "SushiSwapV2",
}


async def get_dex_name(pool_address: str, factory_address: str) -> Optional[str]:
    dex_name = DEX_FACTORIES.get(Web3.to_checksum_address(factory_address))
    if dex_name:
        return dex_name

    # Factory desconhecida, tenta pelo nome do contrato verificado no Etherscan
    url = (
        f"https://api.etherscan.io/api"
        f"?module=contract&action=getsourcecode"
        f"&address={pool_address}"
        f"&apikey={AppConfig.ETHERSCAN_API_KEY}"
    )
    try:
        async with httpx.AsyncClient(timeout=5) as client:
            response = await client.get(url)
            data = response.json()
    except httpx.HTTPError as e:
        logger.info(f"Erro buscando nome da DEX do pool {pool_address}: {e}")
        return None

    if data.get("status") != "1" or not data.get("result"):
        return None

    contract_name = data["result"][0].get("ContractName", "")
    # Só aceita pares constant-product conhecidos
    return CONTRACT_NAME_MAP.get(contract_name)
