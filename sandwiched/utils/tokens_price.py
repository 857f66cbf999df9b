from typing import Optional

from web3 import Web3
import httpx

from sandwiched.config import AppConfig
from sandwiched.utils.loggers import logger

WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"

KNOWN_PRICE_IDS = {
    WETH_ADDRESS: "weth",
}


async def get_price_reference_id(token_address: str) -> Optional[str]:
    """
    Resolve o id de preço (CoinGecko) de um token pelo endereço do contrato.
    Retorna None se a API não conhecer o token.
    """
    token_address = Web3.to_checksum_address(token_address)
    if token_address in KNOWN_PRICE_IDS:
        return KNOWN_PRICE_IDS[token_address]

    url = (
        f"{AppConfig.COINGECKO_BASE_URL}/coins/ethereum/contract/"
        f"{token_address.lower()}"
    )
    try:
        async with httpx.AsyncClient(timeout=5) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            data = resp.json()
            return data.get("id")
    except httpx.HTTPError as e:
        logger.info(f"Erro buscando id de preço de {token_address}: {e}")
        return None
