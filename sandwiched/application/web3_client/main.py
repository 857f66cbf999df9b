from web3 import AsyncWeb3

from sandwiched.config import AppConfig

async_web3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(AppConfig.RPC_URL))
