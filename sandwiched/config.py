from decimal import Decimal
from dotenv import load_dotenv
import os

load_dotenv()


class AppConfig:
    RPC_URL = os.getenv(
        "RPC_URL", f"https://mainnet.infura.io/v3/{os.getenv('API_KEY')}"
    )
    ETHERSCAN_API_KEY = os.getenv("ETHERSCAN_API_KEY", "")
    COINGECKO_BASE_URL = os.getenv(
        "COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3"
    )
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./sandwiched.db")

    ENV = os.getenv("ENV", "dev")
    DEBUG = os.getenv("DEBUG")
    SQLALCHEMY_ECHO = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("LOG_DIR", ".")

    # Sandwich heuristics
    DEFAULT_WINDOW = 10
    BUNDLE_LIMIT = 5
    DEVIATION_LOWER_PERCENT = 96
    DEVIATION_UPPER_PERCENT = 104
    PROFIT_TOO_BIG_RATIO = Decimal("0.5")

    NATIVE_SYMBOL = "WETH"
    NATIVE_PRICE_ID = "weth"
    ZERO_AMOUNT = "0.0"
