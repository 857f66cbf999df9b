from fastapi.testclient import TestClient
import pytest
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from sandwiched import app
from sandwiched.dto.schemas import BlockInfo, Pool, SwapLog, Token
from sandwiched.extension import get_chain_client, get_db

ATTACKER = "0x000000000000000000000000000000000000a77a"
OTHER_ATTACKER = "0x000000000000000000000000000000000000b0b0"
VICTIM = "0x000000000000000000000000000000000000f00d"
POOL_ADDRESS = "0xb1adceddb2941033a090dd166a462fe1c2029484"

WETH = Token(symbol="WETH", decimals=18, cg_id="weth")

E18 = 10**18


def make_swap(
    tx,
    block,
    index,
    to,
    amount0_in=0,
    amount1_in=0,
    amount0_out=0,
    amount1_out=0,
    address=POOL_ADDRESS,
    log_index=0,
):
    return SwapLog.from_amounts(
        amount0_in,
        amount1_in,
        amount0_out,
        amount1_out,
        transaction_hash=tx,
        block_number=block,
        transaction_index=index,
        log_index=log_index,
        address=address,
        to=to,
    )


class FakePoolService:
    def __init__(self, pools):
        self.pools = pools
        self.calls = []

    async def lookup(self, address):
        self.calls.append(address)
        return self.pools.get(address)


class FakeBlockService:
    def __init__(self, timestamps):
        self.timestamps = timestamps

    async def lookup(self, block_number):
        return BlockInfo(number=block_number, timestamp=self.timestamps[block_number])


class FakeChainClient:
    """Chain em memória: os swaps já vêm em ordem cronológica."""

    def __init__(
        self, swaps, pools, timestamps, gas_prices=None, tx_swaps=None, transfers=None
    ):
        self.swaps = swaps
        self.pools = FakePoolService(pools)
        self.blocks = FakeBlockService(timestamps)
        self.gas_prices = gas_prices or {}
        self.tx_swaps = tx_swaps or {}
        self.transfers = transfers or {}
        self.transfer_calls = []
        self.get_swaps_calls = []
        self.transactions_fetched = []

    async def get_swaps(self, pool_address, sender, to, from_block, to_block):
        self.get_swaps_calls.append((pool_address, sender, to, from_block, to_block))
        return [
            swap
            for swap in self.swaps
            if (pool_address is None or swap.address == pool_address)
            and (to is None or swap.to.lower() == to.lower())
            and from_block <= swap.block_number <= to_block
        ]

    async def get_transaction(self, tx_hash):
        self.transactions_fetched.append(tx_hash)
        return {"hash": tx_hash, "gasPrice": self.gas_prices.get(tx_hash, 10**9)}

    async def get_transaction_swaps(self, tx_hash):
        return self.tx_swaps.get(tx_hash, [])

    async def get_transfer_tx_hashes(self, sender, from_block, to_block):
        self.transfer_calls.append((sender, from_block, to_block))
        return self.transfers.get(sender.lower(), [])


@pytest.fixture
def b20_pool():
    return Pool(
        address=POOL_ADDRESS,
        token0=WETH,
        token1=Token(symbol="B20", decimals=18, cg_id="b20"),
        dex="UniswapV2",
    )


@pytest.fixture
def scenario_a(b20_pool):
    """Sanduíche em volta de SwapExactETHForTokens, WETH é o token0."""
    open_swap = make_swap(
        "0xopen", 12208431, 3, ATTACKER,
        amount0_in=20 * E18, amount1_out=8226342643528036846659,
    )
    target = make_swap(
        "0xtarget", 12208431, 7, VICTIM,
        amount0_in=30 * E18, amount1_out=11331416153131322048365,
    )
    close_swap = make_swap(
        "0xclose", 12208432, 2, ATTACKER,
        amount1_in=8226342643528036846659, amount0_out=21770266036457971241,
    )
    client = FakeChainClient(
        swaps=[open_swap, target, close_swap],
        pools={POOL_ADDRESS: b20_pool},
        timestamps={12208431: 1618008398, 12208432: 1618008457},
    )
    return client, target


@pytest.fixture
def test_client():
    """A test client for the app."""
    app.dependency_overrides[get_db] = _no_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


async def _no_db():
    yield None


def override_chain_client(chain_client):
    app.dependency_overrides[get_chain_client] = lambda: chain_client
