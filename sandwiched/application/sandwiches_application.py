from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from sandwiched.application.sandwich_attack_detector import find_sandwich
from sandwiched.config import AppConfig
from sandwiched.dbo.db_functions import (
    fetch_detected_sandwiches_by_target,
    save_detected_sandwich,
)
from sandwiched.dto.schemas import Sandwich, SwapLog
from sandwiched.utils.loggers import logger


def _sandwich_key(sandwich: Sandwich):
    return (sandwich.open.tx, sandwich.target.tx, sandwich.close.tx)


def _swap_order(swap: SwapLog):
    return (swap.block_number, swap.transaction_index, swap.log_index)


async def _find_for_targets(
    chain_client,
    targets: list[SwapLog],
    window: int,
    session: Optional[AsyncSession] = None,
) -> list[Sandwich]:
    sandwiches = []
    seen = set()
    for target in targets:
        found = await find_sandwich(chain_client, logger, target, window)
        for sandwich in found:
            # um mesmo alvo pode ter mais de um log de swap no pool
            if _sandwich_key(sandwich) in seen:
                continue
            seen.add(_sandwich_key(sandwich))
            sandwiches.append(sandwich)
            if session is not None:
                await save_detected_sandwich(session, sandwich)

    logger.info(f"{len(sandwiches)} sandwiches found for {len(targets)} swaps")
    return sandwiches


async def fetch_sandwiches_by_address_application(
    chain_client,
    address: str,
    from_block: int,
    to_block: int,
    window: int = AppConfig.DEFAULT_WINDOW,
    session: Optional[AsyncSession] = None,
) -> list[Sandwich]:
    """
    Swaps em que `address` recebe a saída, mais todos os swaps das transações
    em que `address` enviou tokens (trades multi-hop).
    """
    targets = list(
        await chain_client.get_swaps(None, None, address, from_block, to_block)
    )
    tx_hashes = await chain_client.get_transfer_tx_hashes(
        address, from_block, to_block
    )
    for tx_hash in tx_hashes:
        targets += await chain_client.get_transaction_swaps(tx_hash)

    unique = {}
    for swap in targets:
        unique.setdefault((swap.transaction_hash, swap.log_index), swap)
    targets = sorted(unique.values(), key=_swap_order)
    return await _find_for_targets(chain_client, targets, window, session)


async def fetch_sandwiches_by_transaction_application(
    chain_client,
    transaction_hash: str,
    window: int = AppConfig.DEFAULT_WINDOW,
    session: Optional[AsyncSession] = None,
) -> list[Sandwich]:
    targets = await chain_client.get_transaction_swaps(transaction_hash)
    return await _find_for_targets(chain_client, targets, window, session)


async def fetch_stored_sandwiches_application(
    session: AsyncSession, transaction_hash: str
) -> list[Sandwich]:
    return await fetch_detected_sandwiches_by_target(session, transaction_hash)
