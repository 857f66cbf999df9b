import asyncio
import logging

from sandwiched.app_exceptions.pool_not_found_error import PoolNotFoundException
from sandwiched.application.profits import (
    check_mismatched,
    check_profit_too_big,
    compute_profits,
)
from sandwiched.application.swap_details import get_swap_info
from sandwiched.config import AppConfig
from sandwiched.dto.schemas import Sandwich, SwapLog
from sandwiched.utils.loggers import log_weird


def find_open_candidates(swaps: list[SwapLog], target: SwapLog) -> list[SwapLog]:
    # Só considera opens no mesmo bloco do alvo e antes dele
    return [
        cand
        for cand in swaps
        if cand.direction == target.direction
        and cand.block_number == target.block_number
        and cand.transaction_index < target.transaction_index
    ]


def find_close_candidates(
    swaps: list[SwapLog], open_swap: SwapLog, target: SwapLog
) -> list[SwapLog]:
    return [
        cand
        for cand in swaps
        if cand.direction == open_swap.direction.opposite()
        and cand.to == open_swap.to
        and cand.is_after(target)
    ]


async def _gather_or_cancel(*coros):
    # Se uma consulta falhar, as demais são canceladas antes do erro subir
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def is_mev(chain_client, open_swap: SwapLog, target: SwapLog) -> bool:
    # Bundles (flashbots) costumam pagar gasPrice zero no open
    if target.transaction_index > AppConfig.BUNDLE_LIMIT:
        return False
    tx = await chain_client.get_transaction(open_swap.transaction_hash)
    return int(tx["gasPrice"]) == 0


async def find_sandwich(
    chain_client,
    logger: logging.Logger,
    target: SwapLog,
    window: int = AppConfig.DEFAULT_WINDOW,
) -> list[Sandwich]:
    """
    Procura sanduíches em volta de um swap alvo.

    Busca os swaps do pool do alvo entre o bloco do alvo e ``window`` blocos
    depois, casa cada open candidato com um único close do mesmo
    destinatário e devolve os sanduíches na ordem em que os opens aparecem.
    Pool não encontrado e falhas dos colaboradores abortam a busca toda.
    """
    swaps = await chain_client.get_swaps(
        target.address,
        None,
        None,
        target.block_number,
        target.block_number + window,
    )
    pools = chain_client.pools
    blocks = chain_client.blocks

    res: list[Sandwich] = []
    for open_swap in find_open_candidates(swaps, target):
        close_swaps = find_close_candidates(swaps, open_swap, target)
        if len(close_swaps) == 0:
            # não é um open de sanduíche
            continue
        if len(close_swaps) > 1:
            log_weird(
                logger,
                "multiple closes for same open",
                [open_swap.transaction_hash, target.transaction_hash]
                + [close_swap.transaction_hash for close_swap in close_swaps],
            )
            continue

        close_swap = close_swaps[0]
        if check_mismatched(open_swap, close_swap):
            continue

        pool = await pools.lookup(open_swap.address)
        if pool is None:
            raise PoolNotFoundException(open_swap.address)
        profits = compute_profits(open_swap, close_swap, pool)

        open_info, target_info, close_info = await _gather_or_cancel(
            get_swap_info(open_swap, pools, blocks),
            get_swap_info(target, pools, blocks),
            get_swap_info(close_swap, pools, blocks),
        )

        if check_profit_too_big(target_info, profits):
            continue

        mev = await is_mev(chain_client, open_swap, target)

        res.append(
            Sandwich(
                message="Sandwich found",
                open=open_info,
                target=target_info,
                close=close_info,
                profit=profits[0],
                profit2=profits[1] if len(profits) > 1 else None,
                pool=pool.label,
                dex=pool.dex,
                mev=mev,
            )
        )
    return res
