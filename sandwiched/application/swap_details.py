from sandwiched.app_exceptions.pool_not_found_error import PoolNotFoundException
from sandwiched.dto.schemas import SwapInfo, SwapLog
from sandwiched.utils.units import format_timestamp, format_units


async def get_swap_info(log: SwapLog, pools, blocks) -> SwapInfo:
    """
    Monta o resumo legível de um swap: timestamp do bloco, valores com os
    decimais de cada token e símbolos de entrada e saída.
    """
    pool = await pools.lookup(log.address)
    if pool is None:
        raise PoolNotFoundException(log.address)

    block = await blocks.lookup(log.block_number)
    ts = format_timestamp(block.timestamp)

    # define tokenIn/tokenOut e quantidades
    if log.amount0_in == 0:
        amount_in = format_units(log.amount1_in, pool.token1.decimals)
        currency_in = pool.token1.symbol
    else:
        amount_in = format_units(log.amount0_in, pool.token0.decimals)
        currency_in = pool.token0.symbol

    if log.amount0_out == 0:
        amount_out = format_units(log.amount1_out, pool.token1.decimals)
        currency_out = pool.token1.symbol
    else:
        amount_out = format_units(log.amount0_out, pool.token0.decimals)
        currency_out = pool.token0.symbol

    return SwapInfo(
        tx=log.transaction_hash,
        ts=ts,
        amount_in=amount_in,
        currency_in=currency_in,
        amount_out=amount_out,
        currency_out=currency_out,
    )
