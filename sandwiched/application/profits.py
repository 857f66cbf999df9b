from decimal import Decimal

from sandwiched.config import AppConfig
from sandwiched.dto.schemas import Pool, Profit, SwapDirection, SwapInfo, SwapLog
from sandwiched.utils.units import format_units


def _profit(value: int, token) -> Profit:
    return Profit(
        amount=format_units(value, token.decimals),
        currency=token.symbol,
        cg_id=token.cg_id,
    )


def compute_profits(
    open_swap: SwapLog, close_swap: SwapLog, pool: Pool
) -> list[Profit]:
    """
    Calcula o lucro do atacante nas duas direções possíveis.

    "forward" é a direção natural: o open troca x tok1 por n tok2, o close
    troca n tok2 por y tok1 e o lucro é y - x, em tok1. "backward" é o
    inverso: o open troca n tok1 por x tok2, o close troca y tok2 por
    n tok1 e o lucro é x - y, em tok2. As duas podem coexistir.
    """
    if open_swap.direction is SwapDirection.ZERO_TO_ONE:
        forward = _profit(close_swap.amount0_out - open_swap.amount0_in, pool.token0)
        backward = _profit(open_swap.amount1_out - close_swap.amount1_in, pool.token1)
    elif open_swap.direction is SwapDirection.ONE_TO_ZERO:
        forward = _profit(close_swap.amount1_out - open_swap.amount1_in, pool.token1)
        backward = _profit(open_swap.amount0_out - close_swap.amount0_in, pool.token0)
    else:
        raise ValueError(f"Direção de swap desconhecida: {open_swap.direction}")

    profits = [p for p in (forward, backward) if p.amount != AppConfig.ZERO_AMOUNT]
    if not profits:
        profits = [
            Profit(
                amount=AppConfig.ZERO_AMOUNT,
                currency=AppConfig.NATIVE_SYMBOL,
                cg_id=AppConfig.NATIVE_PRICE_ID,
            )
        ]
    return profits


def is_deviated(a: int, b: int) -> bool:
    # True quando b está a mais de 4% de a
    return (
        b < a * AppConfig.DEVIATION_LOWER_PERCENT // 100
        or b > a * AppConfig.DEVIATION_UPPER_PERCENT // 100
    )


def check_mismatched(open_swap: SwapLog, close_swap: SwapLog) -> bool:
    if open_swap.direction is SwapDirection.ZERO_TO_ONE:
        a, b = open_swap.amount1_out, close_swap.amount1_in
        c, d = close_swap.amount0_out, open_swap.amount0_in
    elif open_swap.direction is SwapDirection.ONE_TO_ZERO:
        a, b = open_swap.amount0_out, close_swap.amount0_in
        c, d = close_swap.amount1_out, open_swap.amount1_in
    else:
        raise ValueError(f"Direção de swap desconhecida: {open_swap.direction}")

    return is_deviated(a, b) and is_deviated(c, d)


# Heurística para descartar (ao menos parte dos) sanduíches com lucro inflado
# por outras transações no meio. O fator 0.5 é arbitrário.
def check_profit_too_big(swap: SwapInfo, profits: list[Profit]) -> bool:
    for profit in profits:
        if profit.currency == swap.currency_in:
            reference = Decimal(swap.amount_in)
        else:
            reference = Decimal(swap.amount_out)
        if abs(Decimal(profit.amount)) > reference * AppConfig.PROFIT_TOO_BIG_RATIO:
            return True
    return False
