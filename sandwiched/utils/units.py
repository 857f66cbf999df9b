from email.utils import formatdate
from typing import Union


def format_units(value: int, decimals: int) -> str:
    """
    Converte um valor inteiro em unidades base do token para string decimal.

    Ex.: format_units(20 * 10**18, 18) -> "20.0",
    format_units(-1500, 3) -> "-1.5". Zeros à direita da parte fracionária
    são removidos, mas ao menos um dígito fracionário é mantido.
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"


def format_timestamp(timestamp: Union[int, str]) -> str:
    if isinstance(timestamp, str):
        return timestamp
    return formatdate(timestamp, usegmt=True)
