from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class SwapDirection(str, Enum):
    ZERO_TO_ONE = "ZeroToOne"
    ONE_TO_ZERO = "OneToZero"

    def opposite(self) -> "SwapDirection":
        if self is SwapDirection.ZERO_TO_ONE:
            return SwapDirection.ONE_TO_ZERO
        elif self is SwapDirection.ONE_TO_ZERO:
            return SwapDirection.ZERO_TO_ONE
        raise ValueError(f"Direção de swap desconhecida: {self}")


class SwapLog(BaseModel):
    """Evento ``Swap`` decodificado de um par estilo Uniswap V2.

    Os amounts ficam em unidades base do token, como emitidos pelo par.
    """

    transaction_hash: str
    block_number: int
    transaction_index: int
    log_index: int = 0
    address: str
    sender: Optional[str] = None
    to: str
    direction: SwapDirection
    amount0_in: int = Field(ge=0)
    amount1_in: int = Field(ge=0)
    amount0_out: int = Field(ge=0)
    amount1_out: int = Field(ge=0)

    class Config:
        frozen = True

    @classmethod
    def from_amounts(
        cls,
        amount0_in: int,
        amount1_in: int,
        amount0_out: int,
        amount1_out: int,
        **kwargs,
    ) -> "SwapLog":
        direction = (
            SwapDirection.ZERO_TO_ONE if amount0_in > 0 else SwapDirection.ONE_TO_ZERO
        )
        return cls(
            direction=direction,
            amount0_in=amount0_in,
            amount1_in=amount1_in,
            amount0_out=amount0_out,
            amount1_out=amount1_out,
            **kwargs,
        )

    def is_after(self, other: "SwapLog") -> bool:
        return self.block_number > other.block_number or (
            self.block_number == other.block_number
            and self.transaction_index > other.transaction_index
        )


class Token(BaseModel):
    address: Optional[str] = None
    symbol: str
    decimals: int = Field(ge=0)
    cg_id: Optional[str] = None

    class Config:
        frozen = True


class Pool(BaseModel):
    address: Optional[str] = None
    token0: Token
    token1: Token
    dex: str

    class Config:
        frozen = True

    @property
    def label(self) -> str:
        return f"{self.token0.symbol} - {self.token1.symbol}"


class BlockInfo(BaseModel):
    number: int
    timestamp: Union[int, str]

    class Config:
        frozen = True


class SwapInfo(BaseModel):
    tx: str
    ts: str
    amount_in: str = Field(alias="amountIn")
    currency_in: str = Field(alias="currencyIn")
    amount_out: str = Field(alias="amountOut")
    currency_out: str = Field(alias="currencyOut")

    class Config:
        frozen = True
        populate_by_name = True


class Profit(BaseModel):
    amount: str
    currency: str
    cg_id: Optional[str] = Field(None, alias="cgId")

    class Config:
        frozen = True
        populate_by_name = True


class Sandwich(BaseModel):
    message: str
    open: SwapInfo
    target: SwapInfo
    close: SwapInfo
    profit: Profit
    profit2: Optional[Profit] = None
    pool: str
    dex: str
    mev: bool = False

    class Config:
        frozen = True
        populate_by_name = True
