from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Coin(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str
    symbol: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.symbol.upper()})"

class PriceQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    coin_id: str
    usd_price: Optional[float] = None

    @property
    def missing(self) -> bool:
        return self.usd_price is None

class Selection(BaseModel):
    """A buy/sell pair and amount that passed input validation."""
    model_config = ConfigDict(frozen=True)

    buy_coin_id: str = Field(..., min_length=1)
    sell_coin_id: str = Field(..., min_length=1)
    investment_amount: float = Field(..., gt=0, allow_inf_nan=False)

class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: float
    final_value: float
    profit: float
    roi_percent: float

class SwapOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    investment: float
    buy: PriceQuote
    sell: PriceQuote
    result: CalculationResult
