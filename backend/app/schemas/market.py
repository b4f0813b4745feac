"""
CONTRACT: Market Data

Output: StockQuote, HistoricalData

Quotes and closing-price history fetched from Yahoo Finance and
normalized into the dashboard's format.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from app.schemas.indicators import PricePoint


# =============================================================================
# ENUMS
# =============================================================================


class HistoryPeriod(str, Enum):
    D1 = "1D"
    W1 = "1W"
    M1 = "1M"
    M3 = "3M"
    Y1 = "1Y"


# =============================================================================
# OUTPUT
# =============================================================================


class StockQuote(BaseModel):
    """Current quote for a symbol."""

    symbol: str
    current_price: float = Field(..., gt=0)
    price_change: float
    price_change_percent: float
    volume: str = Field(..., description="Formatted volume, e.g. 52.3M")
    high: float
    low: float
    open: Optional[float] = None
    previous_close: Optional[float] = None
    market_cap: Optional[str] = Field(default=None, description="Formatted, e.g. 2.9T")


class HistoricalData(BaseModel):
    """Closing-price history for a symbol, oldest first."""

    symbol: str
    period: HistoryPeriod
    data: list[PricePoint]

    @property
    def closes(self) -> list[float]:
        return [point.close for point in self.data]
