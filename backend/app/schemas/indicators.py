"""
CONTRACT: Indicator Engine

Input: PriceSeries (chronological list of PricePoint)
Output: IndicatorResult

This module describes RSI(14), SMA(20), SMA(50) and Bollinger Bands(20, 2).
Pure Python/NumPy - NO LLM involvement.
"""

from pydantic import BaseModel, Field


# =============================================================================
# INPUT
# =============================================================================


class PricePoint(BaseModel):
    """Single closing price."""

    date: str = Field(..., description="ISO or locale date")
    close: float


class IndicatorRequest(BaseModel):
    """
    Request for indicator calculation over a caller-supplied series.
    Sent by: Frontend / API clients
    Received by: Indicator Service
    """

    prices: list[PricePoint] = Field(
        ...,
        description="Closing prices, oldest first (at least 50 points)",
    )


# =============================================================================
# OUTPUT
# =============================================================================


class IndicatorResult(BaseModel):
    """
    Technical indicators read from the trailing window of a series.

    bollinger_lower <= bollinger_middle <= bollinger_upper and
    bollinger_middle == sma20.
    """

    rsi: float = Field(..., ge=0, le=100)
    sma20: float
    sma50: float
    bollinger_upper: float
    bollinger_middle: float
    bollinger_lower: float

    class Config:
        json_schema_extra = {
            "example": {
                "rsi": 58.3,
                "sma20": 182.41,
                "sma50": 178.95,
                "bollinger_upper": 189.72,
                "bollinger_middle": 182.41,
                "bollinger_lower": 175.10,
            }
        }


class SymbolIndicators(BaseModel):
    """Indicators computed from a symbol's fetched history."""

    symbol: str
    period: str
    data_points: int
    indicators: IndicatorResult
