"""
CONTRACT: Price Analysis

Input: closing-price history (+ current price for sentiment)
Output: Forecast, Sentiment

Deterministic statistical forecast and price-action sentiment.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from app.schemas.market import HistoricalData, StockQuote


class ForecastMethod(str, Enum):
    STATISTICAL = "statistical"


class SentimentMethod(str, Enum):
    BASIC = "basic"


class Forecast(BaseModel):
    """Projected price at the end of the forecast horizon."""

    prediction: float = Field(..., ge=0)
    confidence: float = Field(..., ge=0, le=100)
    timeframe: str = "30 days"
    method: ForecastMethod = ForecastMethod.STATISTICAL


class Sentiment(BaseModel):
    """Sentiment score (0 = very bearish, 50 = neutral, 100 = very bullish)."""

    score: float = Field(..., ge=0, le=100)
    analysis: str
    method: SentimentMethod = SentimentMethod.BASIC


class DashboardData(BaseModel):
    """Everything the dashboard page shows for one symbol."""

    stock: StockQuote
    chart: HistoricalData
    forecast: Optional[Forecast] = None
    sentiment: Optional[Sentiment] = None
