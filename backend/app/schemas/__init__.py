"""
StockDash Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from app.schemas.options import (
    OptionInputs,
    OptionPricingRequest,
    OptionResult,
)
from app.schemas.indicators import (
    PricePoint,
    IndicatorRequest,
    IndicatorResult,
    SymbolIndicators,
)
from app.schemas.market import (
    HistoryPeriod,
    StockQuote,
    HistoricalData,
)
from app.schemas.analysis import (
    Forecast,
    Sentiment,
    DashboardData,
)

__all__ = [
    # Options
    "OptionInputs",
    "OptionPricingRequest",
    "OptionResult",
    # Indicators
    "PricePoint",
    "IndicatorRequest",
    "IndicatorResult",
    "SymbolIndicators",
    # Market
    "HistoryPeriod",
    "StockQuote",
    "HistoricalData",
    # Analysis
    "Forecast",
    "Sentiment",
    "DashboardData",
]
