"""
Market Data Service

CONTRACT:
    Input:  symbol (+ history period)
    Output: StockQuote / HistoricalData

RESPONSIBILITIES:
    - Fetch current quotes from Yahoo Finance
    - Fetch closing-price history for 1D / 1W / 1M / 3M / 1Y
    - Normalize into the dashboard's schemas

NO LLM INVOLVEMENT - Pure data fetching and transformation.
"""

from app.services.market_data.service import MarketDataService, get_market_data_service
from app.services.market_data.yahoo_adapter import format_volume

__all__ = [
    "MarketDataService",
    "get_market_data_service",
    "format_volume",
]
