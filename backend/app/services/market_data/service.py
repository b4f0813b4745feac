"""
Market Data Service Implementation

Fetches quotes and closing-price history for the dashboard.
Single provider (Yahoo Finance) - no fallback chain.
"""

import logging
from typing import Optional

from app.schemas.market import HistoricalData, HistoryPeriod, StockQuote
from app.services.base import BaseService
from app.services.market_data.yahoo_adapter import fetch_yahoo_history, fetch_yahoo_quote

logger = logging.getLogger(__name__)


class MarketDataService(BaseService[str, Optional[StockQuote]]):
    """
    Market Data Service.

    INPUT: symbol (str)
    OUTPUT: StockQuote / HistoricalData, or None when Yahoo has nothing
    """

    @property
    def name(self) -> str:
        return "MarketDataService"

    async def execute(self, input_data: str) -> Optional[StockQuote]:
        """Get the current quote for a symbol."""
        return await self.get_quote(input_data)

    async def get_quote(self, symbol: str) -> Optional[StockQuote]:
        quote = await fetch_yahoo_quote(symbol)
        if quote is None:
            logger.info(f"{self.name}: no quote for {symbol}")
        return quote

    async def get_history(
        self, symbol: str, period: HistoryPeriod = HistoryPeriod.M1
    ) -> Optional[HistoricalData]:
        history = await fetch_yahoo_history(symbol, period)
        if history is None:
            logger.info(f"{self.name}: no {period.value} history for {symbol}")
        return history

    async def health_check(self) -> bool:
        """Check Yahoo Finance responds for a liquid symbol."""
        history = await fetch_yahoo_history("SPY", HistoryPeriod.W1)
        return history is not None


# Singleton instance
_service_instance: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get or create market data service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = MarketDataService()
    return _service_instance
