"""
Price Analysis Service Implementation

Statistical forecast and price-action sentiment for the dashboard.
"""

import asyncio
import logging
from typing import Optional

from app.schemas.analysis import DashboardData, Forecast, Sentiment
from app.schemas.market import HistoricalData, HistoryPeriod
from app.services.base import BaseService, ExternalAPIError, InsufficientDataError
from app.services.analysis.calculations import (
    FORECAST_WINDOW,
    SENTIMENT_WINDOW,
    linear_forecast,
    price_action_sentiment,
)
from app.services.market_data import MarketDataService, get_market_data_service

logger = logging.getLogger(__name__)


class AnalysisService(BaseService[HistoricalData, Optional[Forecast]]):
    """
    Price Analysis Service.

    INPUT: HistoricalData (+ current price for sentiment)
    OUTPUT: Forecast / Sentiment, or None when history is too short
    """

    def __init__(self, market_data: Optional[MarketDataService] = None):
        self._market_data = market_data

    @property
    def name(self) -> str:
        return "AnalysisService"

    @property
    def market_data(self) -> MarketDataService:
        if self._market_data is None:
            self._market_data = get_market_data_service()
        return self._market_data

    async def execute(self, input_data: HistoricalData) -> Optional[Forecast]:
        """Forecast from a price history."""
        return self.forecast(input_data)

    def forecast(self, history: HistoricalData) -> Optional[Forecast]:
        values = linear_forecast(history.closes)
        if values is None:
            return None
        return Forecast(**values)

    def sentiment(self, current_price: float, history: HistoricalData) -> Optional[Sentiment]:
        values = price_action_sentiment(current_price, history.closes)
        if values is None:
            return None
        return Sentiment(**values)

    async def forecast_for_symbol(self, symbol: str) -> Forecast:
        """
        Forecast from one month of history.

        Raises:
            ExternalAPIError: No history available
            InsufficientDataError: Fewer than 10 closes
        """
        history = await self.market_data.get_history(symbol, HistoryPeriod.M1)
        if history is None:
            raise ExternalAPIError(self.name, f"No price history for {symbol}")

        forecast = self.forecast(history)
        if forecast is None:
            raise InsufficientDataError(
                self.name,
                "Unable to generate forecast",
                {"symbol": symbol, "points": len(history.data), "required": FORECAST_WINDOW},
            )
        return forecast

    async def sentiment_for_symbol(self, symbol: str) -> Sentiment:
        """
        Sentiment from the current quote and one week of history.

        Raises:
            ExternalAPIError: No quote or history available
            InsufficientDataError: Fewer than 5 closes
        """
        quote, history = await asyncio.gather(
            self.market_data.get_quote(symbol),
            self.market_data.get_history(symbol, HistoryPeriod.W1),
        )
        if quote is None or history is None:
            raise ExternalAPIError(self.name, f"No market data for {symbol}")

        sentiment = self.sentiment(quote.current_price, history)
        if sentiment is None:
            raise InsufficientDataError(
                self.name,
                "Unable to generate sentiment",
                {"symbol": symbol, "points": len(history.data), "required": SENTIMENT_WINDOW},
            )
        return sentiment

    async def dashboard(
        self, symbol: str, period: HistoryPeriod = HistoryPeriod.M1
    ) -> DashboardData:
        """
        Quote, chart, forecast and sentiment for one symbol.

        Forecast and sentiment are None when the chart history is too short.

        Raises:
            ExternalAPIError: No quote or history available
        """
        quote, history = await asyncio.gather(
            self.market_data.get_quote(symbol),
            self.market_data.get_history(symbol, period),
        )
        if quote is None or history is None:
            raise ExternalAPIError(self.name, f"No market data for {symbol}")

        return DashboardData(
            stock=quote,
            chart=history,
            forecast=self.forecast(history),
            sentiment=self.sentiment(quote.current_price, history),
        )

    async def health_check(self) -> bool:
        """Analysis is pure computation over fetched data."""
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
