"""
Indicator Engine Service Implementation

Calculates technical indicators from closing prices.
NO LLM INVOLVEMENT - Pure Python/NumPy calculations.
"""

import logging
from typing import Optional

import numpy as np

from app.schemas.indicators import PricePoint, IndicatorResult, SymbolIndicators
from app.schemas.market import HistoryPeriod
from app.services.base import ExternalAPIError, InsufficientDataError
from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.calculations import (
    MIN_DATA_POINTS,
    calculate_technical_indicators,
)
from app.services.market_data import MarketDataService, get_market_data_service

logger = logging.getLogger(__name__)


def _closes_to_array(prices: list[PricePoint]) -> np.ndarray:
    """Convert price points to a numpy array of closes."""
    return np.array([p.close for p in prices], dtype=float)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates technical indicators for market analysis.
    All calculations are deterministic and reproducible.
    """

    def __init__(self, market_data: Optional[MarketDataService] = None):
        self._market_data = market_data

    @property
    def name(self) -> str:
        return "IndicatorService"

    @property
    def market_data(self) -> MarketDataService:
        if self._market_data is None:
            self._market_data = get_market_data_service()
        return self._market_data

    async def execute(self, input_data: list[PricePoint]) -> Optional[IndicatorResult]:
        """Calculate indicators for a price series."""
        values = calculate_technical_indicators(_closes_to_array(input_data))
        if values is None:
            logger.info(
                f"{self.name}: no indicators for {len(input_data)} points "
                f"(needs {MIN_DATA_POINTS} finite closes)"
            )
            return None

        return IndicatorResult(**values)

    async def calculate_for_symbol(
        self,
        symbol: str,
        period: HistoryPeriod = HistoryPeriod.Y1,
    ) -> SymbolIndicators:
        """Fetch history for a symbol and calculate its indicators."""
        history = await self.market_data.get_history(symbol, period)
        if history is None:
            raise ExternalAPIError(self.name, f"No price history for {symbol}")

        if len(history.data) < MIN_DATA_POINTS:
            raise InsufficientDataError(
                self.name,
                "Insufficient data for technical indicators",
                {"symbol": symbol, "points": len(history.data), "required": MIN_DATA_POINTS},
            )

        result = await self.execute(history.data)
        if result is None:
            raise ExternalAPIError(self.name, f"Invalid price history for {symbol}")

        return SymbolIndicators(
            symbol=history.symbol,
            period=period.value,
            data_points=len(history.data),
            indicators=result,
        )

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
