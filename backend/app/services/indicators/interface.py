"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Optional

from app.services.base import BaseService
from app.schemas.indicators import PricePoint, IndicatorResult, SymbolIndicators
from app.schemas.market import HistoryPeriod


class IndicatorServiceInterface(BaseService[list[PricePoint], Optional[IndicatorResult]]):
    """
    Indicator Engine Service Contract.

    INPUT: list[PricePoint]
        - Chronological closing prices, at least 50 points

    OUTPUT: IndicatorResult or None
        - rsi, sma20, sma50, bollinger_upper/middle/lower
        - None when the series is too short or yields non-finite values
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: list[PricePoint]) -> Optional[IndicatorResult]:
        """Calculate indicators for a price series."""
        pass

    @abstractmethod
    async def calculate_for_symbol(
        self,
        symbol: str,
        period: HistoryPeriod = HistoryPeriod.Y1,
    ) -> SymbolIndicators:
        """
        Fetch history for a symbol and calculate its indicators.

        Args:
            symbol: Ticker symbol
            period: History period to fetch

        Returns:
            Indicators with the symbol and the number of points used

        Raises:
            ExternalAPIError: No history available
            InsufficientDataError: History too short for the indicators
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
