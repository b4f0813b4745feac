"""
Options Pricing Service Interface

Defines the contract for the option pricing layer.
"""

from abc import abstractmethod
from typing import Optional

from app.services.base import BaseService
from app.schemas.options import OptionInputs, OptionPricingRequest, OptionResult


class OptionsPricingServiceInterface(BaseService[OptionInputs, Optional[OptionResult]]):
    """
    Options Pricing Service Contract.

    INPUT: OptionInputs
        - stock_price, strike_price, time_to_expiry (years),
          risk_free_rate, volatility

    OUTPUT: OptionResult or None
        - None when any of S, K, T, sigma is not positive, any input is
          not finite, or the computation degenerates to a non-finite value
    """

    @property
    def name(self) -> str:
        return "OptionsPricingService"

    @abstractmethod
    async def execute(self, input_data: OptionInputs) -> Optional[OptionResult]:
        """Price a European call/put pair."""
        pass

    @abstractmethod
    async def price_from_days(
        self, request: OptionPricingRequest
    ) -> Optional[OptionResult]:
        """Price using calendar days to expiry instead of years."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Pricing service is always healthy (pure computation)."""
        pass
