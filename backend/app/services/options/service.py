"""
Options Pricing Service Implementation

Prices European options with Black-Scholes-Merton and reports Greeks.
NO LLM INVOLVEMENT - Pure Python calculations.
"""

import logging
from typing import Optional

from app.core.config import settings
from app.schemas.options import OptionInputs, OptionPricingRequest, OptionResult
from app.services.options.interface import OptionsPricingServiceInterface
from app.services.options.calculations import black_scholes, years_from_days

logger = logging.getLogger(__name__)


class OptionsPricingService(OptionsPricingServiceInterface):
    """
    Options Pricing Service.

    Stateless; safe to share between concurrent requests.
    """

    def __init__(self, days_per_year: int = 365):
        self.days_per_year = days_per_year

    @property
    def name(self) -> str:
        return "OptionsPricingService"

    async def execute(
        self, input_data: OptionInputs, include_rho: bool = True
    ) -> Optional[OptionResult]:
        """Price a call/put pair from inputs in model units."""
        result = black_scholes(
            input_data.stock_price,
            input_data.strike_price,
            input_data.time_to_expiry,
            input_data.risk_free_rate,
            input_data.volatility,
            include_rho=include_rho,
        )
        if result is None:
            logger.info(f"{self.name}: rejected inputs {input_data.model_dump()}")
            return None

        return OptionResult(**result)

    async def price_from_days(
        self, request: OptionPricingRequest
    ) -> Optional[OptionResult]:
        """Price from the calculator form, converting days to years."""
        inputs = OptionInputs(
            stock_price=request.stock_price,
            strike_price=request.strike_price,
            time_to_expiry=years_from_days(request.days_to_expiry, self.days_per_year),
            risk_free_rate=request.risk_free_rate,
            volatility=request.volatility,
        )
        return await self.execute(inputs, include_rho=request.include_rho)

    async def health_check(self) -> bool:
        """Pricing service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[OptionsPricingService] = None


def get_options_service() -> OptionsPricingService:
    """Get or create options pricing service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = OptionsPricingService(days_per_year=settings.days_per_year)
    return _service_instance
