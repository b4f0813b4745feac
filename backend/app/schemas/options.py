"""
CONTRACT: Options Pricer

Input: OptionInputs (or OptionPricingRequest with days to expiry)
Output: OptionResult

Black-Scholes-Merton pricing of European options, no dividends.
Pure Python math - NO LLM involvement.
"""

from typing import Optional
from pydantic import BaseModel, Field

from app.core.config import settings


# =============================================================================
# INPUT
# =============================================================================


class OptionInputs(BaseModel):
    """
    Market and contract parameters in model units.

    Positivity and finiteness are checked by the pricer itself so that
    bad values come back as a rejection rather than a schema error.
    """

    stock_price: float = Field(..., description="Spot price of the underlying")
    strike_price: float = Field(..., description="Contract strike price")
    time_to_expiry: float = Field(..., description="Time to expiry in years")
    risk_free_rate: float = Field(
        default=settings.default_risk_free_rate, description="Annual rate, decimal"
    )
    volatility: float = Field(..., description="Annual volatility, decimal")


class OptionPricingRequest(BaseModel):
    """
    Request body from the dashboard options calculator.
    Sent by: Frontend
    Received by: Options Pricing Service
    """

    stock_price: float
    strike_price: float
    days_to_expiry: float = Field(..., description="Calendar days until expiry")
    volatility: float = Field(..., description="Annual volatility, decimal (0.25 = 25%)")
    risk_free_rate: float = Field(
        default=settings.default_risk_free_rate, description="Annual rate, decimal"
    )
    include_rho: bool = True


# =============================================================================
# OUTPUT
# =============================================================================


class OptionResult(BaseModel):
    """
    European call/put prices and Greeks.

    Theta is per calendar day; vega and rho are per 1% change.
    Delta is the call delta.
    """

    call_price: float = Field(..., ge=0)
    put_price: float = Field(..., ge=0)
    delta: float = Field(..., ge=0, le=1)
    gamma: float = Field(..., ge=0)
    theta: float
    vega: float
    rho: Optional[float] = None

    class Config:
        json_schema_extra = {
            "example": {
                "call_price": 3.06,
                "put_price": 2.65,
                "delta": 0.537,
                "gamma": 0.0554,
                "theta": -0.0543,
                "vega": 0.1139,
                "rho": 0.0416,
            }
        }
