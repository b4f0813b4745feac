"""
Options Pricing Service

CONTRACT:
    Input:  OptionInputs
    Output: OptionResult (or None when rejected)

RESPONSIBILITIES:
    - Price European calls and puts (Black-Scholes-Merton)
    - Compute delta, gamma, theta, vega and rho
    - Reject non-positive or non-finite inputs
    - Reject results that are not finite

PURE PYTHON - No LLM involvement.
"""

from app.services.options.interface import OptionsPricingServiceInterface
from app.services.options.service import OptionsPricingService, get_options_service

__all__ = [
    "OptionsPricingServiceInterface",
    "OptionsPricingService",
    "get_options_service",
]
