"""
Options API Endpoints

Black-Scholes pricing for the options calculator.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.schemas.options import OptionInputs, OptionPricingRequest, OptionResult
from app.services.options import get_options_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/price", response_model=OptionResult)
async def price_option(request: OptionPricingRequest):
    """
    Price a European call and put with Black-Scholes.

    Days to expiry are converted to years (days / 365).

    Returns:
        - Call and put prices
        - Delta (call), gamma, theta (per day), vega and rho (per 1%)
    """
    service = get_options_service()
    result = await service.price_from_days(request)

    if result is None:
        raise HTTPException(status_code=400, detail="Invalid option parameters")

    return result


@router.post("/price/years", response_model=OptionResult)
async def price_option_years(inputs: OptionInputs):
    """
    Price a European call and put with time to expiry given in years.
    """
    service = get_options_service()
    result = await service.execute(inputs)

    if result is None:
        raise HTTPException(status_code=400, detail="Invalid option parameters")

    return result
