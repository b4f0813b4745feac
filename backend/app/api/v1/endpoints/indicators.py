"""
Indicator API Endpoints

Endpoints for technical indicator calculations.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.schemas.indicators import IndicatorRequest, IndicatorResult, SymbolIndicators
from app.schemas.market import HistoryPeriod
from app.services.base import ExternalAPIError, InsufficientDataError
from app.services.indicators import get_indicator_service
from app.services.indicators.calculations import MIN_DATA_POINTS

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/calculate", response_model=IndicatorResult)
async def calculate_indicators(request: IndicatorRequest):
    """
    Calculate indicators for a caller-supplied closing-price series.

    Requires at least 50 points, oldest first.
    """
    if len(request.prices) < MIN_DATA_POINTS:
        raise HTTPException(
            status_code=400, detail="Insufficient data for technical indicators"
        )

    service = get_indicator_service()
    result = await service.execute(request.prices)

    if result is None:
        raise HTTPException(status_code=400, detail="Invalid price series")

    return result


@router.get("/{symbol}", response_model=SymbolIndicators)
async def get_indicators(
    symbol: str, period: HistoryPeriod = HistoryPeriod(settings.indicator_history_period)
):
    """
    Get RSI(14), SMA(20), SMA(50) and Bollinger Bands for a symbol.

    History is fetched from Yahoo Finance; the 1Y default gives enough
    daily bars for SMA(50).
    """
    service = get_indicator_service()

    try:
        return await service.calculate_for_symbol(symbol.upper(), period)
    except ExternalAPIError:
        raise HTTPException(status_code=404, detail=f"Data not found for {symbol.upper()}")
    except InsufficientDataError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Indicator calculation failed for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Indicator calculation failed")
