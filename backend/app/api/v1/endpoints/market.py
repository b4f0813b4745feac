"""
Market Data API Endpoints

Endpoints for fetching quotes and chart history.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.schemas.market import HistoricalData, HistoryPeriod, StockQuote
from app.services.market_data import get_market_data_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{symbol}", response_model=StockQuote)
async def get_quote(symbol: str):
    """
    Get the current quote for a symbol.

    Returns current price, change, day range, volume and market cap.
    """
    service = get_market_data_service()
    quote = await service.get_quote(symbol.upper())

    if quote is None:
        raise HTTPException(status_code=404, detail="Stock not found")

    return quote


@router.get("/{symbol}/chart", response_model=HistoricalData)
async def get_chart(
    symbol: str, period: HistoryPeriod = HistoryPeriod(settings.default_history_period)
):
    """
    Get closing-price history for charting.

    Periods: 1D (hourly bars), 1W, 1M, 3M, 1Y (daily bars).
    """
    service = get_market_data_service()
    history = await service.get_history(symbol.upper(), period)

    if history is None:
        raise HTTPException(status_code=404, detail="Chart data not found")

    return history
