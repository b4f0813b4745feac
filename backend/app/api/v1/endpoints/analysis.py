"""
Analysis API Endpoints

Price forecast, sentiment and the combined dashboard view.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.schemas.analysis import DashboardData, Forecast, Sentiment
from app.schemas.market import HistoryPeriod
from app.services.analysis import get_analysis_service
from app.services.base import ExternalAPIError, InsufficientDataError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/forecast/{symbol}", response_model=Forecast)
async def get_forecast(symbol: str):
    """
    Get a 30-day price forecast from the trend of the last 10 closes.
    """
    service = get_analysis_service()

    try:
        return await service.forecast_for_symbol(symbol.upper())
    except (ExternalAPIError, InsufficientDataError):
        raise HTTPException(status_code=404, detail="Unable to generate forecast")
    except Exception as e:
        logger.error(f"Forecast error for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate forecast")


@router.get("/sentiment/{symbol}", response_model=Sentiment)
async def get_sentiment(symbol: str):
    """
    Get a sentiment score (0-100) from recent price action.
    """
    service = get_analysis_service()

    try:
        return await service.sentiment_for_symbol(symbol.upper())
    except (ExternalAPIError, InsufficientDataError):
        raise HTTPException(status_code=404, detail="Unable to generate sentiment")
    except Exception as e:
        logger.error(f"Sentiment error for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate sentiment analysis")


@router.get("/dashboard/{symbol}", response_model=DashboardData)
async def get_dashboard(
    symbol: str, period: HistoryPeriod = HistoryPeriod(settings.default_history_period)
):
    """
    Get quote, chart, forecast and sentiment for a symbol in one call.
    """
    service = get_analysis_service()

    try:
        return await service.dashboard(symbol.upper(), period)
    except ExternalAPIError:
        raise HTTPException(status_code=404, detail="Stock not found")
    except Exception as e:
        logger.error(f"Dashboard data error for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard data")
