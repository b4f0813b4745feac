"""
Indicator Engine Service

CONTRACT:
    Input:  list[PricePoint] (chronological closes)
    Output: IndicatorResult (or None when rejected)

RESPONSIBILITIES:
    - RSI(14) from a trailing simple average of gains/losses
    - SMA(20) and SMA(50)
    - Bollinger Bands(20, 2 sigma), population standard deviation
    - Reject series shorter than 50 points

PURE PYTHON - No LLM involvement.
Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
