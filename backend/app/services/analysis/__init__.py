"""
Price Analysis Service

CONTRACT:
    Input:  HistoricalData (+ current price)
    Output: Forecast, Sentiment

RESPONSIBILITIES:
    - 30-day linear-trend price forecast from the last 10 closes
    - Sentiment score from price action over the last 5 closes
    - Assemble the per-symbol dashboard view

PURE PYTHON - No LLM involvement.
"""

from app.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisService",
    "get_analysis_service",
]
