"""
Price Analysis Calculations

Linear-trend forecast and price-action sentiment.
NO LLM INVOLVEMENT - All math is deterministic.
"""

from typing import Optional, Sequence, Union

import numpy as np

ArrayLike = Union[np.ndarray, Sequence[float]]

FORECAST_WINDOW = 10
FORECAST_HORIZON_DAYS = 30
FORECAST_MIN_CONFIDENCE = 40
FORECAST_MAX_CONFIDENCE = 80

SENTIMENT_WINDOW = 5

# (threshold %, score, analysis), checked in order
BULLISH_LEVELS = [
    (5.0, 75, "Market sentiment is bullish based on strong recent price momentum and positive trend indicators."),
    (2.0, 65, "Market sentiment is moderately bullish with positive price movement observed in recent trading."),
]
BEARISH_LEVELS = [
    (-5.0, 25, "Market sentiment is bearish due to recent price decline and negative momentum indicators."),
    (-2.0, 35, "Market sentiment is moderately bearish with recent price weakness in trading sessions."),
]
NEUTRAL_SCORE = 50
NEUTRAL_ANALYSIS = "Market sentiment is neutral based on recent price action."


def linear_forecast(closes: ArrayLike) -> Optional[dict]:
    """
    Project the least-squares trend of the last 10 closes 30 bars ahead.

    x runs 1..n over the window. Confidence falls with the window's
    coefficient of variation and is clamped to 40..80.

    Returns: {"prediction", "confidence"} or None with fewer than 10 closes
    """
    closes = np.asarray(closes, dtype=float)
    if len(closes) < FORECAST_WINDOW:
        return None

    recent = closes[-FORECAST_WINDOW:]
    n = len(recent)
    x = np.arange(1, n + 1, dtype=float)

    sum_x = n * (n + 1) / 2
    sum_y = float(np.sum(recent))
    sum_xy = float(np.sum(x * recent))
    sum_x2 = n * (n + 1) * (2 * n + 1) / 6

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    prediction = slope * (n + FORECAST_HORIZON_DAYS) + intercept

    avg_price = sum_y / n
    std = float(np.sqrt(np.sum((recent - avg_price) ** 2) / n))
    raw_confidence = 100 - (std / avg_price) * 100 if avg_price else 0
    confidence = max(FORECAST_MIN_CONFIDENCE, min(FORECAST_MAX_CONFIDENCE, raw_confidence))

    if not (np.isfinite(prediction) and np.isfinite(confidence)):
        return None

    return {
        "prediction": max(0.0, float(prediction)),
        "confidence": int(round(confidence)),
    }


def price_action_sentiment(current_price: float, closes: ArrayLike) -> Optional[dict]:
    """
    Score sentiment from the current price against the last 5 closes.

    Returns: {"score", "analysis"} or None with fewer than 5 closes
    """
    closes = np.asarray(closes, dtype=float)
    if len(closes) < SENTIMENT_WINDOW:
        return None

    avg_recent = float(np.mean(closes[-SENTIMENT_WINDOW:]))
    if avg_recent == 0 or not np.isfinite(avg_recent):
        return None

    change_pct = (current_price - avg_recent) / avg_recent * 100

    for threshold, score, analysis in BULLISH_LEVELS:
        if change_pct > threshold:
            return {"score": score, "analysis": analysis}

    for threshold, score, analysis in BEARISH_LEVELS:
        if change_pct < threshold:
            return {"score": score, "analysis": analysis}

    return {"score": NEUTRAL_SCORE, "analysis": NEUTRAL_ANALYSIS}
