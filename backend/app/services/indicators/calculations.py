"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
Each indicator reads only the trailing window it needs and returns a
single value for the most recent bar.
NO LLM INVOLVEMENT - All math is deterministic.
"""

import logging
from typing import Optional, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

RSI_PERIOD = 14
SMA_SHORT_PERIOD = 20
SMA_LONG_PERIOD = 50
BOLLINGER_PERIOD = 20
BOLLINGER_STD_DEV = 2.0

# SMA(50) is the longest window
MIN_DATA_POINTS = SMA_LONG_PERIOD

ArrayLike = Union[np.ndarray, Sequence[float]]


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(closes: ArrayLike, period: int) -> float:
    """Simple Moving Average of the last `period` closes."""
    closes = np.asarray(closes, dtype=float)
    return float(np.mean(closes[-period:]))


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: ArrayLike, period: int = RSI_PERIOD) -> float:
    """
    Relative Strength Index.

    Gains and losses are averaged with a plain mean over the last `period`
    deltas (no Wilder smoothing across the history).
    """
    closes = np.asarray(closes, dtype=float)
    deltas = np.diff(closes)

    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    avg_gain = np.sum(gains[-period:]) / period
    avg_loss = np.sum(losses[-period:]) / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return float(100 - (100 / (1 + rs)))


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: ArrayLike, period: int = BOLLINGER_PERIOD, std_dev: float = BOLLINGER_STD_DEV
) -> tuple[float, float, float]:
    """
    Bollinger Bands.

    Population standard deviation of the last `period` closes.

    Returns: (upper, middle, lower)
    """
    closes = np.asarray(closes, dtype=float)
    middle = sma(closes, period)

    window = closes[-period:]
    variance = np.sum((window - middle) ** 2) / period
    std = float(np.sqrt(variance))

    upper = middle + (std * std_dev)
    lower = middle - (std * std_dev)

    return upper, middle, lower


# =============================================================================
# COMBINED
# =============================================================================


def calculate_technical_indicators(closes: ArrayLike) -> Optional[dict]:
    """
    Calculate RSI(14), SMA(20), SMA(50) and Bollinger Bands(20, 2).

    Returns None when fewer than MIN_DATA_POINTS closes are supplied, when
    the closes are not numeric, or when any result is not finite.
    """
    try:
        closes = np.asarray(closes, dtype=float)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Rejected price series: {e}")
        return None

    if closes.ndim != 1 or len(closes) < MIN_DATA_POINTS:
        logger.debug(f"Insufficient data for technical indicators: {closes.size} points")
        return None

    upper, middle, lower = bollinger_bands(closes, BOLLINGER_PERIOD, BOLLINGER_STD_DEV)

    result = {
        "rsi": rsi(closes, RSI_PERIOD),
        "sma20": sma(closes, SMA_SHORT_PERIOD),
        "sma50": sma(closes, SMA_LONG_PERIOD),
        "bollinger_upper": upper,
        "bollinger_middle": middle,
        "bollinger_lower": lower,
    }

    if not all(np.isfinite(v) for v in result.values()):
        logger.debug("Technical indicators produced non-finite values, discarding")
        return None

    return result
