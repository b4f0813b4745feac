"""
Option Pricing Calculations

Black-Scholes-Merton closed form for European options (no dividends).
NO LLM INVOLVEMENT - All math is deterministic.
"""

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)

SQRT_2PI = math.sqrt(2 * math.pi)

# Zelen & Severo rational approximation (Abramowitz-Stegun 26.2.17)
CDF_P = 0.2316419
CDF_SCALE = 0.3989423
CDF_COEFFS = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)


# =============================================================================
# NORMAL DISTRIBUTION
# =============================================================================


def normal_cdf(x: float) -> float:
    """Standard normal CDF, polynomial approximation accurate to ~1e-7."""
    t = 1 / (1 + CDF_P * abs(x))
    d = CDF_SCALE * math.exp(-x * x / 2)
    b1, b2, b3, b4, b5 = CDF_COEFFS
    p = d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    return 1 - p if x > 0 else p


def normal_pdf(x: float) -> float:
    """Standard normal PDF."""
    return math.exp(-0.5 * x * x) / SQRT_2PI


# =============================================================================
# BLACK-SCHOLES
# =============================================================================


def _valid_inputs(
    stock_price: float,
    strike_price: float,
    time_to_expiry: float,
    risk_free_rate: float,
    volatility: float,
) -> bool:
    values = (stock_price, strike_price, time_to_expiry, risk_free_rate, volatility)
    if not all(math.isfinite(v) for v in values):
        return False
    return stock_price > 0 and strike_price > 0 and time_to_expiry > 0 and volatility > 0


def black_scholes(
    stock_price: float,
    strike_price: float,
    time_to_expiry: float,
    risk_free_rate: float,
    volatility: float,
    include_rho: bool = True,
) -> Optional[dict]:
    """
    Price a European call and put and compute their Greeks.

    Args:
        stock_price: Spot price (S), > 0
        strike_price: Strike (K), > 0
        time_to_expiry: Years to expiry (T), > 0
        risk_free_rate: Annual rate (r), any finite value
        volatility: Annual volatility (sigma), > 0
        include_rho: Also compute call rho

    Returns:
        dict with call_price, put_price, delta, gamma, theta (per day),
        vega (per 1% vol) and rho (per 1% rate, or None), or None when the
        inputs are invalid or the result is not finite.
    """
    try:
        stock_price = float(stock_price)
        strike_price = float(strike_price)
        time_to_expiry = float(time_to_expiry)
        risk_free_rate = float(risk_free_rate)
        volatility = float(volatility)
    except (TypeError, ValueError, OverflowError):
        return None

    if not _valid_inputs(stock_price, strike_price, time_to_expiry, risk_free_rate, volatility):
        logger.debug(
            "Rejected option inputs S=%s K=%s T=%s r=%s sigma=%s",
            stock_price, strike_price, time_to_expiry, risk_free_rate, volatility,
        )
        return None

    try:
        sqrt_t = math.sqrt(time_to_expiry)
        sigma_sqrt_t = volatility * sqrt_t
        d1 = (
            math.log(stock_price / strike_price)
            + (risk_free_rate + 0.5 * volatility * volatility) * time_to_expiry
        ) / sigma_sqrt_t
        d2 = d1 - sigma_sqrt_t

        nd1 = normal_cdf(d1)
        nd2 = normal_cdf(d2)
        n_minus_d1 = normal_cdf(-d1)
        n_minus_d2 = normal_cdf(-d2)
        pdf_d1 = normal_pdf(d1)

        discount = math.exp(-risk_free_rate * time_to_expiry)

        call_price = stock_price * nd1 - strike_price * discount * nd2
        put_price = strike_price * discount * n_minus_d2 - stock_price * n_minus_d1

        delta = nd1
        gamma = pdf_d1 / (stock_price * sigma_sqrt_t)
        theta = (
            -(stock_price * pdf_d1 * volatility) / (2 * sqrt_t)
            - risk_free_rate * strike_price * discount * nd2
        )
        vega = stock_price * sqrt_t * pdf_d1 / 100
        rho = strike_price * time_to_expiry * discount * nd2 / 100 if include_rho else None
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        logger.debug(f"Black-Scholes calculation failed: {e}")
        return None

    outputs = [call_price, put_price, delta, gamma, theta, vega]
    if rho is not None:
        outputs.append(rho)
    if not all(math.isfinite(v) for v in outputs):
        logger.debug("Black-Scholes produced non-finite output, discarding")
        return None

    return {
        "call_price": max(0.0, call_price),
        "put_price": max(0.0, put_price),
        "delta": delta,
        "gamma": gamma,
        "theta": theta / 365,
        "vega": vega,
        "rho": rho,
    }


def years_from_days(days_to_expiry: float, days_per_year: int = 365) -> float:
    """Convert calendar days to the model's year fraction."""
    return days_to_expiry / days_per_year
