"""
Yahoo Finance Data Adapter

Fetches REAL market data from Yahoo Finance.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Optional

import yfinance as yf

from app.core.config import settings
from app.schemas.indicators import PricePoint
from app.schemas.market import HistoricalData, HistoryPeriod, StockQuote

logger = logging.getLogger(__name__)


# Lookback window per dashboard period
PERIOD_DAYS = {
    HistoryPeriod.D1: 1,
    HistoryPeriod.W1: 7,
    HistoryPeriod.M1: 30,
    HistoryPeriod.M3: 90,
    HistoryPeriod.Y1: 365,
}


def format_volume(volume: float) -> str:
    """Format a share count or dollar amount as 1.2K / 3.4M / 5.6B."""
    if volume >= 1_000_000_000:
        return f"{volume / 1_000_000_000:.1f}B"
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.1f}M"
    if volume >= 1_000:
        return f"{volume / 1_000:.1f}K"
    return str(int(volume))


def get_history_window(
    period: HistoryPeriod, now: Optional[datetime] = None
) -> tuple[datetime, datetime, str]:
    """
    Get (start, end, interval) for a dashboard period.

    Intraday (1D) uses hourly bars; everything else uses daily bars.
    """
    now = now or datetime.now()
    start = now - timedelta(days=PERIOD_DAYS.get(period, 30))
    interval = "1h" if period == HistoryPeriod.D1 else "1d"
    return start, now, interval


async def fetch_yahoo_quote(symbol: str) -> Optional[StockQuote]:
    """
    Fetch the current quote from Yahoo Finance.

    Returns:
        StockQuote, or None if Yahoo has no price for the symbol
    """
    symbol = symbol.upper().strip()

    try:
        logger.info(f"Fetching quote for {symbol} from Yahoo Finance...")
        # yfinance is synchronous, run it in the default executor
        loop = asyncio.get_event_loop()
        info = await loop.run_in_executor(None, lambda: yf.Ticker(symbol).info)

        price = info.get("regularMarketPrice") or info.get("currentPrice")
        if not price:
            logger.warning(f"No quote returned for {symbol}")
            return None

        market_cap = info.get("marketCap") or 0

        return StockQuote(
            symbol=info.get("symbol") or symbol,
            current_price=float(price),
            price_change=float(info.get("regularMarketChange") or 0),
            price_change_percent=float(info.get("regularMarketChangePercent") or 0),
            volume=format_volume(info.get("regularMarketVolume") or 0),
            high=float(info.get("regularMarketDayHigh") or price),
            low=float(info.get("regularMarketDayLow") or price),
            open=info.get("regularMarketOpen"),
            previous_close=info.get("regularMarketPreviousClose"),
            market_cap=format_volume(market_cap),
        )

    except Exception as e:
        logger.error(f"Error fetching quote for {symbol} from Yahoo Finance: {e}")
        return None


async def fetch_yahoo_history(
    symbol: str, period: HistoryPeriod = HistoryPeriod.M1
) -> Optional[HistoricalData]:
    """
    Fetch closing-price history from Yahoo Finance.

    Args:
        symbol: Ticker symbol (e.g., "AAPL")
        period: Dashboard period (1D, 1W, 1M, 3M, 1Y)

    Returns:
        HistoricalData oldest first, or None on failure / no data
    """
    symbol = symbol.upper().strip()
    start, end, interval = get_history_window(period)

    try:
        logger.info(f"Fetching {period.value} history for {symbol} from Yahoo Finance...")

        loop = asyncio.get_event_loop()
        hist = await loop.run_in_executor(
            None,
            lambda: yf.Ticker(symbol).history(
                start=start,
                end=end,
                interval=interval,
                timeout=settings.market_data_timeout,
            ),
        )

        if hist.empty:
            logger.warning(f"No history returned for {symbol}")
            return None

        hist = hist.dropna(subset=["Close"])

        points = [
            PricePoint(
                date=idx.to_pydatetime().date().isoformat()
                if interval == "1d"
                else idx.to_pydatetime().isoformat(),
                close=float(row["Close"]),
            )
            for idx, row in hist.iterrows()
        ]

        if not points:
            return None

        return HistoricalData(symbol=symbol, period=period, data=points)

    except Exception as e:
        logger.error(f"Error fetching history for {symbol} from Yahoo Finance: {e}")
        return None
