"""
Shared fixtures for the StockDash backend tests.

Yahoo Finance is never called: the adapter functions used by the market
data service are replaced with in-memory fakes.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.indicators import PricePoint
from app.schemas.market import HistoricalData, HistoryPeriod, StockQuote
from app.services.market_data import service as market_data_service


def make_series(closes):
    """Build a chronological PricePoint list from closes."""
    return [
        PricePoint(date=f"2024-{1 + i // 28:02d}-{1 + i % 28:02d}", close=c)
        for i, c in enumerate(closes)
    ]


@pytest.fixture
def rising_closes():
    """60 closes from 100 to 159, step 1."""
    return [100.0 + i for i in range(60)]


@pytest.fixture
def falling_closes():
    """60 closes from 159 down to 100, step 1."""
    return [159.0 - i for i in range(60)]


@pytest.fixture
def fake_market(monkeypatch):
    """
    Replace Yahoo Finance with canned data.

    Returns a dict the test can edit: quotes maps symbol -> StockQuote,
    closes maps symbol -> list of closes (served for every period).
    """
    state = {"quotes": {}, "closes": {}}

    async def fake_quote(symbol):
        return state["quotes"].get(symbol.upper())

    async def fake_history(symbol, period=HistoryPeriod.M1):
        closes = state["closes"].get(symbol.upper())
        if not closes:
            return None
        return HistoricalData(symbol=symbol.upper(), period=period, data=make_series(closes))

    monkeypatch.setattr(market_data_service, "fetch_yahoo_quote", fake_quote)
    monkeypatch.setattr(market_data_service, "fetch_yahoo_history", fake_history)
    return state


@pytest.fixture
def aapl_quote():
    return StockQuote(
        symbol="AAPL",
        current_price=159.0,
        price_change=1.0,
        price_change_percent=0.63,
        volume="52.3M",
        high=160.0,
        low=157.5,
        open=158.0,
        previous_close=158.0,
        market_cap="2.5T",
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
