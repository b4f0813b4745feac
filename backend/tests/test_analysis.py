"""
Forecast and sentiment tests.
"""

import asyncio
import time

import pandas as pd
import pytest

from app.schemas.market import HistoricalData, HistoryPeriod
from app.services.analysis import AnalysisService
from app.services.analysis.calculations import linear_forecast, price_action_sentiment
from app.services.base import ExternalAPIError, InsufficientDataError
from app.services.market_data import yahoo_adapter
from conftest import make_series


class TestLinearForecast:
    def test_perfect_trend_is_extrapolated(self):
        # last 10 closes 110..119 -> y = 109 + x, projected to x = 40
        closes = [100.0 + i for i in range(20)]
        result = linear_forecast(closes)

        assert result["prediction"] == pytest.approx(149.0)

    def test_confidence_clamped_high(self):
        result = linear_forecast([100.0] * 10)

        assert result["prediction"] == pytest.approx(100.0)
        assert result["confidence"] == 80

    def test_confidence_clamped_low(self):
        result = linear_forecast([10.0, 100.0] * 5)

        assert result["confidence"] == 40

    def test_prediction_not_negative(self):
        closes = [100.0 - 10 * i for i in range(10)]
        result = linear_forecast(closes)

        assert result["prediction"] == 0.0

    def test_requires_ten_points(self):
        assert linear_forecast([100.0] * 9) is None


class TestPriceActionSentiment:
    @pytest.mark.parametrize(
        "current,score",
        [
            (106.0, 75),
            (103.0, 65),
            (101.0, 50),
            (100.0, 50),
            (97.0, 35),
            (94.0, 25),
        ],
    )
    def test_score_levels(self, current, score):
        result = price_action_sentiment(current, [100.0] * 5)

        assert result["score"] == score
        assert result["analysis"]

    def test_uses_last_five_closes(self):
        closes = [10.0] * 20 + [100.0] * 5
        assert price_action_sentiment(100.0, closes)["score"] == 50

    def test_requires_five_points(self):
        assert price_action_sentiment(100.0, [100.0] * 4) is None


class TestAnalysisService:
    def test_forecast_from_history(self):
        history = HistoricalData(
            symbol="AAPL",
            period=HistoryPeriod.M1,
            data=make_series([100.0 + i for i in range(20)]),
        )
        forecast = AnalysisService().forecast(history)

        assert forecast.prediction == pytest.approx(149.0)
        assert forecast.timeframe == "30 days"
        assert forecast.method.value == "statistical"

    def test_forecast_for_symbol(self, fake_market, rising_closes):
        fake_market["closes"]["AAPL"] = rising_closes

        forecast = asyncio.run(AnalysisService().forecast_for_symbol("AAPL"))

        assert forecast.prediction == pytest.approx(189.0)

    def test_forecast_for_symbol_short_history(self, fake_market):
        fake_market["closes"]["AAPL"] = [100.0] * 5

        with pytest.raises(InsufficientDataError):
            asyncio.run(AnalysisService().forecast_for_symbol("AAPL"))

    def test_sentiment_for_symbol(self, fake_market, aapl_quote):
        fake_market["quotes"]["AAPL"] = aapl_quote
        fake_market["closes"]["AAPL"] = [150.0] * 5

        sentiment = asyncio.run(AnalysisService().sentiment_for_symbol("AAPL"))

        assert sentiment.score == 75
        assert sentiment.method.value == "basic"

    def test_sentiment_for_unknown_symbol(self, fake_market):
        with pytest.raises(ExternalAPIError):
            asyncio.run(AnalysisService().sentiment_for_symbol("NOPE"))

    def test_dashboard(self, fake_market, aapl_quote, rising_closes):
        fake_market["quotes"]["AAPL"] = aapl_quote
        fake_market["closes"]["AAPL"] = rising_closes

        data = asyncio.run(AnalysisService().dashboard("AAPL"))

        assert data.stock.current_price == 159.0
        assert len(data.chart.data) == 60
        assert data.forecast is not None
        assert data.sentiment.score == 50

    def test_dashboard_short_history(self, fake_market, aapl_quote):
        fake_market["quotes"]["AAPL"] = aapl_quote
        fake_market["closes"]["AAPL"] = [159.0] * 3

        data = asyncio.run(AnalysisService().dashboard("AAPL"))

        assert data.forecast is None
        assert data.sentiment is None


class SlowTicker:
    """yfinance.Ticker stand-in whose network calls each take DELAY seconds."""

    DELAY = 0.3

    def __init__(self, symbol):
        self.symbol = symbol

    @property
    def info(self):
        time.sleep(self.DELAY)
        return {"symbol": self.symbol, "regularMarketPrice": 129.0}

    def history(self, **kwargs):
        time.sleep(self.DELAY)
        index = pd.date_range("2024-05-01", periods=30, freq="D")
        return pd.DataFrame({"Close": [100.0 + i for i in range(30)]}, index=index)


class TestConcurrentFetch:
    @pytest.fixture(autouse=True)
    def slow_ticker(self, monkeypatch):
        monkeypatch.setattr(yahoo_adapter.yf, "Ticker", SlowTicker)

    def test_dashboard_fetches_quote_and_history_in_parallel(self):
        started = time.perf_counter()
        data = asyncio.run(AnalysisService().dashboard("AAPL"))
        elapsed = time.perf_counter() - started

        assert data.stock.current_price == 129.0
        assert len(data.chart.data) == 30
        assert elapsed < 2 * SlowTicker.DELAY

    def test_sentiment_fetches_quote_and_history_in_parallel(self):
        started = time.perf_counter()
        sentiment = asyncio.run(AnalysisService().sentiment_for_symbol("AAPL"))
        elapsed = time.perf_counter() - started

        assert sentiment.score == 50
        assert elapsed < 2 * SlowTicker.DELAY
