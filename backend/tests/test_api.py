"""
HTTP API tests through FastAPI's TestClient.
"""

import math

import pytest

from app.core.config import Settings, settings
from app.main import build_cors_origins


def series_payload(closes):
    return {"prices": [{"date": f"d{i}", "close": c} for i, c in enumerate(closes)]}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestCors:
    def test_frontend_url_leads_origins(self):
        config = Settings(
            frontend_url="https://dash.example.com",
            allowed_origins=["http://localhost:5173", "https://admin.example.com"],
        )

        origins = build_cors_origins(config)

        assert origins[0] == "https://dash.example.com"
        assert "https://admin.example.com" in origins
        assert len(origins) == len(set(origins))

    def test_preflight_from_frontend(self, client):
        response = client.options(
            "/api/v1/options/price",
            headers={
                "Origin": settings.frontend_url,
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == settings.frontend_url


class TestOptionsEndpoint:
    def test_price(self, client):
        response = client.post(
            "/api/v1/options/price",
            json={
                "stock_price": 100,
                "strike_price": 100,
                "days_to_expiry": 30,
                "volatility": 0.25,
                "risk_free_rate": 0.05,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["call_price"] == pytest.approx(3.06, abs=0.05)
        assert body["put_price"] == pytest.approx(2.65, abs=0.05)
        assert body["delta"] == pytest.approx(0.537, abs=0.005)
        assert body["rho"] is not None
        assert all(math.isfinite(v) for v in body.values())

    def test_price_in_years(self, client):
        response = client.post(
            "/api/v1/options/price/years",
            json={
                "stock_price": 100,
                "strike_price": 100,
                "time_to_expiry": 1.0,
                "volatility": 0.2,
                "risk_free_rate": 0.0,
            },
        )

        body = response.json()
        assert response.status_code == 200
        assert body["call_price"] == pytest.approx(body["put_price"], abs=1e-9)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"stock_price": 0},
            {"strike_price": -5},
            {"volatility": 0},
            {"days_to_expiry": -1},
        ],
    )
    def test_invalid_parameters(self, client, overrides):
        payload = {
            "stock_price": 100,
            "strike_price": 100,
            "days_to_expiry": 30,
            "volatility": 0.25,
            "risk_free_rate": 0.05,
        }
        payload.update(overrides)

        response = client.post("/api/v1/options/price", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid option parameters"

    def test_missing_field(self, client):
        response = client.post("/api/v1/options/price", json={"stock_price": 100})

        assert response.status_code == 422


class TestIndicatorEndpoints:
    def test_calculate(self, client, rising_closes):
        response = client.post("/api/v1/indicators/calculate", json=series_payload(rising_closes))

        assert response.status_code == 200
        body = response.json()
        assert body["rsi"] == 100.0
        assert body["sma20"] == pytest.approx(149.5)
        assert body["sma50"] == pytest.approx(134.5)
        assert body["bollinger_middle"] == body["sma20"]

    def test_calculate_insufficient(self, client):
        response = client.post(
            "/api/v1/indicators/calculate", json=series_payload([100.0] * 49)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Insufficient data for technical indicators"

    def test_calculate_non_finite_series(self, client, rising_closes):
        points = ",".join(
            f'{{"date": "d{i}", "close": {c}}}' for i, c in enumerate(rising_closes)
        )
        body = '{"prices": [' + points + ', {"date": "d60", "close": NaN}]}'

        response = client.post(
            "/api/v1/indicators/calculate",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid price series"

    def test_symbol(self, client, fake_market, falling_closes):
        fake_market["closes"]["AAPL"] = falling_closes

        response = client.get("/api/v1/indicators/aapl")

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "AAPL"
        assert body["period"] == "1Y"
        assert body["indicators"]["rsi"] == pytest.approx(0.0)

    def test_symbol_not_found(self, client, fake_market):
        assert client.get("/api/v1/indicators/NOPE").status_code == 404

    def test_symbol_short_history(self, client, fake_market):
        fake_market["closes"]["AAPL"] = [100.0] * 30

        response = client.get("/api/v1/indicators/AAPL?period=1M")

        assert response.status_code == 400


class TestMarketEndpoints:
    def test_quote(self, client, fake_market, aapl_quote):
        fake_market["quotes"]["AAPL"] = aapl_quote

        response = client.get("/api/v1/market/aapl")

        assert response.status_code == 200
        assert response.json()["current_price"] == 159.0

    def test_quote_not_found(self, client, fake_market):
        response = client.get("/api/v1/market/NOPE")

        assert response.status_code == 404
        assert response.json()["detail"] == "Stock not found"

    def test_chart(self, client, fake_market, rising_closes):
        fake_market["closes"]["AAPL"] = rising_closes

        response = client.get("/api/v1/market/AAPL/chart?period=3M")

        assert response.status_code == 200
        body = response.json()
        assert body["period"] == "3M"
        assert len(body["data"]) == 60

    def test_chart_invalid_period(self, client, fake_market):
        assert client.get("/api/v1/market/AAPL/chart?period=5Y").status_code == 422


class TestAnalysisEndpoints:
    def test_forecast(self, client, fake_market, rising_closes):
        fake_market["closes"]["AAPL"] = rising_closes

        response = client.get("/api/v1/analysis/forecast/AAPL")

        assert response.status_code == 200
        assert response.json()["prediction"] == pytest.approx(189.0)

    def test_forecast_unavailable(self, client, fake_market):
        response = client.get("/api/v1/analysis/forecast/NOPE")

        assert response.status_code == 404
        assert response.json()["detail"] == "Unable to generate forecast"

    def test_sentiment(self, client, fake_market, aapl_quote):
        fake_market["quotes"]["AAPL"] = aapl_quote
        fake_market["closes"]["AAPL"] = [165.0] * 5

        response = client.get("/api/v1/analysis/sentiment/AAPL")

        assert response.status_code == 200
        assert response.json()["score"] == 35

    def test_dashboard(self, client, fake_market, aapl_quote, rising_closes):
        fake_market["quotes"]["AAPL"] = aapl_quote
        fake_market["closes"]["AAPL"] = rising_closes

        response = client.get("/api/v1/analysis/dashboard/AAPL")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"stock", "chart", "forecast", "sentiment"}
        assert body["stock"]["symbol"] == "AAPL"

    def test_dashboard_not_found(self, client, fake_market):
        assert client.get("/api/v1/analysis/dashboard/NOPE").status_code == 404
