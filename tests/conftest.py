# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Provides canned OpenWeatherMap payloads and a deps wired to a URL-routing mock client.

import pytest

from src.deps import WeatherDeps
from src.weather_service import CURRENT_URL, FORECAST_URL, GEOCODING_URL, UV_URL
from tests.helpers import DAY_START, forecast_point, make_response, routing_client


@pytest.fixture()
def geocoding_payload():
    return [
        {"name": "London", "country": "GB", "state": "England", "lat": 51.5073, "lon": -0.1276},
        {"name": "London", "country": "CA", "state": "Ontario", "lat": 42.9832, "lon": -81.2433},
    ]


@pytest.fixture()
def current_payload():
    return {
        "name": "London",
        "main": {"temp": 7.6, "feels_like": 4.4, "humidity": 81, "pressure": 1012},
        "weather": [{"main": "Rain", "description": "light rain", "icon": "10d"}],
        "wind": {"speed": 3.0, "deg": 240},
        "visibility": 8000,
        "sys": {"country": "GB", "sunrise": 1736928000, "sunset": 1736958000},
    }


@pytest.fixture()
def forecast_payload():
    """Eight 3-hour points covering 2025-01-15 UTC, then two points on each of the next five days."""
    points = [forecast_point(DAY_START + i * 3 * 3600, 2.0 + i) for i in range(8)]
    for day in range(1, 6):
        base = DAY_START + day * 86400
        points.append(forecast_point(base + 9 * 3600, 10.0 + day))
        points.append(forecast_point(base + 15 * 3600, 12.0 + day))
    return {"list": points}


@pytest.fixture()
def uv_payload():
    return {"lat": 51.5, "lon": -0.13, "value": 2.6}


@pytest.fixture()
def routes(geocoding_payload, current_payload, forecast_payload, uv_payload):
    return {
        GEOCODING_URL: make_response(geocoding_payload),
        CURRENT_URL: make_response(current_payload),
        FORECAST_URL: make_response(forecast_payload),
        UV_URL: make_response(uv_payload),
    }


@pytest.fixture()
def deps(routes):
    return WeatherDeps(http_client=routing_client(routes), api_key="test-key")
