# ABOUTME: Reusable builders for mocked OpenWeatherMap responses.
# ABOUTME: Shared by conftest fixtures and test modules that need custom payloads.

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import httpx

# 2025-01-15 00:00 UTC, a Wednesday
DAY_START = int(datetime(2025, 1, 15, tzinfo=timezone.utc).timestamp())


def make_response(json_data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def make_raw_response(content: bytes, status_code: int = 200) -> httpx.Response:
    """Response with a literal body, for payloads json.dumps would refuse to write (e.g. 1e400)."""
    return httpx.Response(
        status_code=status_code,
        content=content,
        headers={"content-type": "application/json"},
        request=httpx.Request("GET", "https://test"),
    )


def routing_client(routes: dict) -> httpx.AsyncClient:
    """Mock client that answers each URL from ``routes``; values may be responses or exceptions."""
    mock = AsyncMock(spec=httpx.AsyncClient)

    async def _get(url, params=None):
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        return result

    mock.get.side_effect = _get
    return mock


def forecast_point(dt: int, temp: float, **overrides) -> dict:
    point = {
        "dt": dt,
        "main": {"temp": temp, "humidity": 70},
        "weather": [{"main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "wind": {"speed": 3.0},
        "pop": 0.2,
    }
    point.update(overrides)
    return point
