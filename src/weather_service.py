# ABOUTME: Service layer for OpenWeatherMap API calls and response normalization.
# ABOUTME: Handles location search, current conditions, UV index, and 5-day forecast aggregation.

import logging
import math
from datetime import date, datetime, tzinfo

import httpx

from src import config
from src.errors import ConfigurationError, UpstreamError
from src.icons import weather_icon
from src.models import ForecastDay, Location, WeatherSnapshot

logger = logging.getLogger(__name__)

GEOCODING_URL = f"{config.OPENWEATHER_GEO_URL}/direct"
CURRENT_URL = f"{config.OPENWEATHER_BASE_URL}/weather"
UV_URL = f"{config.OPENWEATHER_BASE_URL}/uvi"
FORECAST_URL = f"{config.OPENWEATHER_BASE_URL}/forecast"

SEARCH_LIMIT = 5
FORECAST_DAYS = 5
DEFAULT_VISIBILITY_M = 10000

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Everything a bad payload can throw while we pick it apart
_PAYLOAD_ERRORS = (KeyError, IndexError, TypeError, ValueError)


def require_api_key(api_key: str | None) -> str:
    """Return the credential or raise ConfigurationError if it is missing."""
    if not api_key:
        raise ConfigurationError("OpenWeatherMap API key is not configured; set OPENWEATHER_API_KEY")
    return api_key


def round_half_up(value: float) -> int:
    """Round like the dashboard does: .5 always goes up, so -2.5 becomes -2.

    Raises:
        ValueError: value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot round non-finite value {value!r}")
    return math.floor(value + 0.5)


def ms_to_kmh(speed: float) -> int:
    return round_half_up(speed * 3.6)


async def _get_json(client: httpx.AsyncClient, url: str, params: dict, what: str):
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPError as e:
        logger.error("Error fetching %s: %s", what, e)
        raise UpstreamError(f"Failed to fetch {what}") from e
    except ValueError as e:
        logger.error("Invalid JSON in %s response: %s", what, e)
        raise UpstreamError(f"Failed to fetch {what}") from e


async def search_locations(client: httpx.AsyncClient, api_key: str | None, query: str) -> list[Location]:
    """Search the geocoding API for up to five places matching a free-text query.

    An empty list means nothing matched; it is not an error here.
    """
    key = require_api_key(api_key)
    data = await _get_json(
        client,
        GEOCODING_URL,
        {"q": query, "limit": SEARCH_LIMIT, "appid": key},
        "locations",
    )
    try:
        return [
            Location(name=r["name"], country=r["country"], state=r.get("state"), lat=r["lat"], lon=r["lon"])
            for r in data[:SEARCH_LIMIT]
        ]
    except _PAYLOAD_ERRORS as e:
        logger.error("Malformed geocoding response for %r: %s", query, e)
        raise UpstreamError("Failed to search locations") from e


def parse_current_weather(raw: dict) -> WeatherSnapshot:
    """Normalize a /weather payload into a WeatherSnapshot with uv_index left at 0.

    Visibility falls back to 10 km only when the key is absent or null; a reported 0 stays 0.
    """
    main = raw["main"]
    weather = raw["weather"][0]
    wind = raw.get("wind") or {}
    visibility = raw.get("visibility")
    if visibility is None:
        visibility = DEFAULT_VISIBILITY_M
    sys_info = raw["sys"]
    return WeatherSnapshot(
        location=raw["name"],
        country=sys_info["country"],
        temperature=round_half_up(main["temp"]),
        condition=weather["main"],
        humidity=main["humidity"],
        wind_speed=ms_to_kmh(wind.get("speed") or 0),
        wind_direction=wind.get("deg") or 0,
        pressure=main["pressure"],
        visibility=round_half_up(visibility / 1000),
        uv_index=0,
        feels_like=round_half_up(main["feels_like"]),
        icon=weather_icon(weather.get("icon")),
        description=weather["description"],
        sunrise=sys_info["sunrise"],
        sunset=sys_info["sunset"],
    )


async def get_current_weather(client: httpx.AsyncClient, api_key: str | None, lat: float, lon: float) -> WeatherSnapshot:
    """Fetch current conditions for a coordinate pair."""
    key = require_api_key(api_key)
    data = await _get_json(
        client,
        CURRENT_URL,
        {"lat": lat, "lon": lon, "appid": key, "units": "metric"},
        "current weather",
    )
    try:
        return parse_current_weather(data)
    except _PAYLOAD_ERRORS as e:
        logger.error("Malformed current weather response: %s", e)
        raise UpstreamError("Failed to fetch current weather") from e


async def get_uv_index(client: httpx.AsyncClient, api_key: str | None, lat: float, lon: float) -> int:
    """Fetch the UV index, returning 0 on any failure.

    UV is a nice-to-have on the dashboard, so problems are logged and never raised.
    """
    if not api_key:
        logger.warning("API key not configured for UV index")
        return 0
    try:
        resp = await client.get(UV_URL, params={"lat": lat, "lon": lon, "appid": api_key})
        resp.raise_for_status()
        return round_half_up(resp.json()["value"])
    except (httpx.HTTPError, *_PAYLOAD_ERRORS) as e:
        logger.warning("Error fetching UV index, defaulting to 0: %s", e)
        return 0


def _day_label(index: int, day: date) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return WEEKDAYS[day.weekday()]


def parse_forecast(raw: dict, tz: tzinfo | None = None) -> list[ForecastDay]:
    """Bucket 3-hour forecast points by calendar day and summarize up to five days.

    Points are grouped by the date of their own timestamp in ``tz`` (host local time
    when None). The first bucket counts as "Today" even when it only covers part of
    the day. Conditions come from the point at index len(bucket) // 2, which is only
    roughly midday.
    """
    buckets: dict[date, list[dict]] = {}
    for item in raw["list"]:
        day = datetime.fromtimestamp(item["dt"], tz).date()
        buckets.setdefault(day, []).append(item)

    result = []
    for index, (day, points) in enumerate(list(buckets.items())[:FORECAST_DAYS]):
        temps = [p["main"]["temp"] for p in points]
        midday = points[len(points) // 2]
        weather = midday["weather"][0]
        result.append(
            ForecastDay(
                date=_day_label(index, day),
                max_temp=round_half_up(max(temps)),
                min_temp=round_half_up(min(temps)),
                condition=weather["main"],
                icon=weather_icon(weather.get("icon")),
                humidity=midday["main"]["humidity"],
                wind_speed=ms_to_kmh((midday.get("wind") or {}).get("speed") or 0),
                description=weather["description"],
                pop=round_half_up((midday.get("pop") or 0) * 100),
            )
        )
    return result


async def get_forecast(
    client: httpx.AsyncClient,
    api_key: str | None,
    lat: float,
    lon: float,
    tz: tzinfo | None = None,
) -> list[ForecastDay]:
    """Fetch the 5-day / 3-hour forecast and aggregate it into daily entries."""
    key = require_api_key(api_key)
    data = await _get_json(
        client,
        FORECAST_URL,
        {"lat": lat, "lon": lon, "appid": key, "units": "metric"},
        "forecast",
    )
    try:
        return parse_forecast(data, tz)
    except _PAYLOAD_ERRORS as e:
        logger.error("Malformed forecast response: %s", e)
        raise UpstreamError("Failed to fetch forecast") from e
