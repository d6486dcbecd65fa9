# ABOUTME: Orchestrates a full dashboard query from a city name or coordinates.
# ABOUTME: Runs current conditions, forecast, and UV lookups concurrently and merges them into one report.

import asyncio
import logging
from datetime import tzinfo

from src.deps import WeatherDeps
from src.errors import NotFoundError
from src.insights import build_insights
from src.models import Location, WeatherReport
from src.weather_service import get_current_weather, get_forecast, get_uv_index, require_api_key, search_locations

logger = logging.getLogger(__name__)


async def _fetch_report(
    deps: WeatherDeps,
    lat: float,
    lon: float,
    location: Location | None = None,
    tz: tzinfo | None = None,
) -> WeatherReport:
    client, key = deps.http_client, deps.api_key
    # get_uv_index never raises, so gather only fails on conditions or forecast
    snapshot, forecast, uv_index = await asyncio.gather(
        get_current_weather(client, key, lat, lon),
        get_forecast(client, key, lat, lon, tz),
        get_uv_index(client, key, lat, lon),
    )
    snapshot = snapshot.model_copy(update={"uv_index": uv_index})
    return WeatherReport(
        snapshot=snapshot,
        forecast=forecast,
        location=location,
        insights=build_insights(snapshot),
    )


async def get_weather_by_coordinates(
    deps: WeatherDeps, lat: float, lon: float, tz: tzinfo | None = None
) -> WeatherReport:
    """Fetch conditions, forecast, and UV for a coordinate pair (e.g. from device geolocation)."""
    require_api_key(deps.api_key)
    logger.info("Fetching weather for %.4f,%.4f", lat, lon)
    return await _fetch_report(deps, lat, lon, tz=tz)


async def get_weather_by_city(deps: WeatherDeps, city_name: str, tz: tzinfo | None = None) -> WeatherReport:
    """Resolve a city name and fetch weather for its most relevant match.

    Raises:
        NotFoundError: the geocoder returned no locations; no weather calls are made.
    """
    require_api_key(deps.api_key)
    locations = await search_locations(deps.http_client, deps.api_key, city_name)
    if not locations:
        logger.info("No locations found for %r", city_name)
        raise NotFoundError(f"City not found: {city_name}")

    location = locations[0]
    logger.info("Resolved %r to %s, %s", city_name, location.name, location.country)
    return await _fetch_report(deps, location.lat, location.lon, location=location, tz=tz)
