# ABOUTME: Dependency container for weather queries using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and the provider credential read from config.

import httpx
from pydantic import BaseModel, ConfigDict

from src import config


class WeatherDeps(BaseModel):
    """Dependencies passed to every orchestrated weather query."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    api_key: str | None = None


def create_http_client(timeout: float = config.HTTP_TIMEOUT) -> httpx.AsyncClient:
    """Create the httpx client shared by all provider calls.

    No retry transport: failed calls surface immediately as UpstreamError.
    """
    return httpx.AsyncClient(timeout=timeout)


def create_deps(http_client: httpx.AsyncClient | None = None) -> WeatherDeps:
    """Build WeatherDeps from the process configuration."""
    return WeatherDeps(
        http_client=http_client or create_http_client(),
        api_key=config.OPENWEATHER_API_KEY,
    )
