# ABOUTME: Environment-driven settings for the weather data core.
# ABOUTME: Loads .env once at import and exposes the provider credential, endpoints, and logging setup.

import logging
import os

from dotenv import load_dotenv

load_dotenv()

OPENWEATHER_API_KEY: str | None = os.environ.get("OPENWEATHER_API_KEY") or None
OPENWEATHER_BASE_URL: str = os.environ.get("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5")
OPENWEATHER_GEO_URL: str = os.environ.get("OPENWEATHER_GEO_URL", "https://api.openweathermap.org/geo/1.0")
HTTP_TIMEOUT: float = float(os.environ.get("WEATHER_HTTP_TIMEOUT", "10"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a single console handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    # httpx logs every request at INFO, which drowns out our own messages
    logging.getLogger("httpx").setLevel(logging.WARNING)
