# ABOUTME: Exception taxonomy for weather lookups.
# ABOUTME: Separates missing credentials, provider failures, and unknown city names.


class WeatherError(Exception):
    """Base class for every failure raised by the weather core."""


class ConfigurationError(WeatherError):
    """No provider credential is configured; raised before any request is sent."""


class UpstreamError(WeatherError):
    """The provider call failed or returned a payload we could not parse."""


class NotFoundError(WeatherError):
    """A city name matched no locations."""
