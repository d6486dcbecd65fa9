# ABOUTME: Derives plain-language hints from a weather snapshot.
# ABOUTME: Covers activity hints, air quality from visibility, UV level, compass direction, and °F conversion.

from src.models import WeatherInsights, WeatherSnapshot
from src.weather_service import round_half_up

COMPASS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def recommendation(snapshot: WeatherSnapshot) -> str:
    """Pick an activity hint by keyword-matching the condition string."""
    condition = snapshot.condition.lower()
    if "rain" in condition or "storm" in condition:
        return "Don't forget your umbrella! Indoor activities recommended."
    if "sunny" in condition or "clear" in condition:
        if snapshot.uv_index > 6:
            return "Great weather for outdoor activities! UV index is high, so don't forget sunscreen."
        return "Perfect weather for outdoor activities! UV index is moderate."
    if "cloud" in condition:
        return "Good weather for outdoor activities. No need for sunscreen today."
    if "snow" in condition:
        return "Bundle up! Perfect weather for winter activities."
    return "Check current conditions before heading out."


def air_quality(snapshot: WeatherSnapshot) -> str:
    """Rough air quality estimate from visibility in km."""
    if snapshot.visibility >= 10:
        return "Air quality is good. Perfect for outdoor activities."
    if snapshot.visibility >= 5:
        return "Air quality is moderate. Outdoor activities are generally safe."
    return "Air quality may be poor. Consider limiting outdoor activities."


def uv_level(uv_index: int) -> str:
    if uv_index <= 2:
        return "Low"
    if uv_index <= 5:
        return "Moderate"
    if uv_index <= 7:
        return "High"
    if uv_index <= 10:
        return "Very High"
    return "Extreme"


def wind_direction(degrees: int) -> str:
    """Eight-point compass label for a wind bearing."""
    return COMPASS[round_half_up(degrees / 45) % 8]


def build_insights(snapshot: WeatherSnapshot) -> WeatherInsights:
    return WeatherInsights(
        recommendation=recommendation(snapshot),
        air_quality=air_quality(snapshot),
        uv_level=uv_level(snapshot.uv_index),
        wind_direction=wind_direction(snapshot.wind_direction),
    )


def to_fahrenheit(celsius: float) -> int:
    return round_half_up(celsius * 9 / 5 + 32)


def convert_temperature(celsius: float, unit: str = "C") -> float:
    """Convert a normalized Celsius value for display in ``unit`` ("C" or "F")."""
    unit = unit.upper()
    if unit == "F":
        return to_fahrenheit(celsius)
    if unit != "C":
        raise ValueError(f"Unsupported temperature unit: {unit!r}")
    return celsius
