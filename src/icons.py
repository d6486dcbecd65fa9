# ABOUTME: Maps OpenWeatherMap icon codes to display glyphs.
# ABOUTME: Unknown codes fall back to a generic partly-cloudy glyph.

DEFAULT_ICON = "🌤️"

ICON_MAP: dict[str, str] = {
    "01d": "☀️",
    "01n": "🌙",
    "02d": "⛅",
    "02n": "☁️",
    "03d": "☁️",
    "03n": "☁️",
    "04d": "☁️",
    "04n": "☁️",
    "09d": "🌧️",
    "09n": "🌧️",
    "10d": "🌦️",
    "10n": "🌧️",
    "11d": "⛈️",
    "11n": "⛈️",
    "13d": "❄️",
    "13n": "❄️",
    "50d": "🌫️",
    "50n": "🌫️",
}


def weather_icon(code: str | None) -> str:
    """Return the glyph for a provider icon code."""
    return ICON_MAP.get(code, DEFAULT_ICON) if code else DEFAULT_ICON
