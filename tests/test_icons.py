# ABOUTME: Tests for the provider icon code to glyph mapping.
# ABOUTME: Covers every documented code and the generic fallback.

import pytest

from src.icons import DEFAULT_ICON, weather_icon


@pytest.mark.parametrize(
    "code, glyph",
    [
        ("01d", "☀️"),
        ("01n", "🌙"),
        ("02d", "⛅"),
        ("02n", "☁️"),
        ("03d", "☁️"),
        ("03n", "☁️"),
        ("04d", "☁️"),
        ("04n", "☁️"),
        ("09d", "🌧️"),
        ("09n", "🌧️"),
        ("10d", "🌦️"),
        ("10n", "🌧️"),
        ("11d", "⛈️"),
        ("11n", "⛈️"),
        ("13d", "❄️"),
        ("13n", "❄️"),
        ("50d", "🌫️"),
        ("50n", "🌫️"),
    ],
)
def test_known_codes(code, glyph):
    assert weather_icon(code) == glyph


@pytest.mark.parametrize("code", ["", "00d", "10x", "01D", None])
def test_unknown_codes_fall_back(code):
    """Unlisted codes map to the generic glyph instead of raising."""
    assert weather_icon(code) == DEFAULT_ICON == "🌤️"
