# ABOUTME: Immutable Pydantic models for normalized weather data.
# ABOUTME: Serialize with by_alias=True to get the camelCase shapes the dashboard UI consumes.

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Location(_Frozen):
    """A place returned by the geocoding search."""

    name: str
    country: str
    state: str | None = None
    lat: float
    lon: float


class WeatherSnapshot(_Frozen):
    """Current conditions for one location, in metric display units."""

    location: str
    country: str
    temperature: int
    condition: str
    humidity: int
    wind_speed: int
    wind_direction: int = 0
    pressure: int
    visibility: int
    uv_index: int = 0
    feels_like: int
    icon: str
    description: str
    sunrise: int
    sunset: int


class ForecastDay(_Frozen):
    """One calendar day summarized from the provider's 3-hour forecast points."""

    date: str
    max_temp: int
    min_temp: int
    condition: str
    icon: str
    humidity: int
    wind_speed: int
    description: str
    pop: int = 0


class WeatherInsights(_Frozen):
    """Plain-language hints derived from a snapshot."""

    recommendation: str
    air_quality: str
    uv_level: str
    wind_direction: str


class WeatherReport(_Frozen):
    """Complete result of one dashboard query."""

    snapshot: WeatherSnapshot
    forecast: tuple[ForecastDay, ...] = ()
    location: Location | None = None
    insights: WeatherInsights | None = None
