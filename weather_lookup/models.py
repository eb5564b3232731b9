# ABOUTME: Pydantic BaseModels for geocoding results, positions, and weather snapshots.
# ABOUTME: Defines the structured types passed between the pipelines, the page, and the renderer.

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Structured address from Nominatim; every part may be absent."""

    city: str | None = None
    town: str | None = None
    village: str | None = None
    municipality: str | None = None
    state: str | None = None
    country: str | None = None


class Suggestion(BaseModel):
    """One forward geocoding match offered in the suggestion panel."""

    place_id: int
    display_name: str
    address: Address = Field(default_factory=Address)


class Position(BaseModel):
    """A coordinate pair produced by a position provider."""

    latitude: float
    longitude: float
    accuracy: float | None = None


class PositionOptions(BaseModel):
    """Options for a one-shot position request."""

    model_config = ConfigDict(frozen=True)

    enable_high_accuracy: bool = True
    timeout: float = 5.0
    maximum_age: float = 0


class HourlyForecast(BaseModel):
    """One hour of the 24-hour forecast."""

    datetime: str
    temp: int
    conditions: str

    @property
    def hour_label(self) -> str:
        return self.datetime.split(":")[0] + ":00"


class WeatherSnapshot(BaseModel):
    """Current conditions plus the hourly forecast for one resolved location."""

    location: str
    temperature: int
    wind_speed: int
    precipitation: int
    humidity: int
    conditions: str
    hourly_forecast: list[HourlyForecast] = []


class Bounds(BaseModel):
    """Screen region occupied by the suggestion panel."""

    model_config = ConfigDict(frozen=True)

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.left + self.width and self.top <= y <= self.top + self.height
