"""Weather data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WeatherSnapshot(BaseModel):
    """Current weather conditions for a city."""

    model_config = ConfigDict(frozen=True)

    city: str
    country: str = ""
    observed_at: datetime
    temperature: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float  # m/s, as delivered with metric units
    condition_code: str = ""
    description: str = ""

    @property
    def wind_speed_kmh(self) -> float:
        """Wind speed converted from m/s to km/h."""
        return self.wind_speed * 3.6

    @property
    def display_location(self) -> str:
        """Return "City, CC" or just the city when the country is unknown."""
        if self.country:
            return f"{self.city}, {self.country}"
        return self.city


class ForecastSample(BaseModel):
    """A single 3-hour forecast entry."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float
    condition_code: str = ""
    description: str = ""


class SearchResult(BaseModel):
    """Everything rendered for one successful search."""

    model_config = ConfigDict(frozen=True)

    city: str
    current: WeatherSnapshot
    daily: list[ForecastSample] = Field(default_factory=list)
    fetched_at: datetime = Field(default_factory=datetime.now)
