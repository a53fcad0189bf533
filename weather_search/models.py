# ABOUTME: Pydantic BaseModels for geocoding hits and current weather/marine snapshots.
# ABOUTME: Defines structured types for Open-Meteo data used throughout the app.

from pydantic import BaseModel, ConfigDict


class LocationCandidate(BaseModel):
    """One geocoding search hit."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    latitude: float
    longitude: float
    admin1: str | None = None
    admin2: str | None = None
    country: str | None = None
    country_code: str | None = None
    timezone: str | None = None
    elevation: float | None = None
    population: int | None = None

    @property
    def display_name(self) -> str:
        """Name followed by region and country when known, e.g. "Denver, Colorado, United States"."""
        parts = [self.name]
        if self.admin1:
            parts.append(self.admin1)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)


class WeatherUnits(BaseModel):
    """Unit strings from the forecast endpoint's current_units block."""

    model_config = ConfigDict(frozen=True)

    temperature: str = "°C"
    humidity: str = "%"
    wind_speed: str = "km/h"
    wind_direction: str = "°"


class WeatherSnapshot(BaseModel):
    """Current conditions for the selected location at fetch time."""

    model_config = ConfigDict(frozen=True, strict=True)

    time: str
    temperature: float
    humidity: float
    weather_code: int
    wind_speed: float
    wind_direction: float
    units: WeatherUnits = WeatherUnits()
    timezone: str
    elevation: float | None = None


class MarineUnits(BaseModel):
    """Unit strings from the marine endpoint's current_units block."""

    model_config = ConfigDict(frozen=True)

    wave_height: str = "m"
    sea_surface_temperature: str = "°C"


class MarineSnapshot(BaseModel):
    """Current sea state for the selected location."""

    model_config = ConfigDict(frozen=True, strict=True)

    time: str
    wave_height: float
    sea_surface_temperature: float
    units: MarineUnits = MarineUnits()
