"""Weather data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def wind_compass(degrees: float) -> str:
    """Convert a meteorological wind direction to a 16-point compass label."""
    return COMPASS_POINTS[int((degrees % 360) / 22.5 + 0.5) % 16]


@dataclass
class WeatherObservation:
    """Weather at one place for one instant or forecast point.

    Attributes:
        temperature: Air temperature in Celsius
        humidity: Relative humidity percentage (0-100)
        pressure: Sea-level pressure in hPa
        wind_speed: Wind speed in km/h
        wind_direction: Direction the wind blows from, degrees (0-359)
        cloud_cover: Cloud coverage percentage (0-100)
        description: Human-readable conditions description
        icon: Provider icon token
        observed_at: Time of the observation, in the place's local offset
        visibility_km: Visibility in kilometers (current observation only)
        sunrise: Today's sunrise (current observation only)
        sunset: Today's sunset (current observation only)
        temp_min: Provider-reported minimum for the sample, if any
        temp_max: Provider-reported maximum for the sample, if any
    """
    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    description: str
    icon: str = ""
    observed_at: datetime | None = None
    visibility_km: float | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None
    temp_min: float | None = None
    temp_max: float | None = None

    @property
    def has_sun_times(self) -> bool:
        return self.sunrise is not None and self.sunset is not None

    @property
    def wind_compass(self) -> str:
        return wind_compass(self.wind_direction)

    @property
    def local_date(self) -> date | None:
        """Calendar date of the observation in the place's local time."""
        return self.observed_at.date() if self.observed_at else None


@dataclass(frozen=True)
class ForecastDay:
    """One day of the fishing outlook.

    Attributes:
        date: Local calendar date
        temp_min: Lowest temperature of the day in Celsius
        temp_max: Highest temperature of the day in Celsius
        description: Conditions at the representative sample
        icon: Provider icon token
        humidity: Relative humidity percentage
        pressure: Pressure in hPa
        wind_speed: Wind speed in km/h
        wind_direction: Wind direction in degrees
        cloud_cover: Cloud coverage percentage
        fishing_index: Overall fishing index (0-100)
        fishing_advice: Short advice label
    """
    date: date
    temp_min: float
    temp_max: float
    description: str
    icon: str
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    fishing_index: int
    fishing_advice: str

    @property
    def temperature_range(self) -> dict[str, float]:
        return {"min": self.temp_min, "max": self.temp_max}
