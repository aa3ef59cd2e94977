"""Weather integration for the fishing advisor."""

from .geolocation import locate, locate_place
from .models import ForecastDay, WeatherObservation, wind_compass
from .service import WeatherService, parse_current, parse_forecast

__all__ = [
    "WeatherObservation",
    "ForecastDay",
    "wind_compass",
    "WeatherService",
    "parse_current",
    "parse_forecast",
    "locate",
    "locate_place",
]
