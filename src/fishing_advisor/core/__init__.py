"""Core data structures: places, configuration and errors."""

from .config import AdvisorConfig
from .errors import (
    FishingAdvisorError,
    GeolocationDenied,
    GeolocationError,
    GeolocationTimeout,
    GeolocationUnavailable,
    NetworkFailure,
    PlaceNotFound,
    RateLimited,
    WeatherApiError,
    WeatherApiNotConfigured,
)
from .location import (
    PRESET_CITIES,
    Place,
    get_preset_city_names,
    pick_place_name,
    resolve_by_coordinates,
    resolve_by_name,
)

__all__ = [
    # Config
    "AdvisorConfig",
    # Location
    "Place",
    "PRESET_CITIES",
    "resolve_by_name",
    "resolve_by_coordinates",
    "pick_place_name",
    "get_preset_city_names",
    # Errors
    "FishingAdvisorError",
    "PlaceNotFound",
    "NetworkFailure",
    "RateLimited",
    "WeatherApiError",
    "WeatherApiNotConfigured",
    "GeolocationError",
    "GeolocationDenied",
    "GeolocationUnavailable",
    "GeolocationTimeout",
]
