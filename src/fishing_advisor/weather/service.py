"""Weather service for fetching current conditions and forecasts."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import requests

from ..core.config import AdvisorConfig
from ..core.errors import (
    NetworkFailure,
    PlaceNotFound,
    RateLimited,
    WeatherApiError,
    WeatherApiNotConfigured,
)
from ..core.location import Place
from .models import WeatherObservation

logger = logging.getLogger(__name__)

# OpenWeatherMap reports wind in m/s and visibility in meters
MS_TO_KMH = 3.6
DEFAULT_VISIBILITY_M = 10000


def _local_tz(offset_seconds: int | None) -> timezone:
    return timezone(timedelta(seconds=offset_seconds or 0))


def _from_epoch(value: int, tz: timezone) -> datetime:
    return datetime.fromtimestamp(value, tz)


def _parse_sample(item: dict, tz: timezone) -> WeatherObservation:
    """Parse the fields shared by current and forecast payloads."""
    main = item["main"]
    wind = item.get("wind", {})
    weather = item["weather"][0]
    return WeatherObservation(
        temperature=main["temp"],
        humidity=main["humidity"],
        pressure=main.get("sea_level", main["pressure"]),
        wind_speed=wind.get("speed", 0) * MS_TO_KMH,
        wind_direction=wind.get("deg", 0),
        cloud_cover=item.get("clouds", {}).get("all", 0),
        description=weather["description"],
        icon=weather.get("icon", ""),
        observed_at=_from_epoch(item["dt"], tz),
        temp_min=main.get("temp_min"),
        temp_max=main.get("temp_max"),
    )


def parse_current(payload: dict) -> WeatherObservation:
    """Normalize an OpenWeatherMap current weather payload.

    Raises:
        WeatherApiError: If the payload is missing required fields
    """
    if not isinstance(payload, dict):
        logger.warning(f"Unexpected current weather payload: {type(payload).__name__}")
        raise WeatherApiError()
    try:
        tz = _local_tz(payload.get("timezone"))
        observation = _parse_sample(payload, tz)
        observation.visibility_km = payload.get("visibility", DEFAULT_VISIBILITY_M) / 1000
        observation.sunrise = _from_epoch(payload["sys"]["sunrise"], tz)
        observation.sunset = _from_epoch(payload["sys"]["sunset"], tz)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        logger.warning(f"Malformed current weather payload: {e!r}")
        raise WeatherApiError() from e
    return observation


def parse_forecast(payload: dict) -> list[WeatherObservation]:
    """Normalize an OpenWeatherMap 5 day / 3 hour forecast payload.

    Raises:
        WeatherApiError: If the payload is missing required fields
    """
    if not isinstance(payload, dict):
        logger.warning(f"Unexpected forecast payload: {type(payload).__name__}")
        raise WeatherApiError()
    try:
        tz = _local_tz(payload.get("city", {}).get("timezone"))
        return [_parse_sample(item, tz) for item in payload["list"]]
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        logger.warning(f"Malformed forecast payload: {e!r}")
        raise WeatherApiError() from e


class WeatherService:
    """Service to get current weather and forecasts from OpenWeatherMap.

    Requests are issued one at a time and never retried. Failures raise a
    FishingAdvisorError subclass for the caller to report.
    """

    CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
    FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"

    def __init__(self, config: AdvisorConfig | None = None):
        """Initialize the weather service.

        Args:
            config: Advisor configuration. Defaults to environment settings.
        """
        self.config = config or AdvisorConfig.from_env()

    def has_api_configured(self) -> bool:
        """Check if a weather API key is configured."""
        return self.config.has_api_key

    def get_current(self, place: Place) -> WeatherObservation:
        """Get current weather for a place.

        Raises:
            PlaceNotFound, NetworkFailure, RateLimited, WeatherApiError
        """
        payload = self._request(self.CURRENT_URL, place)
        logger.info(f"Fetched current weather for {place.name}")
        return parse_current(payload)

    def get_forecast(self, place: Place) -> list[WeatherObservation]:
        """Get the 3-hourly forecast series for a place.

        Raises:
            PlaceNotFound, NetworkFailure, RateLimited, WeatherApiError
        """
        payload = self._request(self.FORECAST_URL, place)
        samples = parse_forecast(payload)
        logger.info(f"Fetched {len(samples)} forecast samples for {place.name}")
        return samples

    def _request(self, url: str, place: Place) -> dict:
        if not self.has_api_configured():
            raise WeatherApiNotConfigured()

        params = {
            **place.to_params(),
            "appid": self.config.api_key,
            "units": "metric",
            "lang": self.config.lang,
        }
        try:
            response = requests.get(url, params=params, timeout=self.config.timeout)
        except requests.Timeout as e:
            logger.warning(f"Weather request timed out for {place.name}")
            raise NetworkFailure("The weather service did not respond in time.") from e
        except requests.RequestException as e:
            logger.warning(f"Weather request failed for {place.name}: {e}")
            raise NetworkFailure() from e

        if response.status_code == 404:
            logger.warning(f"Weather provider does not know '{place.name}'")
            raise PlaceNotFound(f"City '{place.name}' not found.")
        if response.status_code == 429:
            raise RateLimited()
        if response.status_code == 401:
            raise WeatherApiError("The weather API key was rejected.")
        if response.status_code != 200:
            logger.warning(f"Weather provider returned status {response.status_code}")
            raise WeatherApiError()

        try:
            return response.json()
        except ValueError as e:
            raise WeatherApiError() from e
