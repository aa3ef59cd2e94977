"""Approximate position lookup with fallback to the default place."""

from __future__ import annotations

import logging

import requests

from ..core.config import AdvisorConfig
from ..core.errors import (
    FishingAdvisorError,
    GeolocationDenied,
    GeolocationTimeout,
    GeolocationUnavailable,
)
from ..core.location import Place, resolve_by_coordinates

logger = logging.getLogger(__name__)

GEOLOCATION_URL = "http://ip-api.com/json/"
GEOLOCATION_TIMEOUT = 10


def locate(timeout: float = GEOLOCATION_TIMEOUT) -> tuple[float, float]:
    """Look up the caller's approximate position from their IP address.

    Returns:
        (latitude, longitude)

    Raises:
        GeolocationTimeout: If the lookup takes longer than ``timeout``
        GeolocationDenied: If the service refuses the request
        GeolocationUnavailable: On any other failure
    """
    try:
        response = requests.get(
            GEOLOCATION_URL,
            params={"fields": "status,message,lat,lon"},
            timeout=timeout,
        )
    except requests.Timeout as e:
        raise GeolocationTimeout() from e
    except requests.RequestException as e:
        raise GeolocationUnavailable() from e

    if response.status_code == 403:
        raise GeolocationDenied()
    if response.status_code != 200:
        raise GeolocationUnavailable()

    try:
        data = response.json()
    except ValueError as e:
        raise GeolocationUnavailable() from e

    if data.get("status") != "success":
        logger.warning(f"Geolocation failed: {data.get('message', 'unknown error')}")
        raise GeolocationUnavailable()

    return float(data["lat"]), float(data["lon"])


def locate_place(config: AdvisorConfig | None = None) -> Place:
    """Find the caller's place, falling back to the default place.

    Any geolocation or reverse geocoding failure is logged and the
    configured default city is returned instead. Nothing is retried.
    """
    config = config or AdvisorConfig.from_env()
    try:
        latitude, longitude = locate(timeout=GEOLOCATION_TIMEOUT)
        place = resolve_by_coordinates(latitude, longitude, config=config)
    except FishingAdvisorError as e:
        logger.warning(f"{e.user_message} Using {config.default_city} instead.")
        return Place.default(config)

    logger.info(f"Located at {place.name} ({place.latitude}, {place.longitude})")
    return place
