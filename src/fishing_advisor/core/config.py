"""Runtime configuration for the fishing advisor."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CITY = "Beijing"


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class AdvisorConfig:
    """Configuration for weather lookups.

    Attributes:
        api_key: OpenWeatherMap API key
        lang: Language for provider weather descriptions (e.g. "en", "zh_cn")
        default_city: City used when no place is given or geolocation fails
        timeout: HTTP timeout in seconds
        forecast_days: Number of days in the forecast outlook
    """
    api_key: str = ""
    lang: str = "en"
    default_city: str = DEFAULT_CITY
    timeout: float = 10
    forecast_days: int = 5

    def __post_init__(self):
        # Never blank, Place.default resolves it
        self.default_city = (self.default_city or "").strip() or DEFAULT_CITY

    @classmethod
    def from_env(cls, **kwargs) -> AdvisorConfig:
        """Create config from environment variables.

        Environment variables:
            OPENWEATHER_API_KEY: OpenWeatherMap API key
            FISHING_ADVISOR_LANG: Description language
            FISHING_ADVISOR_DEFAULT_CITY: Fallback city
            FISHING_ADVISOR_TIMEOUT: HTTP timeout in seconds
            FISHING_ADVISOR_FORECAST_DAYS: Days in the forecast outlook

        Keyword arguments override environment values.

        Raises:
            ValueError: If a numeric variable is not a number
        """
        values = {
            "api_key": os.getenv("OPENWEATHER_API_KEY", ""),
            "lang": os.getenv("FISHING_ADVISOR_LANG", "en"),
            "default_city": os.getenv("FISHING_ADVISOR_DEFAULT_CITY", DEFAULT_CITY),
            "timeout": _env_number("FISHING_ADVISOR_TIMEOUT", "10", float),
            "forecast_days": _env_number("FISHING_ADVISOR_FORECAST_DAYS", "5", int),
        }
        values.update(kwargs)
        return cls(**values)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
