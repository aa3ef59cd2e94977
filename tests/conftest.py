"""Shared fixtures and factories for fishing-advisor tests."""

from datetime import datetime, timedelta, timezone

import pytest

from fishing_advisor.weather.models import WeatherObservation

CST = timezone(timedelta(hours=8))

# 2024-05-12 12:00 +08:00
NOON_EPOCH = 1715486400
SUNRISE_EPOCH = 1715461200  # 05:00 +08:00
SUNSET_EPOCH = 1715511600  # 19:00 +08:00


def make_observation(observed_at=None, **overrides):
    """Build an observation with ideal fishing conditions by default."""
    values = {
        "temperature": 20,
        "humidity": 55,
        "pressure": 1015,
        "wind_speed": 3,
        "wind_direction": 90,
        "cloud_cover": 50,
        "description": "scattered clouds",
        "icon": "03d",
        "observed_at": observed_at,
    }
    values.update(overrides)
    return WeatherObservation(**values)


def make_series(start, count, step_hours=3, **overrides):
    """Build a forecast series of ``count`` samples starting at ``start``."""
    return [
        make_observation(observed_at=start + timedelta(hours=step_hours * i), **overrides)
        for i in range(count)
    ]


@pytest.fixture
def current_observation():
    return make_observation(
        observed_at=datetime(2024, 5, 12, 12, 0, tzinfo=CST),
        visibility_km=10.0,
        sunrise=datetime(2024, 5, 12, 5, 0, tzinfo=CST),
        sunset=datetime(2024, 5, 12, 19, 0, tzinfo=CST),
    )


@pytest.fixture
def forecast_samples():
    return make_series(datetime(2024, 5, 12, 0, 0, tzinfo=CST), 40)


@pytest.fixture
def current_payload():
    return {
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {
            "temp": 22.5,
            "feels_like": 22.0,
            "pressure": 1012,
            "sea_level": 1014,
            "humidity": 65,
        },
        "visibility": 8000,
        "wind": {"speed": 5, "deg": 200},
        "clouds": {"all": 75},
        "dt": NOON_EPOCH,
        "sys": {"country": "CN", "sunrise": SUNRISE_EPOCH, "sunset": SUNSET_EPOCH},
        "timezone": 28800,
        "name": "Baoding",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload():
    return {
        "cod": "200",
        "cnt": 16,
        "list": [
            {
                "dt": NOON_EPOCH + i * 10800,
                "main": {
                    "temp": 20 + (i % 4),
                    "temp_min": 18 + (i % 4),
                    "temp_max": 21 + (i % 4),
                    "pressure": 1016,
                    "humidity": 60,
                },
                "weather": [{"description": "few clouds", "icon": "02d"}],
                "clouds": {"all": 20},
                "wind": {"speed": 2, "deg": 90},
            }
            for i in range(16)
        ],
        "city": {"name": "Baoding", "timezone": 28800},
    }
