"""Daily fishing outlook from a multi-day forecast series."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..weather.models import ForecastDay, WeatherObservation
from .index import score_observation

DEFAULT_FORECAST_DAYS = 5
REPRESENTATIVE_HOUR = time(12, 0)


def pick_representative(
    samples: list[WeatherObservation],
    day: date
) -> WeatherObservation | None:
    """Pick the sample of a day closest to local noon.

    Only samples on that calendar day are considered. On a tie the first
    sample in series order wins.
    """
    best: WeatherObservation | None = None
    best_distance: timedelta | None = None

    for sample in samples:
        if sample.local_date != day:
            continue
        noon = datetime.combine(day, REPRESENTATIVE_HOUR, tzinfo=sample.observed_at.tzinfo)
        distance = abs(sample.observed_at - noon)
        if best_distance is None or distance < best_distance:
            best, best_distance = sample, distance

    return best


def _temperature_range(day_samples: list[WeatherObservation]) -> tuple[float, float]:
    lows = [s.temp_min if s.temp_min is not None else s.temperature for s in day_samples]
    highs = [s.temp_max if s.temp_max is not None else s.temperature for s in day_samples]
    return min(lows), max(highs)


def summarize_forecast(
    samples: list[WeatherObservation],
    days: int = DEFAULT_FORECAST_DAYS,
    start: date | None = None
) -> list[ForecastDay]:
    """Score one representative sample per day of a forecast series.

    Args:
        samples: Timestamped forecast samples, in series order
        days: Number of days to summarize
        start: First day. Defaults to the local date of the first sample.

    Returns:
        One ForecastDay per day that has samples, in date order
    """
    dated = [s for s in samples if s.observed_at is not None]
    if not dated:
        return []

    first_day = start or dated[0].local_date
    outlook = []

    for offset in range(days):
        day = first_day + timedelta(days=offset)
        sample = pick_representative(dated, day)
        if sample is None:
            continue

        day_samples = [s for s in dated if s.local_date == day]
        temp_min, temp_max = _temperature_range(day_samples)
        result = score_observation(sample)

        outlook.append(ForecastDay(
            date=day,
            temp_min=temp_min,
            temp_max=temp_max,
            description=sample.description,
            icon=sample.icon,
            humidity=sample.humidity,
            pressure=sample.pressure,
            wind_speed=sample.wind_speed,
            wind_direction=sample.wind_direction,
            cloud_cover=sample.cloud_cover,
            fishing_index=result.overall,
            fishing_advice=result.short_advice,
        ))

    return outlook
