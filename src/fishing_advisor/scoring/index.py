"""Fishing index calculation from weather conditions.

Each weather factor is scored against an ordered table of rules. Rules are
evaluated top to bottom and the first matching rule gives the factor's score.
The overall index is the mean of the five factor scores.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, NamedTuple

from ..weather.models import WeatherObservation


class ScoreRule(NamedTuple):
    """A tier in a factor's scoring table."""
    matches: Callable[[float], bool]
    score: int
    description: str


TEMPERATURE_RULES = [
    ScoreRule(lambda t: t < 10 or t > 30, 20, "too cold or too hot"),
    ScoreRule(lambda t: t < 15 or t > 25, 60, "tolerable temperature"),
    ScoreRule(lambda t: True, 100, "ideal temperature (15-25C)"),
]

PRESSURE_RULES = [
    ScoreRule(lambda p: 1013 <= p <= 1020, 100, "stable pressure (1013-1020 hPa)"),
    ScoreRule(lambda p: p < 1000 or p > 1030, 40, "extreme pressure"),
    ScoreRule(lambda p: True, 80, "acceptable pressure"),
]

WIND_RULES = [
    ScoreRule(lambda w: w > 20, 20, "strong wind"),
    ScoreRule(lambda w: w > 15, 40, "fresh wind"),
    ScoreRule(lambda w: w > 10, 60, "moderate wind"),
    ScoreRule(lambda w: w > 5, 80, "light breeze"),
    ScoreRule(lambda w: True, 100, "calm"),
]

HUMIDITY_RULES = [
    ScoreRule(lambda h: 40 <= h <= 70, 100, "comfortable humidity (40-70%)"),
    ScoreRule(lambda h: h < 30 or h > 80, 50, "very dry or very humid"),
    ScoreRule(lambda h: True, 80, "acceptable humidity"),
]

# Clear skies below 30% share the fallback tier with 81-90%
CLOUD_RULES = [
    ScoreRule(lambda c: 30 <= c <= 80, 100, "partly cloudy (30-80%)"),
    ScoreRule(lambda c: c > 90, 60, "overcast"),
    ScoreRule(lambda c: True, 70, "clear or mostly cloudy"),
]


class AdviceTier(NamedTuple):
    minimum: int
    label: str
    advice: str
    short_advice: str


ADVICE_TIERS = [
    AdviceTier(
        80, "excellent",
        "Excellent conditions: fish should be active, a great time to go fishing.",
        "Great day to fish",
    ),
    AdviceTier(
        60, "good",
        "Good conditions: worth heading out, expect a reasonable catch.",
        "Good for fishing",
    ),
    AdviceTier(
        40, "marginal",
        "Marginal conditions: fish may be sluggish, adjust bait and depth.",
        "Fair, be patient",
    ),
    AdviceTier(
        0, "poor",
        "Poor conditions: fish are unlikely to bite, consider another day.",
        "Not recommended",
    ),
]


def match_rule(value: float, rules: list[ScoreRule]) -> ScoreRule:
    """Find the first rule in an ordered table that matches the value."""
    for rule in rules:
        if rule.matches(value):
            return rule
    raise ValueError(f"No scoring rule matched {value!r}")


def score_factor(value: float, rules: list[ScoreRule]) -> int:
    return match_rule(value, rules).score


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def advice_tier(overall: int) -> AdviceTier:
    """Get the advice tier for an overall index."""
    for tier in ADVICE_TIERS:
        if overall >= tier.minimum:
            return tier
    return ADVICE_TIERS[-1]


@dataclass(frozen=True)
class FishingIndexResult:
    """Fishing index with per-factor breakdown.

    Attributes:
        temperature: Temperature sub-score
        pressure: Pressure sub-score
        wind: Wind sub-score
        humidity: Humidity sub-score
        clouds: Cloud cover sub-score
        overall: Mean of the sub-scores, rounded half up
    """
    temperature: int
    pressure: int
    wind: int
    humidity: int
    clouds: int
    overall: int

    @property
    def scores(self) -> dict[str, int]:
        return {
            "temperature": self.temperature,
            "pressure": self.pressure,
            "wind": self.wind,
            "humidity": self.humidity,
            "clouds": self.clouds,
        }

    @property
    def label(self) -> str:
        return advice_tier(self.overall).label

    @property
    def advice(self) -> str:
        return advice_tier(self.overall).advice

    @property
    def short_advice(self) -> str:
        return advice_tier(self.overall).short_advice


def calculate_fishing_index(
    temperature: float,
    pressure: float,
    wind_speed: float,
    humidity: float,
    cloud_cover: float
) -> FishingIndexResult:
    """Calculate the fishing index from the five scored weather factors.

    Args:
        temperature: Air temperature in Celsius
        pressure: Pressure in hPa
        wind_speed: Wind speed in km/h
        humidity: Relative humidity percentage
        cloud_cover: Cloud coverage percentage

    Returns:
        FishingIndexResult with sub-scores and overall index

    Example:
        >>> calculate_fishing_index(20, 1015, 3, 55, 50).overall
        100
    """
    temperature_score = score_factor(temperature, TEMPERATURE_RULES)
    pressure_score = score_factor(pressure, PRESSURE_RULES)
    wind_score = score_factor(wind_speed, WIND_RULES)
    humidity_score = score_factor(clamp_percent(humidity), HUMIDITY_RULES)
    clouds_score = score_factor(clamp_percent(cloud_cover), CLOUD_RULES)

    total = temperature_score + pressure_score + wind_score + humidity_score + clouds_score
    return FishingIndexResult(
        temperature=temperature_score,
        pressure=pressure_score,
        wind=wind_score,
        humidity=humidity_score,
        clouds=clouds_score,
        overall=round_half_up(total / 5),
    )


def score_observation(observation: WeatherObservation) -> FishingIndexResult:
    """Calculate the fishing index for a weather observation."""
    return calculate_fishing_index(
        temperature=observation.temperature,
        pressure=observation.pressure,
        wind_speed=observation.wind_speed,
        humidity=observation.humidity,
        cloud_cover=observation.cloud_cover,
    )


def explain_observation(observation: WeatherObservation) -> dict[str, str]:
    """Describe which tier each factor fell into."""
    return {
        "temperature": match_rule(observation.temperature, TEMPERATURE_RULES).description,
        "pressure": match_rule(observation.pressure, PRESSURE_RULES).description,
        "wind": match_rule(observation.wind_speed, WIND_RULES).description,
        "humidity": match_rule(clamp_percent(observation.humidity), HUMIDITY_RULES).description,
        "clouds": match_rule(clamp_percent(observation.cloud_cover), CLOUD_RULES).description,
    }
