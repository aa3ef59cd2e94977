"""Bite window planning around sunrise and sunset.

Windows are derived in three steps: seasonal base offsets and durations are
picked by month, durations are adjusted for the weather description, and the
windows are anchored on sunrise (early bite) and sunset (late bite).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Callable, NamedTuple

EARLY_BITE = "early bite"
LATE_BITE = "late bite"

RAIN_KEYWORDS = ("rain", "drizzle", "shower", "雨")
OVERCAST_KEYWORDS = ("overcast", "cloudy", "阴", "多云")
CLEAR_KEYWORDS = ("clear", "sunny", "晴")


def mentions(description: str, keywords: tuple[str, ...]) -> bool:
    """Check whether a weather description contains any of the keywords."""
    text = description.lower()
    return any(keyword in text for keyword in keywords)


@dataclass(frozen=True)
class SeasonProfile:
    """Base bite window parameters for a season, in hours.

    Attributes:
        name: Season name
        months: Calendar months (1-12) the profile applies to
        early_offset: Hours before sunrise the early window opens
        early_duration: Length of the early window
        late_offset: Hours before sunset the late window opens
        late_duration: Length of the late window
    """
    name: str
    months: tuple[int, ...]
    early_offset: float
    early_duration: float
    late_offset: float
    late_duration: float


SEASON_PROFILES = [
    SeasonProfile("spring", (3, 4, 5), 1.5, 3.0, 2.5, 3.0),
    SeasonProfile("summer", (6, 7, 8), 2.0, 2.0, 3.0, 2.5),
    SeasonProfile("autumn", (9, 10, 11), 1.5, 3.0, 2.5, 3.0),
    SeasonProfile("winter", (12, 1, 2), 1.0, 2.0, 2.0, 2.0),
]


def season_for_month(month: int) -> SeasonProfile:
    """Get the season profile for a calendar month (1-12)."""
    for profile in SEASON_PROFILES:
        if month in profile.months:
            return profile
    raise ValueError(f"Month must be between 1 and 12, got {month}")


class Conditions(NamedTuple):
    """Inputs the weather rules and tips are evaluated against."""
    description: str
    temperature: float
    month: int


class DurationRule(NamedTuple):
    matches: Callable[[Conditions], bool]
    hours: float


# Evaluated in order; only the first matching rule applies
DURATION_RULES = [
    DurationRule(
        lambda c: mentions(c.description, RAIN_KEYWORDS + OVERCAST_KEYWORDS),
        0.5,
    ),
    DurationRule(
        lambda c: mentions(c.description, CLEAR_KEYWORDS) and c.temperature > 30,
        -0.5,
    ),
]


class TipRule(NamedTuple):
    matches: Callable[[Conditions], bool]
    tip: str


# Every matching tip is included, in table order
TIP_RULES = [
    TipRule(
        lambda c: mentions(c.description, RAIN_KEYWORDS),
        "Rain stirs up food and oxygen; fish often feed more actively during light rain.",
    ),
    TipRule(
        lambda c: 25 <= c.temperature <= 30,
        "Warm water: fish move deeper, so try fishing deeper or in shaded spots.",
    ),
    TipRule(
        lambda c: mentions(c.description, OVERCAST_KEYWORDS),
        "Overcast skies make fish less wary; the bite can last longer than usual.",
    ),
    TipRule(
        lambda c: c.month in (6, 7, 8),
        "Summer midday heat drives fish deep; rest between 11:00 and 15:00.",
    ),
]


def adjust_for_weather(profile: SeasonProfile, conditions: Conditions) -> SeasonProfile:
    """Lengthen or shorten both windows according to the weather rules."""
    for rule in DURATION_RULES:
        if rule.matches(conditions):
            return replace(
                profile,
                early_duration=profile.early_duration + rule.hours,
                late_duration=profile.late_duration + rule.hours,
            )
    return profile


@dataclass(frozen=True)
class BiteWindow:
    """A recommended fishing time range.

    Attributes:
        start: When the window opens
        end: When the window closes
        reason: Why this window was chosen
    """
    start: datetime
    end: datetime
    reason: str

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_parts(self) -> tuple[int, int]:
        """Window length as whole (hours, minutes), truncated."""
        total_minutes = int(self.duration.total_seconds() // 60)
        return total_minutes // 60, total_minutes % 60

    def format_duration(self) -> str:
        hours, minutes = self.duration_parts
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h {minutes}m"

    def format_range(self) -> str:
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"


@dataclass(frozen=True)
class FishingTimeAdvice:
    """Bite windows and tips for one day.

    Attributes:
        early_bite: Window anchored on sunrise
        late_bite: Window anchored on sunset
        best_time: Preferred window label ("early bite" or "late bite")
        tips: Condition-triggered advice, in fixed order
    """
    early_bite: BiteWindow
    late_bite: BiteWindow
    best_time: str
    tips: list[str] = field(default_factory=list)

    @property
    def best_window(self) -> BiteWindow:
        return self.early_bite if self.best_time == EARLY_BITE else self.late_bite


def _hours(value: float) -> timedelta:
    return timedelta(hours=value)


def plan_bite_windows(
    sunrise: datetime,
    sunset: datetime,
    temperature: float,
    description: str,
    month: int
) -> FishingTimeAdvice:
    """Plan the early and late bite windows for a day.

    Args:
        sunrise: Sunrise time
        sunset: Sunset time
        temperature: Current air temperature in Celsius
        description: Current weather description
        month: Calendar month (1-12)

    Returns:
        FishingTimeAdvice with both windows, the preferred one and tips

    Raises:
        ValueError: If month is not between 1 and 12
    """
    conditions = Conditions(description=description, temperature=temperature, month=month)
    profile = adjust_for_weather(season_for_month(month), conditions)

    early_bite = BiteWindow(
        start=sunrise - _hours(profile.early_offset),
        end=sunrise + _hours(profile.early_duration - profile.early_offset),
        reason=(
            f"Opens {profile.early_offset:g}h before sunrise and lasts "
            f"{profile.early_duration:g}h, when fish feed in the cool morning light."
        ),
    )
    late_bite = BiteWindow(
        start=sunset - _hours(profile.late_offset),
        end=sunset + _hours(profile.late_duration - profile.late_offset),
        reason=(
            f"Opens {profile.late_offset:g}h before sunset and lasts "
            f"{profile.late_duration:g}h, as fish move to feed before dark."
        ),
    )

    best_time = EARLY_BITE if 3 <= month <= 11 else LATE_BITE
    tips = [rule.tip for rule in TIP_RULES if rule.matches(conditions)]

    return FishingTimeAdvice(
        early_bite=early_bite,
        late_bite=late_bite,
        best_time=best_time,
        tips=tips,
    )
