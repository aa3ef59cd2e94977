"""Fishing index, bite window and forecast scoring."""

from .bite_windows import (
    EARLY_BITE,
    LATE_BITE,
    SEASON_PROFILES,
    BiteWindow,
    FishingTimeAdvice,
    SeasonProfile,
    plan_bite_windows,
    season_for_month,
)
from .forecast import pick_representative, summarize_forecast
from .index import (
    ADVICE_TIERS,
    FishingIndexResult,
    advice_tier,
    calculate_fishing_index,
    explain_observation,
    score_observation,
)

__all__ = [
    # Index
    "FishingIndexResult",
    "ADVICE_TIERS",
    "advice_tier",
    "calculate_fishing_index",
    "score_observation",
    "explain_observation",
    # Bite windows
    "BiteWindow",
    "FishingTimeAdvice",
    "SeasonProfile",
    "SEASON_PROFILES",
    "EARLY_BITE",
    "LATE_BITE",
    "season_for_month",
    "plan_bite_windows",
    # Forecast
    "summarize_forecast",
    "pick_representative",
]
