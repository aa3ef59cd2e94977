"""
Fishing Advisor - Weather-aware fishing index and bite window planner.

Fetches current weather and forecasts for a city, scores the conditions for
fishing, recommends bite windows around sunrise and sunset, and rates the
next few days. Also ships a small elapsed-salary ticker.

Basic Usage:
    from fishing_advisor import FishingAdvisor, resolve_by_name

    advisor = FishingAdvisor()
    snapshot = advisor.refresh(resolve_by_name("保定"))
    print(snapshot.index.overall, snapshot.index.advice)

    # Scoring without any network access
    from fishing_advisor import calculate_fishing_index
    calculate_fishing_index(
        temperature=20, pressure=1015, wind_speed=3, humidity=55, cloud_cover=50
    ).overall  # 100

CLI Usage:
    fishing-advisor advise
    fishing-advisor --city 北京 advise
    fishing-advisor --locate forecast --days 3
    fishing-advisor ticker --salary 12000
"""

__version__ = "1.0.0"

# Core types
from fishing_advisor.core.config import AdvisorConfig
from fishing_advisor.core.errors import (
    FishingAdvisorError,
    GeolocationError,
    NetworkFailure,
    PlaceNotFound,
    RateLimited,
    WeatherApiError,
)
from fishing_advisor.core.location import (
    PRESET_CITIES,
    Place,
    resolve_by_coordinates,
    resolve_by_name,
)

# Scoring
from fishing_advisor.scoring.bite_windows import (
    BiteWindow,
    FishingTimeAdvice,
    plan_bite_windows,
)
from fishing_advisor.scoring.forecast import summarize_forecast
from fishing_advisor.scoring.index import FishingIndexResult, calculate_fishing_index

# Monitor classes
from fishing_advisor.monitor.advisor import AdvisorSnapshot, FishingAdvisor
from fishing_advisor.monitor.ticker import SalaryTicker

# Weather
from fishing_advisor.weather.models import ForecastDay, WeatherObservation
from fishing_advisor.weather.service import WeatherService

__all__ = [
    # Version
    "__version__",
    # Core
    "AdvisorConfig",
    "Place",
    "PRESET_CITIES",
    "resolve_by_name",
    "resolve_by_coordinates",
    # Errors
    "FishingAdvisorError",
    "PlaceNotFound",
    "NetworkFailure",
    "RateLimited",
    "WeatherApiError",
    "GeolocationError",
    # Scoring
    "FishingIndexResult",
    "calculate_fishing_index",
    "BiteWindow",
    "FishingTimeAdvice",
    "plan_bite_windows",
    "summarize_forecast",
    # Monitor
    "FishingAdvisor",
    "AdvisorSnapshot",
    "SalaryTicker",
    # Weather
    "WeatherObservation",
    "ForecastDay",
    "WeatherService",
]
