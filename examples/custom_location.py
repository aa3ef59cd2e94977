#!/usr/bin/env python3
"""Example using custom places and offline scoring with fishing-advisor.

Shows how to resolve Chinese city names, query by coordinates, and use
the scoring functions without any network access.
"""

from datetime import datetime, timedelta, timezone

from fishing_advisor import (
    FishingAdvisor,
    Place,
    calculate_fishing_index,
    plan_bite_windows,
    resolve_by_name,
)


def main():
    # Known names are mapped to the provider's romanization
    baoding = resolve_by_name("保定市")
    print(f"{baoding.name} -> {baoding.query}")

    # Unknown names pass through unchanged
    print(f"Lake Tahoe -> {resolve_by_name('Lake Tahoe').query}")

    # Places can also be given by coordinates
    qiandao = Place.from_coordinates(29.6, 119.0, name="千岛湖")
    print(f"{qiandao.name}: {qiandao.latitude}, {qiandao.longitude}")
    print()

    # Offline scoring
    result = calculate_fishing_index(
        temperature=22, pressure=1016, wind_speed=8, humidity=65, cloud_cover=45
    )
    print(f"Index: {result.overall} ({result.label})")
    print(f"  {result.advice}")

    tz = timezone(timedelta(hours=8))
    advice = plan_bite_windows(
        sunrise=datetime(2024, 5, 12, 5, 10, tzinfo=tz),
        sunset=datetime(2024, 5, 12, 19, 20, tzinfo=tz),
        temperature=22,
        description="light rain",
        month=5,
    )
    print(f"Best time: {advice.best_time}")
    for window in (advice.early_bite, advice.late_bite):
        print(f"  {window.format_range()} ({window.format_duration()}): {window.reason}")
    for tip in advice.tips:
        print(f"  Tip: {tip}")
    print()

    # Live data for a custom place (requires OPENWEATHER_API_KEY)
    advisor = FishingAdvisor()
    advisor.run(qiandao)


if __name__ == "__main__":
    main()
