#!/usr/bin/env python3
"""Basic usage example for fishing-advisor.

This example fetches weather for the default city (Beijing) and prints
the fishing index, bite windows and outlook. Requires OPENWEATHER_API_KEY.
"""

from fishing_advisor import FishingAdvisor, Place


def main():
    advisor = FishingAdvisor()

    # Display everything for the default place
    print("Running fishing advisor...")
    advisor.run(Place.default(advisor.config))

    if advisor.snapshot is None:
        print(f"No data: {advisor.last_error}")
        return

    # You can also access data programmatically
    print("\n" + "=" * 50)
    print("Programmatic Access Example")
    print("=" * 50)

    snapshot = advisor.snapshot
    print(f"\nFishing index at {snapshot.place.name}: {snapshot.index.overall}")
    print(f"  Sub-scores: {snapshot.index.scores}")
    print(f"  Advice: {snapshot.index.advice}")

    if snapshot.time_advice:
        early = snapshot.time_advice.early_bite
        print(f"  Early bite: {early.format_range()} ({early.format_duration()})")

    print("\nOutlook:")
    print(advisor.forecast_frame().to_string(index=False))


if __name__ == "__main__":
    main()
