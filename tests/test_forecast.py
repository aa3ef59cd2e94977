"""Tests for the forecast summarizer."""

from datetime import date, datetime, timedelta

from fishing_advisor.scoring.forecast import pick_representative, summarize_forecast

from conftest import CST, make_observation, make_series


def at(day, hour, minute=0):
    return datetime(2024, 5, day, hour, minute, tzinfo=CST)


class TestPickRepresentative:
    """Choosing one sample per day."""

    def test_picks_noon_sample(self, forecast_samples):
        sample = pick_representative(forecast_samples, date(2024, 5, 13))
        assert sample.observed_at == at(13, 12)

    def test_tie_goes_to_first_sample(self):
        early = make_observation(observed_at=at(12, 10, 30), description="early")
        late = make_observation(observed_at=at(12, 13, 30), description="late")

        assert pick_representative([early, late], date(2024, 5, 12)) is early
        assert pick_representative([late, early], date(2024, 5, 12)) is late

    def test_ignores_samples_from_other_days(self):
        samples = [
            make_observation(observed_at=at(12, 23, 0)),
            make_observation(observed_at=at(13, 1, 0)),
            make_observation(observed_at=at(14, 0, 0)),
        ]
        sample = pick_representative(samples, date(2024, 5, 13))
        assert sample.observed_at == at(13, 1, 0)

    def test_prefers_sample_near_noon_over_neighbouring_days(self):
        samples = make_series(at(12, 0), 16)
        sample = pick_representative(samples, date(2024, 5, 12))
        assert sample.local_date == date(2024, 5, 12)
        assert abs(sample.observed_at - at(12, 12)) <= timedelta(minutes=90)

    def test_no_samples_for_day(self, forecast_samples):
        assert pick_representative(forecast_samples, date(2024, 6, 1)) is None


class TestSummarizeForecast:
    """Daily outlook."""

    def test_five_days_from_first_sample(self, forecast_samples):
        outlook = summarize_forecast(forecast_samples)
        assert [d.date for d in outlook] == [
            date(2024, 5, 12) + timedelta(days=i) for i in range(5)
        ]

    def test_days_and_start(self, forecast_samples):
        outlook = summarize_forecast(forecast_samples, days=2, start=date(2024, 5, 14))
        assert [d.date for d in outlook] == [date(2024, 5, 14), date(2024, 5, 15)]

    def test_days_without_samples_are_omitted(self):
        samples = make_series(at(12, 0), 16)
        outlook = summarize_forecast(samples, days=5)
        assert [d.date for d in outlook] == [date(2024, 5, 12), date(2024, 5, 13)]

    def test_empty_series(self):
        assert summarize_forecast([]) == []

    def test_scores_representative_sample(self):
        samples = [
            make_observation(observed_at=at(12, 9), wind_speed=30),
            make_observation(observed_at=at(12, 12), wind_speed=3),
            make_observation(observed_at=at(12, 15), wind_speed=30),
        ]
        day = summarize_forecast(samples, days=1)[0]
        assert day.fishing_index == 100
        assert day.fishing_advice == "Great day to fish"
        assert day.wind_speed == 3

    def test_poor_day(self):
        samples = [make_observation(
            observed_at=at(12, 12),
            temperature=35, pressure=1040, wind_speed=25, humidity=90, cloud_cover=95,
        )]
        day = summarize_forecast(samples, days=1)[0]
        assert day.fishing_index == 38
        assert day.fishing_advice == "Not recommended"

    def test_temperature_range_uses_whole_day(self):
        samples = [
            make_observation(observed_at=at(12, 6), temperature=14),
            make_observation(observed_at=at(12, 12), temperature=22),
            make_observation(observed_at=at(12, 18), temperature=19, temp_max=24),
            make_observation(observed_at=at(13, 0), temperature=5),
        ]
        day = summarize_forecast(samples, days=1)[0]
        assert day.temperature_range == {"min": 14, "max": 24}

    def test_copies_display_fields(self):
        samples = [make_observation(
            observed_at=at(12, 12), description="few clouds", icon="02d",
            humidity=61, pressure=1017, wind_direction=180, cloud_cover=20,
        )]
        day = summarize_forecast(samples, days=1)[0]
        assert (day.description, day.icon) == ("few clouds", "02d")
        assert (day.humidity, day.pressure, day.wind_direction, day.cloud_cover) == (
            61, 1017, 180, 20
        )
