"""Tests for the fishing index calculator."""

import itertools

import pytest

from fishing_advisor.scoring.index import (
    advice_tier,
    calculate_fishing_index,
    explain_observation,
    round_half_up,
    score_observation,
)

from conftest import make_observation


def index(temperature=20, pressure=1015, wind_speed=3, humidity=55, cloud_cover=50):
    return calculate_fishing_index(
        temperature=temperature,
        pressure=pressure,
        wind_speed=wind_speed,
        humidity=humidity,
        cloud_cover=cloud_cover,
    )


class TestReferenceCases:
    """Known input/output pairs."""

    def test_ideal_conditions(self):
        result = index(20, 1015, 3, 55, 50)
        assert result.scores == {
            "temperature": 100,
            "pressure": 100,
            "wind": 100,
            "humidity": 100,
            "clouds": 100,
        }
        assert result.overall == 100
        assert result.label == "excellent"

    def test_extreme_conditions(self):
        result = index(35, 1040, 25, 90, 95)
        assert (result.temperature, result.pressure, result.wind,
                result.humidity, result.clouds) == (20, 40, 20, 50, 60)
        assert result.overall == 38
        assert result.label == "poor"


class TestTiers:
    """Breakpoints of each factor's scoring table."""

    @pytest.mark.parametrize("value,expected", [
        (9.9, 20), (10, 60), (14.9, 60), (15, 100), (25, 100),
        (25.1, 60), (30, 60), (30.1, 20), (-5, 20),
    ])
    def test_temperature(self, value, expected):
        assert index(temperature=value).temperature == expected

    @pytest.mark.parametrize("value,expected", [
        (999, 40), (1000, 80), (1012.9, 80), (1013, 100), (1020, 100),
        (1021, 80), (1030, 80), (1031, 40),
    ])
    def test_pressure(self, value, expected):
        assert index(pressure=value).pressure == expected

    @pytest.mark.parametrize("value,expected", [
        (0, 100), (5, 100), (5.1, 80), (10, 80), (10.1, 60),
        (15, 60), (15.1, 40), (20, 40), (20.1, 20), (60, 20),
    ])
    def test_wind(self, value, expected):
        assert index(wind_speed=value).wind == expected

    @pytest.mark.parametrize("value,expected", [
        (29, 50), (30, 80), (39, 80), (40, 100), (70, 100),
        (71, 80), (80, 80), (81, 50),
    ])
    def test_humidity(self, value, expected):
        assert index(humidity=value).humidity == expected

    @pytest.mark.parametrize("value,expected", [
        (0, 70), (29, 70), (30, 100), (80, 100), (81, 70),
        (90, 70), (91, 60), (100, 60),
    ])
    def test_clouds(self, value, expected):
        assert index(cloud_cover=value).clouds == expected

    def test_clear_sky_has_no_bonus_tier(self):
        assert index(cloud_cover=0).clouds == index(cloud_cover=85).clouds


class TestOutOfRangePercentages:
    """Percentages outside 0-100 land in the same tier as the nearest bound."""

    def test_humidity_above_100(self):
        assert index(humidity=150).humidity == index(humidity=100).humidity == 50

    def test_clouds_below_zero(self):
        assert index(cloud_cover=-10).clouds == index(cloud_cover=0).clouds == 70

    def test_clouds_above_100(self):
        assert index(cloud_cover=120).clouds == 60


class TestOverall:
    """Overall index properties."""

    def test_overall_bounded_over_input_grid(self):
        temperatures = [-20, 5, 12, 20, 27, 40]
        pressures = [950, 1005, 1015, 1025, 1050]
        winds = [0, 7, 12, 18, 40]
        humidities = [10, 35, 55, 75, 95]
        clouds = [0, 50, 85, 95]

        for combo in itertools.product(temperatures, pressures, winds, humidities, clouds):
            result = index(*combo)
            assert isinstance(result.overall, int)
            assert 20 <= result.overall <= 100

    def test_overall_is_mean_of_sub_scores(self):
        result = index(12, 1025, 8, 75, 10)
        assert result.overall == round_half_up(sum(result.scores.values()) / 5)
        assert result.overall == 74

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(75.4) == 75
        assert round_half_up(75.6) == 76


class TestAdviceTiers:
    """Mapping from overall index to advice."""

    @pytest.mark.parametrize("overall,label", [
        (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"),
        (59, "marginal"), (40, "marginal"), (39, "poor"), (20, "poor"),
    ])
    def test_labels(self, overall, label):
        assert advice_tier(overall).label == label

    def test_result_exposes_full_and_short_advice(self):
        result = index()
        assert result.advice.startswith("Excellent")
        assert result.short_advice == "Great day to fish"


class TestObservation:
    """Scoring WeatherObservation values."""

    def test_score_observation_uses_scored_fields_only(self):
        observation = make_observation(description="thunderstorm", wind_direction=270)
        assert score_observation(observation) == index()

    def test_explain_observation(self):
        observation = make_observation(wind_speed=25, cloud_cover=95)
        explanation = explain_observation(observation)
        assert explanation["wind"] == "strong wind"
        assert explanation["clouds"] == "overcast"
        assert explanation["temperature"].startswith("ideal")
