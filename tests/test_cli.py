"""Tests for the command-line interface."""

import json
import unittest.mock as mock

import pytest
from click.testing import CliRunner

from fishing_advisor.cli.main import cli
from fishing_advisor.core.errors import PlaceNotFound
from fishing_advisor.weather.service import WeatherService


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")
    monkeypatch.delenv("FISHING_ADVISOR_DEFAULT_CITY", raising=False)
    return CliRunner()


@pytest.fixture
def weather(current_observation, forecast_samples):
    with mock.patch.object(WeatherService, "get_current", return_value=current_observation) as current, \
            mock.patch.object(WeatherService, "get_forecast", return_value=forecast_samples) as forecast:
        yield current, forecast


class TestAdvise:
    """The advise command."""

    def test_json_output(self, runner, weather):
        result = runner.invoke(cli, ["--city", "保定", "advise", "--json"], obj={})

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["place"]["name"] == "保定"
        assert data["place"]["query"] == "Baoding"
        assert data["fishing_index"]["overall"] == 100

    def test_default_city(self, runner, weather):
        result = runner.invoke(cli, ["advise", "--json"], obj={})

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["place"]["query"] == "Beijing"

    def test_coordinates(self, runner, weather):
        result = runner.invoke(cli, ["--lat", "38.87", "--lon", "115.48", "advise", "--json"], obj={})

        assert result.exit_code == 0, result.output
        place = json.loads(result.stdout)["place"]
        assert (place["latitude"], place["longitude"]) == (38.87, 115.48)

    def test_rich_output(self, runner, weather):
        result = runner.invoke(cli, ["--city", "北京", "advise"], obj={})

        assert result.exit_code == 0, result.output
        assert "Fishing Index Breakdown" in result.output

    def test_place_not_found(self, runner):
        with mock.patch.object(WeatherService, "get_current", side_effect=PlaceNotFound()):
            result = runner.invoke(cli, ["--city", "Atlantis", "advise", "--json"], obj={})

        assert result.exit_code == 1
        assert json.loads(result.stdout) == {"error": PlaceNotFound.user_message}

    def test_lat_without_lon(self, runner):
        result = runner.invoke(cli, ["--lat", "38.8", "advise"], obj={})
        assert result.exit_code == 2

    def test_invalid_coordinates(self, runner):
        result = runner.invoke(cli, ["--lat", "120", "--lon", "0", "advise"], obj={})
        assert result.exit_code == 2

    def test_locate_falls_back_to_default(self, runner, weather):
        with mock.patch('fishing_advisor.weather.geolocation.locate', return_value=(38.87, 115.48)), \
                mock.patch('fishing_advisor.weather.geolocation.resolve_by_coordinates',
                           side_effect=PlaceNotFound()):
            result = runner.invoke(cli, ["--locate", "advise", "--json"], obj={})

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["place"]["query"] == "Beijing"


class TestForecast:
    """The forecast command."""

    def test_json(self, runner, weather):
        result = runner.invoke(cli, ["forecast", "--days", "3", "--json"], obj={})

        assert result.exit_code == 0, result.output
        days = json.loads(result.stdout)
        assert len(days) == 3
        assert days[0]["fishing_advice"] == "Great day to fish"

    def test_plain(self, runner, weather):
        result = runner.invoke(cli, ["--city", "保定", "forecast", "--plain"], obj={})

        assert result.exit_code == 0, result.output
        assert "Fishing outlook for 保定" in result.output
        assert "Great day to fish" in result.output

    def test_days_out_of_range(self, runner):
        result = runner.invoke(cli, ["forecast", "--days", "9"], obj={})
        assert result.exit_code == 2

    def test_error(self, runner):
        with mock.patch.object(WeatherService, "get_current", side_effect=PlaceNotFound()):
            result = runner.invoke(cli, ["forecast"], obj={})

        assert result.exit_code == 1


class TestOtherCommands:
    """ticker and cities."""

    def test_cities(self, runner):
        result = runner.invoke(cli, ["cities"], obj={})

        assert result.exit_code == 0
        assert "北京 (Beijing)" in result.output
        assert "保定 (Baoding)" in result.output

    def test_ticker_rejects_zero_salary(self, runner):
        result = runner.invoke(cli, ["ticker", "--salary", "0"], obj={})
        assert result.exit_code == 2

    def test_ticker_stops_on_interrupt(self, runner):
        with mock.patch('fishing_advisor.monitor.ticker.SalaryTicker.run',
                        side_effect=KeyboardInterrupt):
            result = runner.invoke(cli, ["ticker", "--salary", "12000"], obj={})

        assert result.exit_code == 0
        assert "Total earned: ¥0.00" in result.output

    def test_non_numeric_timeout(self, runner, monkeypatch):
        monkeypatch.setenv("FISHING_ADVISOR_TIMEOUT", "soon")

        result = runner.invoke(cli, ["cities"], obj={})

        assert result.exit_code == 2
        assert "FISHING_ADVISOR_TIMEOUT" in result.output
