"""Tests for the weather display observers."""

import pytest

from pattern_kit.notification.displays import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    HeatIndexDisplay,
    StatisticsDisplay,
    WeatherDisplay,
    compute_heat_index,
)
from pattern_kit.notification.hub import DisplayElement, WeatherData


def _make_station():
    weather = WeatherData()
    current = CurrentConditionsDisplay(weather)
    stats = StatisticsDisplay(weather)
    forecast = ForecastDisplay(weather)
    return weather, current, stats, forecast


class TestSelfRegistration:
    def test_displays_register_in_construction_order(self):
        weather, current, stats, forecast = _make_station()
        assert weather.observers == (current, stats, forecast)

    def test_detach(self):
        weather, current, stats, forecast = _make_station()
        current.detach()
        weather.set_measurements(80, 65, 30.4)
        assert current.updates_received == 0
        assert current.last_rendering is None
        assert stats.updates_received == 1

    def test_report_uses_display_names(self):
        weather, *_ = _make_station()
        report = weather.set_measurements(80, 65, 30.4)
        assert report.delivered == ["current_conditions", "statistics", "forecast"]


class TestDisplayContract:
    def test_displays_are_display_elements(self):
        weather = WeatherData()
        displays = [
            CurrentConditionsDisplay(weather),
            StatisticsDisplay(weather),
            ForecastDisplay(weather),
            HeatIndexDisplay(weather),
        ]
        for display in displays:
            assert isinstance(display, DisplayElement)

    def test_base_display_cannot_be_built(self):
        with pytest.raises(TypeError):
            WeatherDisplay(WeatherData())

    def test_display_without_render_cannot_be_built(self):
        class Unfinished(WeatherDisplay):
            def observe(self, snapshot):
                pass

        weather = WeatherData()
        with pytest.raises(TypeError):
            Unfinished(weather)
        assert weather.observers == ()


class TestCurrentConditions:
    def test_rendering(self):
        weather, current, _, _ = _make_station()
        weather.set_measurements(80, 65, 30.4)
        assert current.last_rendering == (
            "Current conditions: 80.0F degrees and 65.0% humidity"
        )

    def test_tracks_latest(self):
        weather, current, _, _ = _make_station()
        weather.set_measurements(80, 65, 30.4)
        weather.set_measurements(78, 90, 29.2)
        assert current.display() == (
            "Current conditions: 78.0F degrees and 90.0% humidity"
        )


class TestStatistics:
    def test_before_any_reading(self):
        weather = WeatherData()
        stats = StatisticsDisplay(weather)
        assert stats.display() == "Avg/Max/Min temperature = 0.0/0.0/0.0"

    def test_three_readings(self):
        weather, _, stats, _ = _make_station()
        weather.set_measurements(80, 65, 30.4)
        weather.set_measurements(82, 70, 29.2)
        weather.set_measurements(78, 90, 29.2)
        assert stats.average == pytest.approx(80.0)
        assert stats.last_rendering == "Avg/Max/Min temperature = 80.0/82.0/78.0"


class TestForecast:
    def test_pressure_trend(self):
        weather, _, _, forecast = _make_station()

        weather.set_measurements(80, 65, 30.4)
        assert forecast.last_rendering == "Forecast: Improving weather on the way!"

        weather.set_measurements(82, 70, 29.2)
        assert forecast.last_rendering == (
            "Forecast: Watch out for cooler, rainy weather"
        )

        weather.set_measurements(78, 90, 29.2)
        assert forecast.last_rendering == "Forecast: More of the same"


class TestHeatIndex:
    def test_formula(self):
        assert compute_heat_index(80, 65) == pytest.approx(82.955, abs=0.01)

    def test_rendering(self):
        weather = WeatherData()
        heat = HeatIndexDisplay(weather)
        weather.set_measurements(80, 65, 30.4)
        assert heat.heat_index == pytest.approx(82.955, abs=0.01)
        assert heat.last_rendering.startswith("Heat index is 82.9")
