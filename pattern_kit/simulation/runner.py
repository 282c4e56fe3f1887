"""
Walk-throughs of the two worked examples.

Each function builds the example from scratch, runs it, and returns the
lines it produced so callers can print or inspect them.
"""

from typing import List, Optional

from pattern_kit.behavior.duck import mallard_duck, model_duck
from pattern_kit.behavior.library import FlyRocketPowered
from pattern_kit.helpers.logger import get_logger
from pattern_kit.models.hub import HubConfig
from pattern_kit.notification.displays import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    HeatIndexDisplay,
    StatisticsDisplay,
)
from pattern_kit.notification.hub import DisplayElement, WeatherData

logger = get_logger(__name__)

WEATHER_READINGS = [
    (80.0, 65.0, 30.4),
    (82.0, 70.0, 29.2),
    (78.0, 90.0, 29.2),
]


def _emit(lines: List[str], effect: Optional[str]) -> None:
    if effect is not None:
        lines.append(effect)


def run_duck_simulator() -> List[str]:
    """Fly and quack a mallard, then give a grounded model duck a rocket."""
    lines: List[str] = []

    mallard = mallard_duck()
    _emit(lines, mallard.perform_quack())
    _emit(lines, mallard.perform_fly())

    model = model_duck()
    _emit(lines, model.perform_fly())
    model.set_fly_behavior(FlyRocketPowered())
    _emit(lines, model.perform_fly())

    logger.info("Duck simulation finished", lines=len(lines))
    return lines


def run_weather_station(config: Optional[HubConfig] = None) -> List[str]:
    """Register the displays and feed them three rounds of measurements."""
    weather_data = WeatherData(config)
    displays: List[DisplayElement] = [
        CurrentConditionsDisplay(weather_data),
        StatisticsDisplay(weather_data),
        ForecastDisplay(weather_data),
        HeatIndexDisplay(weather_data),
    ]

    lines: List[str] = []
    for temperature, humidity, pressure in WEATHER_READINGS:
        weather_data.set_measurements(temperature, humidity, pressure)
        lines.extend(d.display() for d in displays)

    logger.info("Weather station finished", lines=len(lines))
    return lines


if __name__ == "__main__":
    from pattern_kit.helpers.logger import setup_logging

    setup_logging()
    for line in run_duck_simulator() + run_weather_station():
        print(line)
