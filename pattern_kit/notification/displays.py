"""
Weather displays — observers of a WeatherData subject.

Each display registers itself with the subject it is given and keeps that
reference so it can detach later. The subject only ever calls update().
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_kit.helpers.logger import get_logger
from pattern_kit.models.weather import WeatherSnapshot
from pattern_kit.notification.hub import NotificationHub

logger = get_logger(__name__)


class WeatherDisplay(ABC):
    """Shared registration plumbing for the concrete displays."""

    name = "display"

    def __init__(self, subject: NotificationHub):
        self.subject = subject
        self.last_rendering: Optional[str] = None
        self.updates_received = 0
        subject.register(self)

    def detach(self) -> None:
        """Stop receiving updates from the subject."""
        self.subject.unregister(self)

    def update(self, snapshot: WeatherSnapshot) -> None:
        self.updates_received += 1
        self.observe(snapshot)
        self.display()

    @abstractmethod
    def observe(self, snapshot: WeatherSnapshot) -> None:
        """Fold a new snapshot into the display's own state."""

    @abstractmethod
    def render(self) -> str:
        """Text for the current state."""

    def display(self) -> str:
        self.last_rendering = self.render()
        logger.info("Display rendered", display=self.name, text=self.last_rendering)
        return self.last_rendering


class CurrentConditionsDisplay(WeatherDisplay):
    name = "current_conditions"

    def __init__(self, subject: NotificationHub):
        self.temperature = 0.0
        self.humidity = 0.0
        super().__init__(subject)

    def observe(self, snapshot: WeatherSnapshot) -> None:
        self.temperature = snapshot.temperature
        self.humidity = snapshot.humidity

    def render(self) -> str:
        return (
            f"Current conditions: {self.temperature:.1f}F degrees "
            f"and {self.humidity:.1f}% humidity"
        )


class StatisticsDisplay(WeatherDisplay):
    name = "statistics"

    def __init__(self, subject: NotificationHub):
        self.temperatures: List[float] = []
        super().__init__(subject)

    @property
    def average(self) -> float:
        if not self.temperatures:
            return 0.0
        return sum(self.temperatures) / len(self.temperatures)

    @property
    def maximum(self) -> float:
        return max(self.temperatures, default=0.0)

    @property
    def minimum(self) -> float:
        return min(self.temperatures, default=0.0)

    def observe(self, snapshot: WeatherSnapshot) -> None:
        self.temperatures.append(snapshot.temperature)

    def render(self) -> str:
        return (
            f"Avg/Max/Min temperature = "
            f"{self.average:.1f}/{self.maximum:.1f}/{self.minimum:.1f}"
        )


class ForecastDisplay(WeatherDisplay):
    name = "forecast"

    INITIAL_PRESSURE = 29.92

    def __init__(self, subject: NotificationHub):
        self.current_pressure = self.INITIAL_PRESSURE
        self.last_pressure = self.INITIAL_PRESSURE
        super().__init__(subject)

    def observe(self, snapshot: WeatherSnapshot) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = snapshot.pressure

    def render(self) -> str:
        if self.current_pressure > self.last_pressure:
            outlook = "Improving weather on the way!"
        elif self.current_pressure == self.last_pressure:
            outlook = "More of the same"
        else:
            outlook = "Watch out for cooler, rainy weather"
        return f"Forecast: {outlook}"


class HeatIndexDisplay(WeatherDisplay):
    name = "heat_index"

    def __init__(self, subject: NotificationHub):
        self.heat_index = 0.0
        super().__init__(subject)

    def observe(self, snapshot: WeatherSnapshot) -> None:
        self.heat_index = compute_heat_index(snapshot.temperature, snapshot.humidity)

    def render(self) -> str:
        return f"Heat index is {self.heat_index:.2f}"


def compute_heat_index(t: float, rh: float) -> float:
    """Heat index (F) from temperature (F) and relative humidity (%)."""
    return (
        16.923
        + 0.185212 * t
        + 5.37941 * rh
        - 0.100254 * t * rh
        + 0.00941695 * t ** 2
        + 0.00728898 * rh ** 2
        + 0.000345372 * t ** 2 * rh
        - 0.000814971 * t * rh ** 2
        + 0.0000102102 * t ** 2 * rh ** 2
        - 0.000038646 * t ** 3
        + 0.0000291583 * rh ** 3
        + 0.00000142721 * t ** 3 * rh
        + 0.000000197483 * t * rh ** 3
        - 0.0000000218429 * t ** 3 * rh ** 2
        + 0.000000000843296 * t ** 2 * rh ** 3
        - 0.0000000000481975 * t ** 3 * rh ** 3
    )
