"""pattern_kit data models."""

from pattern_kit.models.behavior import BindingRecord, SlotSpec
from pattern_kit.models.config import LoggingConfig, LogRenderer
from pattern_kit.models.hub import (
    DeliveryFailure,
    FailurePolicy,
    HubConfig,
    NotificationReport,
)
from pattern_kit.models.weather import WeatherSnapshot

__all__ = [
    "BindingRecord",
    "DeliveryFailure",
    "FailurePolicy",
    "HubConfig",
    "LogRenderer",
    "LoggingConfig",
    "NotificationReport",
    "SlotSpec",
    "WeatherSnapshot",
]
