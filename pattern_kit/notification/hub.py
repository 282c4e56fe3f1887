"""
Notification Hub — a subject that pushes state snapshots to its observers.

Behavioral Contract:
- Observers are notified synchronously, in registration order
- Each pass works on a copy of the observer list taken when the pass starts;
  register/unregister calls made during a pass only affect later passes
- Registering the same observer twice does not cause double delivery
- unregister() removes every occurrence and never fails for unknown observers
- An observer that raises is isolated or propagated according to HubConfig
- The stored snapshot is frozen: mappings become read-only views of a deep
  copy, so neither the caller nor an observer can edit it after set_state()
"""

import copy
import threading
from collections.abc import Mapping, Set
from datetime import datetime
from types import MappingProxyType
from typing import Any, Generic, List, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from pydantic import BaseModel

from pattern_kit.helpers.logger import get_logger
from pattern_kit.models.hub import (
    DeliveryFailure,
    FailurePolicy,
    HubConfig,
    NotificationReport,
)
from pattern_kit.models.weather import WeatherSnapshot

logger = get_logger(__name__)

S = TypeVar("S")


class Observer(Protocol):
    """Capability consumed by the hub: accept a snapshot and react."""

    def update(self, snapshot: Any) -> None: ...


@runtime_checkable
class DisplayElement(Protocol):
    """An observer that can render what it has seen."""

    def display(self) -> str: ...


class ObserverContractError(TypeError):
    """Raised when registering an object that cannot receive updates."""
    pass


def observer_name(observer: Any) -> str:
    """Name used for an observer in reports and log events."""
    return getattr(observer, "name", None) or type(observer).__name__


class NotificationHub(Generic[S]):
    """
    Owns an ordered observer collection and the current state snapshot.
    Each hub instance has its own collection; nothing is shared globally.
    """

    def __init__(self, config: Optional[HubConfig] = None):
        self.config = config or HubConfig()
        self._observers: List[Observer] = []
        self._state: Optional[S] = None
        self._sequence = 0
        self._lock = threading.RLock()

    @property
    def state(self) -> Optional[S]:
        """The current snapshot, or None before the first update."""
        return self._state

    @property
    def observers(self) -> Tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def register(self, observer: Observer) -> None:
        """Append an observer. Already-registered observers are left as is."""
        if not callable(getattr(observer, "update", None)):
            raise ObserverContractError(
                f"{type(observer).__name__} does not provide 'update(snapshot)'"
            )
        with self._lock:
            if any(o is observer for o in self._observers):
                return
            self._observers.append(observer)
        logger.debug("Observer registered", observer=observer_name(observer))

    def unregister(self, observer: Observer) -> int:
        """Remove every occurrence of an observer. Returns how many were removed."""
        with self._lock:
            remaining = [o for o in self._observers if o is not observer]
            removed = len(self._observers) - len(remaining)
            self._observers = remaining
        if removed:
            logger.debug("Observer unregistered", observer=observer_name(observer))
        return removed

    def set_state(self, snapshot: S) -> NotificationReport:
        """Replace the snapshot wholesale, then notify every observer."""
        frozen = freeze_snapshot(snapshot)
        with self._lock:
            self._state = frozen
        return self.notify_all()

    def notify_all(self) -> NotificationReport:
        """
        Deliver the current snapshot to the observers registered right now.

        Under FailurePolicy.PROPAGATE the first observer error is re-raised
        and the observers after it are not notified in this pass.
        """
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
            snapshot = self._state
            targets = list(self._observers)

        delivered = []
        failed = []

        for observer in targets:
            name = observer_name(observer)
            try:
                observer.update(snapshot)
            except Exception as e:
                if self.config.failure_policy == FailurePolicy.PROPAGATE:
                    raise
                logger.error(
                    "Observer failed during notification",
                    observer=name,
                    sequence=sequence,
                    exc_info=True,
                )
                failed.append(DeliveryFailure(observer=name, error=str(e)))
            else:
                delivered.append(name)

        report = NotificationReport(
            sequence=sequence,
            snapshot=_snapshot_dict(snapshot),
            delivered=delivered,
            failed=failed,
            success=len(failed) == 0,
            notified_at=datetime.utcnow(),
        )
        logger.debug(
            "Notification pass complete",
            sequence=sequence,
            delivered=len(delivered),
            failed=len(failed),
        )
        return report


class WeatherData(NotificationHub[WeatherSnapshot]):
    """A subject whose state is a set of weather measurements."""

    def set_measurements(
        self, temperature: float, humidity: float, pressure: float
    ) -> NotificationReport:
        """Record new measurements and push them to every observer."""
        snapshot = WeatherSnapshot(
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
        )
        return self.set_state(snapshot)

    def measurements_changed(self) -> NotificationReport:
        """Re-notify observers with the current measurements."""
        return self.notify_all()

    @property
    def temperature(self) -> Optional[float]:
        return self._state.temperature if self._state else None

    @property
    def humidity(self) -> Optional[float]:
        return self._state.humidity if self._state else None

    @property
    def pressure(self) -> Optional[float]:
        return self._state.pressure if self._state else None


def freeze_snapshot(snapshot: Any) -> Any:
    """
    Return a read-only copy of a snapshot.

    Frozen pydantic models are kept as they are; other models are
    deep-copied. Mappings become MappingProxyType views over a copy,
    lists and tuples become tuples and sets become frozensets, recursively.
    Anything else is deep-copied.
    """
    if isinstance(snapshot, BaseModel):
        if snapshot.model_config.get("frozen"):
            return snapshot
        return snapshot.model_copy(deep=True)
    if isinstance(snapshot, Mapping):
        return MappingProxyType(
            {key: freeze_snapshot(value) for key, value in snapshot.items()}
        )
    if isinstance(snapshot, (list, tuple)):
        return tuple(freeze_snapshot(value) for value in snapshot)
    if isinstance(snapshot, Set):
        return frozenset(freeze_snapshot(value) for value in snapshot)
    return copy.deepcopy(snapshot)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, frozenset):
        return sorted(value, key=repr)
    return value


def _snapshot_dict(snapshot: Any) -> dict:
    if snapshot is None:
        return {}
    if isinstance(snapshot, BaseModel):
        return snapshot.model_dump(mode="json")
    if isinstance(snapshot, Mapping):
        return _thaw(snapshot)
    return {"value": _thaw(snapshot)}
