"""
Behavior Registry — runtime-composable behavior slots.

An entity declares named slots ("fly", "quack"), each bound to exactly one
behavior object chosen at construction and replaceable at any time.
Callers invoke a slot without knowing which implementation is active.

Behavioral Contract:
- Every declared slot has a binding from the moment it is declared
- bind() is last-bind-wins and rejects behaviors missing the slot's operation
- invoke() on an undeclared slot fails fast with UnboundSlotError
- Behaviors run synchronously, outside the registry lock
"""

import threading
from collections import deque
from datetime import datetime
from typing import Any, Deque, Dict, List, Optional, Protocol

from pattern_kit.helpers.logger import get_logger
from pattern_kit.models.behavior import BindingRecord, SlotSpec

logger = get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 100


class FlyBehavior(Protocol):
    """Capability for the "fly" slot."""

    def fly(self) -> Optional[str]: ...


class QuackBehavior(Protocol):
    """Capability for the "quack" slot."""

    def quack(self) -> Optional[str]: ...


class UnboundSlotError(LookupError):
    """Raised when a slot is invoked or rebound without having been declared."""
    pass


class BehaviorContractError(TypeError):
    """Raised when a behavior does not satisfy its slot's capability."""
    pass


class BehaviorRegistry:
    """Named behavior slots owned by a single entity."""

    def __init__(self, owner: str = "entity", history_limit: int = DEFAULT_HISTORY_LIMIT):
        self.owner = owner
        self._specs: Dict[str, SlotSpec] = {}
        self._bindings: Dict[str, Any] = {}
        self._history: Deque[BindingRecord] = deque(maxlen=history_limit)
        self._lock = threading.RLock()

    @property
    def slots(self) -> List[str]:
        """Declared slot names, in declaration order."""
        return list(self._specs)

    @property
    def history(self) -> List[BindingRecord]:
        """The most recent bindings, oldest first, defaults included."""
        return list(self._history)

    def declare(self, slot: str, operation: str, default: Any) -> None:
        """Declare a slot together with its mandatory default behavior."""
        spec = SlotSpec(name=slot, operation=operation)
        with self._lock:
            if slot in self._specs:
                raise BehaviorContractError(
                    f"Slot '{slot}' is already declared on {self.owner}"
                )
            self._check_contract(spec, default)
            self._specs[slot] = spec
            self._store(slot, default, is_default=True)

    def bind(self, slot: str, behavior: Any) -> None:
        """Replace the behavior bound to a slot."""
        with self._lock:
            spec = self._spec_for(slot)
            self._check_contract(spec, behavior)
            self._store(slot, behavior, is_default=False)

    def get(self, slot: str) -> Any:
        """The behavior currently bound to a slot."""
        with self._lock:
            self._spec_for(slot)
            return self._bindings[slot]

    def invoke(self, slot: str) -> Optional[str]:
        """Run the bound behavior's operation and return its effect."""
        with self._lock:
            spec = self._spec_for(slot)
            behavior = self._bindings[slot]
        return getattr(behavior, spec.operation)()

    def _spec_for(self, slot: str) -> SlotSpec:
        spec = self._specs.get(slot)
        if spec is None:
            raise UnboundSlotError(
                f"{self.owner} has no behavior bound to slot '{slot}'"
            )
        return spec

    def _check_contract(self, spec: SlotSpec, behavior: Any) -> None:
        if behavior is None:
            raise BehaviorContractError(
                f"Slot '{spec.name}' on {self.owner} cannot be left unbound"
            )
        if not callable(getattr(behavior, spec.operation, None)):
            raise BehaviorContractError(
                f"{type(behavior).__name__} does not provide "
                f"'{spec.operation}()' required by slot '{spec.name}'"
            )

    def _store(self, slot: str, behavior: Any, is_default: bool) -> None:
        self._bindings[slot] = behavior
        self._history.append(BindingRecord(
            slot=slot,
            behavior=type(behavior).__name__,
            bound_at=datetime.utcnow(),
            default=is_default,
        ))
        logger.debug(
            "Behavior bound",
            owner=self.owner,
            slot=slot,
            behavior=type(behavior).__name__,
            default=is_default,
        )
