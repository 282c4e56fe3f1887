"""
Duck — an entity composed from fly and quack behaviors.

Kinds of duck differ only in which behaviors they are built with, so the
factories below pass defaults into a single Duck class instead of
subclassing and overriding fly()/quack().
"""

from typing import Optional

from pattern_kit.behavior.library import (
    FlyNoWay,
    FlyWithWings,
    MuteQuack,
    Quack,
    Squeak,
)
from pattern_kit.behavior.registry import BehaviorRegistry, FlyBehavior, QuackBehavior
from pattern_kit.helpers.logger import get_logger

logger = get_logger(__name__)

FLY_SLOT = "fly"
QUACK_SLOT = "quack"


class Duck:
    """A duck whose flying and quacking are delegated to bound behaviors."""

    def __init__(
        self,
        name: str,
        fly_behavior: FlyBehavior,
        quack_behavior: QuackBehavior,
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description or f"I'm a {name}"
        self.behaviors = BehaviorRegistry(owner=name)
        self.behaviors.declare(FLY_SLOT, "fly", fly_behavior)
        self.behaviors.declare(QUACK_SLOT, "quack", quack_behavior)

    @property
    def fly_behavior(self) -> FlyBehavior:
        return self.behaviors.get(FLY_SLOT)

    @property
    def quack_behavior(self) -> QuackBehavior:
        return self.behaviors.get(QUACK_SLOT)

    def set_fly_behavior(self, behavior: FlyBehavior) -> None:
        self.behaviors.bind(FLY_SLOT, behavior)

    def set_quack_behavior(self, behavior: QuackBehavior) -> None:
        self.behaviors.bind(QUACK_SLOT, behavior)

    def perform_fly(self) -> Optional[str]:
        effect = self.behaviors.invoke(FLY_SLOT)
        logger.debug("Duck flew", duck=self.name, effect=effect)
        return effect

    def perform_quack(self) -> Optional[str]:
        effect = self.behaviors.invoke(QUACK_SLOT)
        logger.debug("Duck quacked", duck=self.name, effect=effect)
        return effect

    def swim(self) -> str:
        return "All ducks float, even decoys!"

    def display(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Duck(name={self.name!r})"


# --- Factories ---

def mallard_duck() -> Duck:
    return Duck("Mallard duck", FlyWithWings(), Quack(), "I'm a real Mallard duck")


def redhead_duck() -> Duck:
    return Duck("Redhead duck", FlyWithWings(), Quack(), "I'm a real Redhead duck")


def rubber_duck() -> Duck:
    return Duck("Rubber duck", FlyNoWay(), Squeak(), "I'm a rubber duckie")


def decoy_duck() -> Duck:
    return Duck("Decoy duck", FlyNoWay(), MuteQuack(), "I'm a duck Decoy")


def model_duck() -> Duck:
    return Duck("Model duck", FlyNoWay(), Quack(), "I'm a model duck")
