"""Interchangeable fly and quack behaviors for the duck example."""

from typing import Optional


# --- Fly behaviors ---

class FlyWithWings:
    def fly(self) -> Optional[str]:
        return "I'm flying!!"


class FlyNoWay:
    """Cannot fly: the operation has no effect."""

    def fly(self) -> Optional[str]:
        return None


class FlyRocketPowered:
    def fly(self) -> Optional[str]:
        return "I'm flying with a rocket!"


# --- Quack behaviors ---

class Quack:
    def quack(self) -> Optional[str]:
        return "Quack"


class Squeak:
    def quack(self) -> Optional[str]:
        return "Squeak"


class MuteQuack:
    """Silent: the operation has no effect."""

    def quack(self) -> Optional[str]:
        return None
