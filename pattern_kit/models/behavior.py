"""Behavior slot declarations and the binding audit trail."""

from datetime import datetime

from pydantic import BaseModel


class SlotSpec(BaseModel):
    """A named extension point and the operation its behaviors must expose."""

    name: str                               # e.g., "fly", "quack"
    operation: str                          # Method name invoked on the behavior


class BindingRecord(BaseModel):
    """One bind of a behavior to a slot."""

    slot: str
    behavior: str                           # Class name of the bound behavior
    bound_at: datetime
    default: bool = False                   # True for the construction-time binding
