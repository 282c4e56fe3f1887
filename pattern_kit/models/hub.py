"""Notification Hub configuration and pass outcomes."""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel


class FailurePolicy(str, Enum):
    ISOLATE = "isolate"       # Log the failure, keep notifying the rest.
    PROPAGATE = "propagate"   # Re-raise, abandoning the rest of the pass.


class HubConfig(BaseModel):
    """Configuration for a Notification Hub."""

    failure_policy: FailurePolicy = FailurePolicy.ISOLATE


class DeliveryFailure(BaseModel):
    """An observer that raised while handling a snapshot."""

    observer: str
    error: str


class NotificationReport(BaseModel):
    """Outcome of one notification pass."""

    sequence: int                           # 1-based pass counter per hub
    snapshot: dict
    delivered: List[str] = []               # Observer names, in delivery order
    failed: List[DeliveryFailure] = []
    success: bool
    notified_at: datetime
