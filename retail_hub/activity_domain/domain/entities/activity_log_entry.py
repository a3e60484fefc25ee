"""Activity log entry entity."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ActivityCategory(str, Enum):
    INVENTORY = "inventory"
    INVOICE = "invoice"
    ALERT = "alert"
    SYSTEM = "system"


@dataclass(frozen=True)
class ActivityLogEntry:
    """A single domain event shown in the recent-activity feed."""

    id: str
    message: str
    timestamp: datetime
    category: ActivityCategory
