"""Low-stock alert value object."""

from dataclasses import dataclass
from enum import Enum


class AlertSeverity(str, Enum):
    CRITICAL = "critical"  # Out of stock
    WARNING = "warning"


@dataclass(frozen=True)  # Value objects are immutable
class StockAlert:
    item_id: str
    title: str
    detail: str
    severity: AlertSeverity
