"""Coupon value object."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CouponKind(str, Enum):
    PERCENTAGE = "percentage"
    FLAT = "flat"


@dataclass(frozen=True)  # Value objects are immutable
class Coupon:
    code: str
    kind: CouponKind
    value: Decimal
    description: str = ""
