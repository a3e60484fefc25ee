"""Issued invoice entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class InvoiceRecord:
    """An issued invoice. ``total`` is the grand total snapshot taken at issuance."""

    id: str
    number: str
    customer: str
    total: Decimal
    created_at: datetime
    coupon_code: Optional[str] = None
