"""Data Transfer Objects for invoice pricing and printing."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class InvoiceTotalsDTO:
    """Totals computed by the pricing engine, kept at full precision."""

    subtotal: Decimal
    deduction: Decimal
    taxable_base: Decimal
    tax: Decimal
    grand_total: Decimal


@dataclass(frozen=True)
class DocumentLineDTO:
    """One printable invoice line."""

    name: str
    quantity: int
    price: Decimal
    discount: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class InvoiceDocumentDTO:
    """Flat bundle handed to the print capability when an invoice is issued."""

    invoice_number: str
    customer_name: str
    customer_contact: str
    notes: str
    issued_at: datetime
    subtotal: Decimal
    deduction: Decimal
    tax: Decimal
    grand_total: Decimal
    tax_rate: Decimal
    coupon_code: Optional[str] = None
    coupon_description: Optional[str] = None
    lines: list[DocumentLineDTO] = field(default_factory=list)
