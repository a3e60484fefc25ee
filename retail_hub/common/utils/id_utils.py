"""Identifier generation for catalog items, invoice lines, invoices and log entries."""

import itertools
import secrets
import uuid
from datetime import datetime

from retail_hub.common.utils.date_utils import format_invoice_date

# Process-wide and monotonic, so identifiers are never reused within a run.
_id_counter = itertools.count(1)


def generate_id(prefix: str = "id") -> str:
    """Builds a readable unique identifier such as 'item-1f-3a9c'."""
    counter = format(next(_id_counter), "x")
    return f"{prefix}-{counter}-{secrets.token_hex(2)}"


def generate_invoice_number(issued_at: datetime) -> str:
    """Builds an invoice number in the form INV-<YYYYMMDD>-<6 hex chars>."""
    unique = uuid.uuid4().hex[:6].upper()
    return f"INV-{format_invoice_date(issued_at)}-{unique}"
