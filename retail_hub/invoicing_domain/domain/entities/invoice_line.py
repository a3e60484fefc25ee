"""Invoice line entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class InvoiceLine:
    """
    A line on the invoice draft.

    ``product_id`` is a weak reference: it stores the catalog identifier only,
    and the catalog item may have changed or gone by the time it is read.
    """

    id: str
    product_id: Optional[str] = None
    name: str = ""
    quantity: int = 1
    price: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")  # Flat amount per line

    @property
    def line_total(self) -> Decimal:
        """quantity * price - discount, never below zero."""
        return max(self.quantity * self.price - self.discount, Decimal("0"))

    @property
    def is_billable(self) -> bool:
        return self.quantity > 0 and bool(self.name or self.product_id)
