"""Invoice draft aggregate."""

from dataclasses import dataclass
from typing import Optional

from retail_hub.invoicing_domain.domain.entities.coupon import Coupon
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine


@dataclass(frozen=True)
class InvoiceDraft:
    """The in-progress invoice; becomes an InvoiceRecord when issued."""

    lines: tuple[InvoiceLine, ...] = ()
    customer_name: str = ""
    customer_contact: str = ""
    notes: str = ""
    coupon: Optional[Coupon] = None

    @property
    def billable_lines(self) -> tuple[InvoiceLine, ...]:
        return tuple(line for line in self.lines if line.is_billable)
