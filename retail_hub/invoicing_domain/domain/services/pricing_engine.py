# retail_hub/invoicing_domain/domain/services/pricing_engine.py
"""Invoice pricing.

Totals are accumulated at full ``Decimal`` precision; rounding to two places
happens only when a value is presented (``quantize_money``).

A flat coupon is honoured in full even when it exceeds the subtotal: the
taxable base is floored at zero for the tax computation, while the grand
total subtracts the whole deduction before being floored itself.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from retail_hub.common.dtos.invoice_dtos import InvoiceTotalsDTO
from retail_hub.invoicing_domain.domain.entities.coupon import Coupon, CouponKind
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine

ZERO = Decimal("0")
CENT = Decimal("0.01")


def compute_subtotal(lines: Iterable[InvoiceLine]) -> Decimal:
    return sum((line.line_total for line in lines), ZERO)


def compute_deduction(subtotal: Decimal, coupon: Optional[Coupon]) -> Decimal:
    if coupon is None:
        return ZERO
    if coupon.kind == CouponKind.PERCENTAGE:
        return coupon.value * subtotal / 100
    return coupon.value


def compute_totals(
    lines: Iterable[InvoiceLine], coupon: Optional[Coupon], tax_rate: Decimal
) -> InvoiceTotalsDTO:
    subtotal = compute_subtotal(lines)
    deduction = compute_deduction(subtotal, coupon)
    taxable_base = max(subtotal - deduction, ZERO)
    tax = taxable_base * tax_rate
    grand_total = max(subtotal - deduction + tax, ZERO)
    return InvoiceTotalsDTO(
        subtotal=subtotal,
        deduction=deduction,
        taxable_base=taxable_base,
        tax=tax,
        grand_total=grand_total,
    )


def quantize_money(value: Decimal) -> Decimal:
    """Rounds a monetary value to two places for display."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
