"""Tests for the invoice pricing engine."""

from decimal import Decimal

import pytest

from retail_hub.invoicing_domain.domain.entities.coupon import Coupon, CouponKind
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine
from retail_hub.invoicing_domain.domain.services.pricing_engine import (
    compute_deduction,
    compute_subtotal,
    compute_totals,
    quantize_money,
)

TAX_RATE = Decimal("0.18")


def _line(quantity: int, price: str, discount: str = "0", line_id: str = "line") -> InvoiceLine:
    return InvoiceLine(id=line_id, name="Item", quantity=quantity, price=Decimal(price), discount=Decimal(discount))


@pytest.mark.parametrize(
    "quantity, price, discount, expected",
    [
        (2, "500", "100", Decimal("900")),
        (1, "100", "150", Decimal("0")),  # Discount larger than the line is clamped
        (0, "100", "0", Decimal("0")),
        (-3, "100", "0", Decimal("0")),  # Negative quantity tolerated
        (3, "19.99", "0.97", Decimal("59.00")),
    ],
)
def test_line_total_is_clamped_at_zero(quantity, price, discount, expected) -> None:
    assert _line(quantity, price, discount).line_total == expected


def test_single_discounted_line_without_coupon(discounted_line) -> None:
    totals = compute_totals([discounted_line], None, TAX_RATE)

    assert totals.subtotal == Decimal("900")
    assert totals.deduction == Decimal("0")
    assert totals.tax == Decimal("162.00")
    assert totals.grand_total == Decimal("1062.00")


def test_flat_coupon_on_subtotal_of_1000(freeship_coupon) -> None:
    totals = compute_totals([_line(1, "1000")], freeship_coupon, TAX_RATE)

    assert totals.deduction == Decimal("150")
    assert totals.taxable_base == Decimal("850")
    assert totals.tax == Decimal("153.00")
    assert totals.grand_total == Decimal("1003.00")


def test_percentage_coupon_on_subtotal_of_1000(welcome_coupon) -> None:
    totals = compute_totals([_line(1, "1000")], welcome_coupon, TAX_RATE)

    assert totals.deduction == Decimal("100")
    assert totals.taxable_base == Decimal("900")
    assert totals.tax == Decimal("162.00")
    assert totals.grand_total == Decimal("1062.00")


def test_flat_coupon_is_not_clamped_to_subtotal() -> None:
    coupon = Coupon(code="BULK500", kind=CouponKind.FLAT, value=Decimal("500"))

    totals = compute_totals([_line(1, "100")], coupon, TAX_RATE)

    assert totals.deduction == Decimal("500")
    assert totals.taxable_base == Decimal("0")
    assert totals.tax == Decimal("0")
    assert totals.grand_total == Decimal("0")


def test_subtotal_clamps_each_line_before_summing() -> None:
    lines = [_line(1, "100", "300", "a"), _line(2, "50", "0", "b")]

    # Without per-line clamping the sum would be -100
    assert compute_subtotal(lines) == Decimal("100")


def test_subtotal_of_no_lines_is_zero() -> None:
    assert compute_subtotal([]) == Decimal("0")


@pytest.mark.parametrize("subtotal", [Decimal("0"), Decimal("37.50"), Decimal("1000"), Decimal("123456.78")])
def test_deduction_by_coupon_kind(subtotal, welcome_coupon, freeship_coupon) -> None:
    assert compute_deduction(subtotal, None) == Decimal("0")
    assert compute_deduction(subtotal, welcome_coupon) == Decimal("10") * subtotal / 100
    assert compute_deduction(subtotal, freeship_coupon) == Decimal("150")


@pytest.mark.parametrize(
    "lines, coupon",
    [
        ([("1", "100", "0")], None),
        ([("3", "333.33", "1")], Coupon(code="P", kind=CouponKind.PERCENTAGE, value=Decimal("12.5"))),
        ([("1", "40", "0"), ("2", "15", "5")], Coupon(code="F", kind=CouponKind.FLAT, value=Decimal("80"))),
        ([("0", "999", "0")], Coupon(code="F", kind=CouponKind.FLAT, value=Decimal("1"))),
        ([("5", "20", "150")], Coupon(code="P", kind=CouponKind.PERCENTAGE, value=Decimal("100"))),
    ],
)
def test_grand_total_formula(lines, coupon) -> None:
    invoice_lines = [_line(int(q), p, d, f"line-{i}") for i, (q, p, d) in enumerate(lines)]

    totals = compute_totals(invoice_lines, coupon, TAX_RATE)

    base = totals.subtotal - totals.deduction
    expected = max(base + max(base, Decimal("0")) * TAX_RATE, Decimal("0"))
    assert totals.grand_total == expected
    assert totals.subtotal >= 0


def test_totals_keep_full_precision() -> None:
    totals = compute_totals([_line(1, "0.05")], None, TAX_RATE)

    assert totals.tax == Decimal("0.0090")
    assert quantize_money(totals.tax) == Decimal("0.01")


@pytest.mark.parametrize(
    "value, expected",
    [(Decimal("10.005"), Decimal("10.01")), (Decimal("10.004"), Decimal("10.00")), (Decimal("7"), Decimal("7.00"))],
)
def test_quantize_money_rounds_half_up(value, expected) -> None:
    assert str(quantize_money(value)) == str(expected)
