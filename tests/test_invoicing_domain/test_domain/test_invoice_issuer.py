"""Tests for invoice issuance."""

import dataclasses
import re
from dataclasses import replace
from decimal import Decimal

import pytest

from retail_hub.activity_domain.domain.entities.activity_log_entry import ActivityCategory
from retail_hub.common.exceptions.custom_exceptions import ValidationError
from retail_hub.invoicing_domain.domain.entities.invoice_draft import InvoiceDraft
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine
from retail_hub.invoicing_domain.domain.services.invoice_issuer import issue_invoice
from retail_hub.state.app_state import AppState


def _with_draft(state: AppState, **draft_fields) -> AppState:
    return replace(state, draft=InvoiceDraft(**draft_fields))


def test_issue_invoice_snapshots_totals(seed_state, discounted_line, fixed_now) -> None:
    state = _with_draft(seed_state, lines=(discounted_line,), customer_name="Asha Rao")

    new_state, record, document = issue_invoice(state, fixed_now)

    assert re.fullmatch(r"INV-20261019-[0-9A-F]{6}", record.number)
    assert record.customer == "Asha Rao"
    assert record.total == Decimal("1062.00")
    assert record.created_at == fixed_now
    assert record.coupon_code is None
    assert new_state.history == (record,)

    assert document.invoice_number == record.number
    assert document.subtotal == Decimal("900")
    assert document.tax == Decimal("162.00")
    assert document.grand_total == Decimal("1062.00")
    assert document.issued_at == fixed_now


def test_issue_invoice_logs_activity(seed_state, discounted_line, fixed_now) -> None:
    state = _with_draft(seed_state, lines=(discounted_line,), customer_name="Asha Rao")

    new_state, record, _ = issue_invoice(state, fixed_now)

    entry = new_state.activity[0]
    assert entry.category == ActivityCategory.INVOICE
    assert entry.message == f"Invoice {record.number} generated for Asha Rao (₹1062.00)."
    assert len(new_state.activity) == len(state.activity) + 1


def test_issue_invoice_resets_draft(seed_state, discounted_line, welcome_coupon, fixed_now) -> None:
    state = _with_draft(
        seed_state, lines=(discounted_line,), customer_name="Asha Rao", notes="Gift wrap", coupon=welcome_coupon
    )

    new_state, record, _ = issue_invoice(state, fixed_now)

    assert record.coupon_code == "WELCOME10"
    assert len(new_state.draft.lines) == 1
    assert new_state.draft.lines[0].name == ""
    assert new_state.draft.customer_name == ""
    assert new_state.draft.notes == ""
    assert new_state.draft.coupon is None


def test_print_bundle_contains_only_billable_lines(seed_state, discounted_line, welcome_coupon, fixed_now) -> None:
    blank = InvoiceLine(id="line-blank")
    zero_quantity = InvoiceLine(id="line-zero", name="Sample", quantity=0, price=Decimal("50"))
    state = _with_draft(
        seed_state,
        lines=(blank, discounted_line, zero_quantity),
        customer_name="Asha Rao",
        customer_contact="asha@example.com",
        notes="Deliver after 6pm",
        coupon=welcome_coupon,
    )

    _, _, document = issue_invoice(state, fixed_now)

    assert [line.name for line in document.lines] == ["Ceramic Vase"]
    assert document.lines[0].line_total == Decimal("900")
    assert document.customer_contact == "asha@example.com"
    assert document.notes == "Deliver after 6pm"
    assert document.coupon_code == "WELCOME10"
    assert document.deduction == Decimal("90")
    assert document.tax == Decimal("145.80")
    assert document.grand_total == Decimal("955.80")
    assert document.tax_rate == Decimal("0.18")


def test_line_bound_to_product_without_name_is_billable(seed_state, fixed_now) -> None:
    line = InvoiceLine(id="line-p", product_id="item-1", quantity=1, price=Decimal("349"))
    state = _with_draft(seed_state, lines=(line,), customer_name="Asha Rao")

    _, record, _ = issue_invoice(state, fixed_now)

    assert record.total == Decimal("411.82")


@pytest.mark.parametrize("customer_name", ["", "   "])
def test_issue_invoice_requires_customer_name(seed_state, discounted_line, fixed_now, customer_name) -> None:
    state = _with_draft(seed_state, lines=(discounted_line,), customer_name=customer_name)

    with pytest.raises(ValidationError) as exc_info:
        issue_invoice(state, fixed_now)

    assert exc_info.value.field == "customer_name"
    assert state.history == ()


@pytest.mark.parametrize(
    "lines",
    [
        (InvoiceLine(id="line-blank"),),
        (InvoiceLine(id="line-zero", name="Sample", quantity=0, price=Decimal("50")),),
        (InvoiceLine(id="line-neg", name="Return", quantity=-1, price=Decimal("50")),),
        (),
    ],
)
def test_issue_invoice_requires_a_billable_line(seed_state, fixed_now, lines) -> None:
    state = _with_draft(seed_state, lines=lines, customer_name="Asha Rao")

    with pytest.raises(ValidationError) as exc_info:
        issue_invoice(state, fixed_now)

    assert exc_info.value.field == "lines"


def test_history_is_capped_most_recent_first(seed_state, discounted_line, fixed_now) -> None:
    state = seed_state
    for i in range(25):
        state = replace(state, draft=InvoiceDraft(lines=(discounted_line,), customer_name=f"Customer {i}"))
        state, _, _ = issue_invoice(state, fixed_now)

    assert len(state.history) == 20
    assert [record.customer for record in state.history][:2] == ["Customer 24", "Customer 23"]
    assert state.history[-1].customer == "Customer 5"
    assert len(state.activity) <= 40


def test_invoice_record_is_immutable(seed_state, discounted_line, fixed_now) -> None:
    state = _with_draft(seed_state, lines=(discounted_line,), customer_name="Asha Rao")
    _, record, _ = issue_invoice(state, fixed_now)

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.total = Decimal("0")
