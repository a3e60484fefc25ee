# retail_hub/invoicing_domain/domain/services/invoice_issuer.py
"""Issuing an invoice from the current draft."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from retail_hub.activity_domain.domain.entities.activity_log_entry import ActivityCategory
from retail_hub.activity_domain.domain.services.activity_log import record_activity
from retail_hub.common.config.settings import settings
from retail_hub.common.dtos.invoice_dtos import DocumentLineDTO, InvoiceDocumentDTO
from retail_hub.common.exceptions.custom_exceptions import ValidationError
from retail_hub.common.utils.id_utils import generate_id, generate_invoice_number
from retail_hub.invoicing_domain.domain.entities.invoice_draft import InvoiceDraft
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine
from retail_hub.invoicing_domain.domain.entities.invoice_record import InvoiceRecord
from retail_hub.invoicing_domain.domain.services.invoice_lines import new_draft
from retail_hub.invoicing_domain.domain.services.pricing_engine import compute_totals, quantize_money
from retail_hub.state.app_state import AppState


def validate_draft(draft: InvoiceDraft) -> tuple[InvoiceLine, ...]:
    """Checks the draft can be issued and returns its billable lines."""
    if not draft.customer_name.strip():
        raise ValidationError("Customer name is required for invoice.", field="customer_name")
    billable = draft.billable_lines
    if not billable:
        raise ValidationError("Add at least one product line to generate invoice.", field="lines")
    return billable


def issue_invoice(
    state: AppState,
    now: datetime,
    tax_rate: Decimal | None = None,
    history_limit: int | None = None,
) -> tuple[AppState, InvoiceRecord, InvoiceDocumentDTO]:
    """
    Turns the draft into an immutable InvoiceRecord.

    Returns the new state (record prepended to history, activity logged,
    draft reset), the record, and the print bundle. On validation failure
    nothing is returned and the caller's state stays as it was.
    """
    if tax_rate is None:
        tax_rate = settings.TAX_RATE
    if history_limit is None:
        history_limit = settings.INVOICE_HISTORY_LIMIT

    draft = state.draft
    billable = validate_draft(draft)
    totals = compute_totals(draft.lines, draft.coupon, tax_rate)
    invoice_number = generate_invoice_number(now)

    record = InvoiceRecord(
        id=generate_id("invoice"),
        number=invoice_number,
        customer=draft.customer_name,
        total=totals.grand_total,
        created_at=now,
        coupon_code=draft.coupon.code if draft.coupon else None,
    )
    document = InvoiceDocumentDTO(
        invoice_number=invoice_number,
        customer_name=draft.customer_name,
        customer_contact=draft.customer_contact,
        notes=draft.notes,
        issued_at=now,
        subtotal=totals.subtotal,
        deduction=totals.deduction,
        tax=totals.tax,
        grand_total=totals.grand_total,
        tax_rate=tax_rate,
        coupon_code=record.coupon_code,
        coupon_description=draft.coupon.description if draft.coupon else None,
        lines=[
            DocumentLineDTO(
                name=line.name,
                quantity=line.quantity,
                price=line.price,
                discount=line.discount,
                line_total=line.line_total,
            )
            for line in billable
        ],
    )
    activity = record_activity(
        state.activity,
        f"Invoice {invoice_number} generated for {draft.customer_name} "
        f"({settings.CURRENCY_SYMBOL}{quantize_money(totals.grand_total)}).",
        ActivityCategory.INVOICE,
        now,
    )
    new_state = replace(
        state,
        history=(record, *state.history)[:history_limit],
        activity=activity,
        draft=new_draft(),
    )
    return new_state, record, document
