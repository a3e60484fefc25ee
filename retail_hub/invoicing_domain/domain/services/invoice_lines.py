# retail_hub/invoicing_domain/domain/services/invoice_lines.py
"""Transitions on the invoice draft: lines, customer details and coupon."""

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.exceptions.custom_exceptions import NotFoundError, ValidationError
from retail_hub.common.utils.id_utils import generate_id
from retail_hub.invoicing_domain.domain.entities.coupon import Coupon
from retail_hub.invoicing_domain.domain.entities.invoice_draft import InvoiceDraft
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine

EDITABLE_LINE_FIELDS = frozenset({"product_id", "name", "quantity", "price", "discount"})
EDITABLE_DRAFT_FIELDS = frozenset({"customer_name", "customer_contact", "notes"})


def new_line() -> InvoiceLine:
    return InvoiceLine(id=generate_id("line"))


def new_draft() -> InvoiceDraft:
    """An empty draft holding a single default line."""
    return InvoiceDraft(lines=(new_line(),))


def add_line(draft: InvoiceDraft) -> tuple[InvoiceDraft, InvoiceLine]:
    line = new_line()
    return replace(draft, lines=(*draft.lines, line)), line


def _coerce_line_fields(fields: dict[str, Any]) -> dict[str, Any]:
    unknown = set(fields) - EDITABLE_LINE_FIELDS
    if unknown:
        raise ValidationError(f"Unknown invoice line fields: {', '.join(sorted(unknown))}")
    coerced = dict(fields)
    try:
        if "quantity" in coerced:
            coerced["quantity"] = int(coerced["quantity"])
        for money_field in ("price", "discount"):
            if money_field in coerced:
                coerced[money_field] = Decimal(str(coerced[money_field]))
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValidationError(f"Invalid invoice line value: {e}") from e
    return coerced


def update_line(draft: InvoiceDraft, line_id: str, **fields: Any) -> InvoiceDraft:
    """Merges ``fields`` into the matching line. Unknown line ids leave the draft unchanged."""
    changes = _coerce_line_fields(fields)
    if not any(line.id == line_id for line in draft.lines):
        return draft
    lines = tuple(replace(line, **changes) if line.id == line_id else line for line in draft.lines)
    return replace(draft, lines=lines)


def resolve_product(line: InvoiceLine, catalog: tuple[InventoryItem, ...]) -> Optional[InventoryItem]:
    """Follows the line's catalog reference; None if unbound or the item is gone."""
    if line.product_id is None:
        return None
    return next((item for item in catalog if item.id == line.product_id), None)


def bind_to_product(
    draft: InvoiceDraft, line_id: str, catalog: tuple[InventoryItem, ...], product_id: str
) -> InvoiceDraft:
    """Points the line at a catalog item and takes its name and price.

    Any manually entered discount is reset so the line starts from fresh
    catalog pricing.
    """
    product = next((item for item in catalog if item.id == product_id), None)
    if product is None:
        raise NotFoundError(f"Inventory item {product_id} not found.", identifier=product_id)
    return update_line(
        draft, line_id, product_id=product.id, name=product.name, price=product.price, discount=Decimal("0")
    )


def update_details(draft: InvoiceDraft, **fields: str) -> InvoiceDraft:
    """Sets customer name, contact or notes."""
    unknown = set(fields) - EDITABLE_DRAFT_FIELDS
    if unknown:
        raise ValidationError(f"Unknown invoice fields: {', '.join(sorted(unknown))}")
    return replace(draft, **fields)


def apply_coupon(draft: InvoiceDraft, coupon: Coupon) -> InvoiceDraft:
    return replace(draft, coupon=coupon)


def remove_coupon(draft: InvoiceDraft) -> InvoiceDraft:
    return replace(draft, coupon=None)
