# retail_hub/catalog_domain/domain/services/catalog_store.py
"""Catalog store transitions and queries.

Transitions take the current ``AppState`` and return a new one together with
the affected item; nothing is mutated in place. Queries work on the catalog
tuple directly.
"""

from dataclasses import fields as dataclass_fields, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from retail_hub.activity_domain.domain.entities.activity_log_entry import ActivityCategory
from retail_hub.activity_domain.domain.services.activity_log import record_activity
from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.dtos.catalog_dtos import InventoryItemFieldsDTO
from retail_hub.common.exceptions.custom_exceptions import NotFoundError, ValidationError
from retail_hub.common.utils.id_utils import generate_id
from retail_hub.state.app_state import AppState

ALL_CATEGORIES = "all"
UNCATEGORIZED = "Uncategorized"

FORM_FIELDS = frozenset(f.name for f in dataclass_fields(InventoryItemFieldsDTO))
QUANTITY_FIELDS = frozenset({"stock", "reorder_point", "incoming"})


def _coerce_form_value(name: str, value: Any) -> Any:
    if name in QUANTITY_FIELDS:
        return int(str(value).strip() or 0)
    if name == "price":
        price = Decimal(str(value).strip() or "0")
        if not price.is_finite():
            raise ValueError("price must be a finite amount")
        return price
    if name == "last_restock":
        if value is None or isinstance(value, date):
            return value
        text = str(value).strip()
        return date.fromisoformat(text) if text else None
    return "" if value is None else str(value)


def coerce_form_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Converts raw form input (typically strings) into typed item field values.

    Quantities become ints, the price a ``Decimal`` and the restock date a
    ``date`` (blank clears it). Unknown fields or unparseable values raise
    ``ValidationError`` naming the offending field.
    """
    unknown = set(fields) - FORM_FIELDS
    if unknown:
        raise ValidationError(f"Unknown inventory item fields: {', '.join(sorted(unknown))}")
    coerced = {}
    for name, value in fields.items():
        try:
            coerced[name] = _coerce_form_value(name, value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValidationError(f"Invalid value for {name}: {value!r}", field=name) from e
    return coerced


def _validate_required_fields(fields: InventoryItemFieldsDTO) -> None:
    for field_name in ("name", "sku", "barcode"):
        if not getattr(fields, field_name).strip():
            raise ValidationError("Name, SKU, and barcode are required.", field=field_name)


def _validate_unique_barcode(
    catalog: tuple[InventoryItem, ...], barcode: str, exclude_id: Optional[str] = None
) -> None:
    """No two items may share a barcode; ``exclude_id`` is the item being edited."""
    if any(item.barcode == barcode and item.id != exclude_id for item in catalog):
        raise ValidationError(f"Barcode {barcode} is already assigned to another item.", field="barcode")


def _build_item(item_id: str, fields: InventoryItemFieldsDTO) -> InventoryItem:
    try:
        return InventoryItem.from_fields(item_id, fields)
    except (ValueError, TypeError) as e:
        raise ValidationError(str(e)) from e


def add_item(state: AppState, fields: InventoryItemFieldsDTO, now: datetime) -> tuple[AppState, InventoryItem]:
    """Adds a new item at the top of the catalog under a freshly generated identifier."""
    _validate_required_fields(fields)
    _validate_unique_barcode(state.catalog, fields.barcode)
    item = _build_item(generate_id("item"), fields)
    activity = record_activity(
        state.activity,
        f"Added new item {item.name} ({item.sku}) to inventory.",
        ActivityCategory.INVENTORY,
        now,
    )
    return replace(state, catalog=(item, *state.catalog), activity=activity), item


def update_item(
    state: AppState, item_id: str, fields: InventoryItemFieldsDTO, now: datetime
) -> tuple[AppState, InventoryItem]:
    """Replaces every field of the item except its identifier; the catalog position is kept."""
    if find_by_id(state.catalog, item_id) is None:
        raise NotFoundError(f"Inventory item {item_id} not found.", identifier=item_id)
    _validate_required_fields(fields)
    _validate_unique_barcode(state.catalog, fields.barcode, exclude_id=item_id)
    updated = _build_item(item_id, fields)
    catalog = tuple(updated if item.id == item_id else item for item in state.catalog)
    activity = record_activity(
        state.activity,
        f"Updated {updated.name} ({updated.sku}) with current stock {updated.stock}.",
        ActivityCategory.INVENTORY,
        now,
    )
    return replace(state, catalog=catalog, activity=activity), updated


def find_by_id(catalog: tuple[InventoryItem, ...], item_id: str) -> Optional[InventoryItem]:
    return next((item for item in catalog if item.id == item_id), None)


def find_by_barcode(catalog: tuple[InventoryItem, ...], code: str) -> Optional[InventoryItem]:
    """Exact, case-sensitive barcode match."""
    return next((item for item in catalog if item.barcode == code), None)


def search_items(
    catalog: tuple[InventoryItem, ...],
    query: str = "",
    category_filter: str = ALL_CATEGORIES,
    low_stock_only: bool = False,
) -> list[InventoryItem]:
    """Filters the catalog, preserving its order.

    ``query`` is matched case-insensitively as a substring of the name, SKU or
    barcode. A ``category_filter`` of ``"all"`` disables category filtering.
    """
    needle = query.lower()
    results = []
    for item in catalog:
        matches_search = (
            needle in item.name.lower() or needle in item.sku.lower() or needle in item.barcode.lower()
        )
        matches_category = category_filter == ALL_CATEGORIES or item.category == category_filter
        matches_stock = not low_stock_only or item.is_low_stock
        if matches_search and matches_category and matches_stock:
            results.append(item)
    return results


def list_categories(catalog: tuple[InventoryItem, ...]) -> list[str]:
    """Unique categories in catalog order; items without one count as 'Uncategorized'."""
    return list(dict.fromkeys(item.category or UNCATEGORIZED for item in catalog))
