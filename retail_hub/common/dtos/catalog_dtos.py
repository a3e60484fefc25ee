"""Data Transfer Objects for catalog data."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from retail_hub.common.utils.date_utils import parse_restock_date, today_local


@dataclass(frozen=True)
class InventoryItemFieldsDTO:
    """Every editable inventory item field; the identifier is assigned by the catalog."""

    name: str = ""
    sku: str = ""
    barcode: str = ""
    category: str = ""
    stock: int = 0
    reorder_point: int = 0
    price: Decimal = Decimal("0")
    unit: str = ""
    supplier: str = ""
    incoming: int = 0
    last_restock: Optional[date] = None
    description: str = ""

    @classmethod
    def empty(cls) -> "InventoryItemFieldsDTO":
        """Blank form with the restock date defaulting to today."""
        return cls(last_restock=today_local())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InventoryItemFieldsDTO":
        """Creates the DTO from a plain mapping (seed data, form posts)."""
        last_restock = data.get("last_restock")
        if isinstance(last_restock, str):
            last_restock = parse_restock_date(last_restock)
        return cls(
            name=data.get("name", ""),
            sku=data.get("sku", ""),
            barcode=data.get("barcode", ""),
            category=data.get("category", ""),
            stock=int(data.get("stock", 0)),
            reorder_point=int(data.get("reorder_point", 0)),
            price=Decimal(str(data.get("price", "0"))),
            unit=data.get("unit", ""),
            supplier=data.get("supplier", ""),
            incoming=int(data.get("incoming", 0)),
            last_restock=last_restock,
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class CatalogFormDTO:
    """State of the catalog add/edit form."""

    fields: InventoryItemFieldsDTO = field(default_factory=InventoryItemFieldsDTO.empty)
    editing_id: Optional[str] = None  # None while adding a new item


@dataclass(frozen=True)
class InventoryAnalyticsDTO:
    """Dashboard figures derived from the catalog."""

    total_products: int
    total_units: int
    inventory_value: Decimal
    incoming: int
    low_stock_count: int
    fast_moving: list[str] = field(default_factory=list)
