"""Inventory item entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from retail_hub.common.dtos.catalog_dtos import InventoryItemFieldsDTO


@dataclass(frozen=True)
class InventoryItem:
    """Represents one product line held in the store catalog."""

    id: str
    name: str
    sku: str
    barcode: str
    category: str = ""
    stock: int = 0
    reorder_point: int = 0
    price: Decimal = Decimal("0")
    unit: str = ""
    supplier: str = ""
    incoming: int = 0  # Units in transit from the supplier
    last_restock: Optional[date] = None
    description: str = ""

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.stock < 0:
            raise ValueError("Stock cannot be negative.")
        if self.reorder_point < 0:
            raise ValueError("Reorder point cannot be negative.")
        if self.incoming < 0:
            raise ValueError("Incoming quantity cannot be negative.")
        if self.price < 0:
            raise ValueError("Price cannot be negative.")

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.reorder_point

    @classmethod
    def from_fields(cls, item_id: str, fields: InventoryItemFieldsDTO) -> "InventoryItem":
        return cls(
            id=item_id,
            name=fields.name,
            sku=fields.sku,
            barcode=fields.barcode,
            category=fields.category,
            stock=fields.stock,
            reorder_point=fields.reorder_point,
            price=fields.price,
            unit=fields.unit,
            supplier=fields.supplier,
            incoming=fields.incoming,
            last_restock=fields.last_restock,
            description=fields.description,
        )

    def to_fields(self) -> InventoryItemFieldsDTO:
        """Everything but the identifier, e.g. to load the item into the edit form."""
        return InventoryItemFieldsDTO(
            name=self.name,
            sku=self.sku,
            barcode=self.barcode,
            category=self.category,
            stock=self.stock,
            reorder_point=self.reorder_point,
            price=self.price,
            unit=self.unit,
            supplier=self.supplier,
            incoming=self.incoming,
            last_restock=self.last_restock,
            description=self.description,
        )
