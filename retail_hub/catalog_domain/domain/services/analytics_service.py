"""Dashboard analytics over the catalog."""

from decimal import Decimal

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.dtos.catalog_dtos import InventoryAnalyticsDTO

FAST_MOVING_STOCK_BELOW = 15
FAST_MOVING_MAX_REORDER_POINT = 20


def compute_inventory_analytics(catalog: tuple[InventoryItem, ...]) -> InventoryAnalyticsDTO:
    fast_moving = [
        item.name
        for item in catalog
        if item.stock < FAST_MOVING_STOCK_BELOW and item.reorder_point <= FAST_MOVING_MAX_REORDER_POINT
    ]
    return InventoryAnalyticsDTO(
        total_products=len(catalog),
        total_units=sum(item.stock for item in catalog),
        inventory_value=sum((item.stock * item.price for item in catalog), Decimal("0")),
        incoming=sum(item.incoming for item in catalog),
        low_stock_count=sum(1 for item in catalog if item.is_low_stock),
        fast_moving=fast_moving,
    )
