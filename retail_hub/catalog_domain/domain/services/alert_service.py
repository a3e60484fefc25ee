"""Low-stock alert derivation."""

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.catalog_domain.domain.entities.stock_alert import AlertSeverity, StockAlert


def derive_stock_alerts(catalog: tuple[InventoryItem, ...]) -> list[StockAlert]:
    """One alert per item at or below its reorder point, in catalog order.

    Severity is critical when the item is out of stock, warning otherwise.
    """
    return [
        StockAlert(
            item_id=item.id,
            title=f"{item.name} is running low",
            detail=f"{item.stock} units left. Reorder point: {item.reorder_point}",
            severity=AlertSeverity.CRITICAL if item.stock == 0 else AlertSeverity.WARNING,
        )
        for item in catalog
        if item.is_low_stock
    ]
