"""Starter catalog loaded when the back office boots."""

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.dtos.catalog_dtos import InventoryItemFieldsDTO

SEED_ITEMS: list[dict] = [
    {
        "id": "item-1",
        "name": "Premium Tulsi Honey",
        "sku": "HN-TL-001",
        "barcode": "8901234000017",
        "category": "Groceries",
        "stock": 42,
        "reorder_point": 20,
        "price": "349",
        "unit": "bottle",
        "supplier": "Raw Bliss Naturals",
        "incoming": 50,
        "last_restock": "2024-03-12",
        "description": "Organic honey infused with tulsi for immunity support.",
    },
    {
        "id": "item-2",
        "name": "Artisan Ceramic Cup Set",
        "sku": "CR-CP-114",
        "barcode": "8901234000024",
        "category": "Home & Living",
        "stock": 12,
        "reorder_point": 10,
        "price": "1299",
        "unit": "set",
        "supplier": "Studio Clayworks",
        "incoming": 24,
        "last_restock": "2024-04-02",
        "description": "Hand-crafted ceramic cups with matte glaze finish, set of four.",
    },
    {
        "id": "item-3",
        "name": "Cold Brew Coffee Mix",
        "sku": "CF-CB-078",
        "barcode": "8901234000031",
        "category": "Beverages",
        "stock": 8,
        "reorder_point": 15,
        "price": "499",
        "unit": "pack",
        "supplier": "Karma Beans Collective",
        "incoming": 60,
        "last_restock": "2024-02-24",
        "description": "Instant cold brew mix with chicory and single-origin beans.",
    },
    {
        "id": "item-4",
        "name": "Eco Smart Notebook",
        "sku": "ST-NB-210",
        "barcode": "8901234000048",
        "category": "Stationery",
        "stock": 76,
        "reorder_point": 25,
        "price": "249",
        "unit": "piece",
        "supplier": "Papyrus & Ink",
        "incoming": 120,
        "last_restock": "2024-03-29",
        "description": "Reusable synthetic paper notebook compatible with erasable pens.",
    },
    {
        "id": "item-5",
        "name": "Aura Soy Candle",
        "sku": "HM-CD-054",
        "barcode": "8901234000055",
        "category": "Home & Living",
        "stock": 4,
        "reorder_point": 8,
        "price": "599",
        "unit": "piece",
        "supplier": "Calm Co.",
        "incoming": 30,
        "last_restock": "2024-03-05",
        "description": "Hand-poured soy candle with lavender and sandalwood notes.",
    },
]


def build_seed_catalog() -> tuple[InventoryItem, ...]:
    return tuple(InventoryItem.from_fields(data["id"], InventoryItemFieldsDTO.from_dict(data)) for data in SEED_ITEMS)
