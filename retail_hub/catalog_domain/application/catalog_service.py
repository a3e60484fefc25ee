# retail_hub/catalog_domain/application/catalog_service.py
"""Application service for the catalog, its edit form, alerts and analytics."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.catalog_domain.domain.entities.stock_alert import StockAlert
from retail_hub.catalog_domain.domain.services import catalog_store
from retail_hub.catalog_domain.domain.services.alert_service import derive_stock_alerts
from retail_hub.catalog_domain.domain.services.analytics_service import compute_inventory_analytics
from retail_hub.common.dtos.catalog_dtos import CatalogFormDTO, InventoryAnalyticsDTO, InventoryItemFieldsDTO
from retail_hub.common.exceptions.custom_exceptions import NotFoundError, ValidationError
from retail_hub.common.utils.date_utils import now_local
from retail_hub.state.app_state import StateStore

logger = logging.getLogger(__name__)


class CatalogApplicationService:

    def __init__(self, store: StateStore, clock: Callable[[], datetime] = now_local) -> None:
        self.store = store
        self.clock = clock

    @property
    def catalog(self) -> tuple[InventoryItem, ...]:
        return self.store.state.catalog

    def add_item(self, fields: InventoryItemFieldsDTO) -> InventoryItem:
        try:
            new_state, item = catalog_store.add_item(self.store.state, fields, self.clock())
        except ValidationError as e:
            logger.warning(f"Rejected new inventory item: {e}")
            raise
        self.store.replace(new_state)
        logger.info(f"Added inventory item {item.id} ({item.sku}).")
        return item

    def update_item(self, item_id: str, fields: InventoryItemFieldsDTO) -> InventoryItem:
        try:
            new_state, item = catalog_store.update_item(self.store.state, item_id, fields, self.clock())
        except (ValidationError, NotFoundError) as e:
            logger.warning(f"Rejected update of inventory item {item_id}: {e}")
            raise
        self.store.replace(new_state)
        logger.info(f"Updated inventory item {item.id} ({item.sku}), stock {item.stock}.")
        return item

    def get_item(self, item_id: str) -> Optional[InventoryItem]:
        return catalog_store.find_by_id(self.catalog, item_id)

    def find_by_barcode(self, code: str) -> Optional[InventoryItem]:
        return catalog_store.find_by_barcode(self.catalog, code)

    def search(
        self, query: str = "", category_filter: str = catalog_store.ALL_CATEGORIES, low_stock_only: bool = False
    ) -> list[InventoryItem]:
        return catalog_store.search_items(self.catalog, query, category_filter, low_stock_only)

    def get_categories(self) -> list[str]:
        return catalog_store.list_categories(self.catalog)

    def get_alerts(self) -> list[StockAlert]:
        return derive_stock_alerts(self.catalog)

    def get_analytics(self) -> InventoryAnalyticsDTO:
        return compute_inventory_analytics(self.catalog)

    # --- Edit form ---

    @property
    def form(self) -> CatalogFormDTO:
        return self.store.state.catalog_form

    def load_for_editing(self, item_id: str) -> CatalogFormDTO:
        """Copies the item's fields into the form and marks it as being edited."""
        item = self.get_item(item_id)
        if item is None:
            raise NotFoundError(f"Inventory item {item_id} not found.", identifier=item_id)
        form = CatalogFormDTO(fields=item.to_fields(), editing_id=item.id)
        self.store.replace(replace(self.store.state, catalog_form=form, scanner_message=f"Loaded {item.name} for editing."))
        return form

    def update_form(self, **fields) -> CatalogFormDTO:
        """Merges raw form input into the form; values are converted to their field types."""
        try:
            changes = catalog_store.coerce_form_fields(fields)
        except ValidationError as e:
            logger.warning(f"Rejected form input: {e}")
            raise
        form = replace(self.form, fields=replace(self.form.fields, **changes))
        self.store.replace(replace(self.store.state, catalog_form=form))
        return form

    def reset_form(self) -> CatalogFormDTO:
        form = CatalogFormDTO()
        self.store.replace(replace(self.store.state, catalog_form=form, scanner_message=None))
        return form

    def save_form(self) -> InventoryItem:
        """Adds a new item, or updates the one being edited, from the form; then clears the form."""
        form = self.form
        if form.editing_id:
            item = self.update_item(form.editing_id, form.fields)
        else:
            item = self.add_item(form.fields)
        self.reset_form()
        return item
