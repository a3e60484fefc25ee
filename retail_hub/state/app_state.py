"""Application state aggregate and its single-writer holder."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from retail_hub.activity_domain.domain.entities.activity_log_entry import ActivityCategory, ActivityLogEntry
from retail_hub.activity_domain.domain.services.activity_log import record_activity
from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.dtos.catalog_dtos import CatalogFormDTO
from retail_hub.common.utils.date_utils import now_local
from retail_hub.invoicing_domain.domain.entities.invoice_draft import InvoiceDraft
from retail_hub.invoicing_domain.domain.entities.invoice_record import InvoiceRecord
from retail_hub.invoicing_domain.domain.services.invoice_lines import new_draft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """Everything the back office holds in memory. Transitions return a new AppState."""

    catalog: tuple[InventoryItem, ...] = ()
    activity: tuple[ActivityLogEntry, ...] = ()
    draft: InvoiceDraft = field(default_factory=new_draft)
    history: tuple[InvoiceRecord, ...] = ()  # Most recent first
    catalog_form: CatalogFormDTO = field(default_factory=CatalogFormDTO)
    scanner_message: str | None = None


def initial_state(catalog: Iterable[InventoryItem] = ()) -> AppState:
    """Builds the start-up state with the initialisation entry in the activity log."""
    activity = record_activity((), "Dashboard initialized with sync-ready inventory.", ActivityCategory.SYSTEM, now_local())
    return AppState(catalog=tuple(catalog), activity=activity)


class StateStore:
    """
    Holds the current AppState.

    There is a single logical writer (the UI event loop), so a transition is
    simply computing the next state and swapping the reference.
    """

    def __init__(self, state: AppState | None = None) -> None:
        self._state = state if state is not None else initial_state()

    @property
    def state(self) -> AppState:
        return self._state

    def replace(self, new_state: AppState) -> AppState:
        logger.debug("State replaced")
        self._state = new_state
        return new_state
