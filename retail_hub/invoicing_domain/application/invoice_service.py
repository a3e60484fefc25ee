# retail_hub/invoicing_domain/application/invoice_service.py
"""Application service for composing and issuing invoices."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional

from retail_hub.catalog_domain.domain.entities.inventory_item import InventoryItem
from retail_hub.common.config.settings import settings
from retail_hub.common.dtos.invoice_dtos import InvoiceTotalsDTO
from retail_hub.common.exceptions.custom_exceptions import NotFoundError, ValidationError
from retail_hub.common.utils.date_utils import now_local
from retail_hub.invoicing_domain.domain.entities.coupon import Coupon
from retail_hub.invoicing_domain.domain.entities.invoice_draft import InvoiceDraft
from retail_hub.invoicing_domain.domain.entities.invoice_line import InvoiceLine
from retail_hub.invoicing_domain.domain.entities.invoice_record import InvoiceRecord
from retail_hub.invoicing_domain.domain.printers.invoice_printer import IInvoicePrinter
from retail_hub.invoicing_domain.domain.repositories.coupon_repository import ICouponRepository
from retail_hub.invoicing_domain.domain.services import invoice_lines
from retail_hub.invoicing_domain.domain.services.invoice_issuer import issue_invoice
from retail_hub.invoicing_domain.domain.services.pricing_engine import compute_totals
from retail_hub.state.app_state import StateStore

logger = logging.getLogger(__name__)


class InvoiceApplicationService:
    """Drives the invoice draft and issues invoices from it."""

    def __init__(
        self,
        store: StateStore,
        coupon_repo: ICouponRepository,
        printer: IInvoicePrinter,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        self.store = store
        self.coupon_repo = coupon_repo
        self.printer = printer
        self.clock = clock

    @property
    def draft(self) -> InvoiceDraft:
        return self.store.state.draft

    def _commit_draft(self, draft: InvoiceDraft) -> InvoiceDraft:
        self.store.replace(replace(self.store.state, draft=draft))
        return draft

    def add_line(self) -> InvoiceLine:
        draft, line = invoice_lines.add_line(self.draft)
        self._commit_draft(draft)
        return line

    def update_line(self, line_id: str, **fields: Any) -> InvoiceDraft:
        return self._commit_draft(invoice_lines.update_line(self.draft, line_id, **fields))

    def select_product(self, line_id: str, product_id: str) -> InvoiceDraft:
        """Binds a draft line to a catalog item, taking its name and price."""
        try:
            draft = invoice_lines.bind_to_product(self.draft, line_id, self.store.state.catalog, product_id)
        except NotFoundError as e:
            logger.warning(f"Cannot bind line {line_id}: {e}")
            raise
        return self._commit_draft(draft)

    def bound_product(self, line_id: str) -> Optional[InventoryItem]:
        """Catalog item behind a draft line as it is now; None if unbound or gone."""
        line = next((line for line in self.draft.lines if line.id == line_id), None)
        if line is None:
            return None
        return invoice_lines.resolve_product(line, self.store.state.catalog)

    def set_customer_details(self, **fields: str) -> InvoiceDraft:
        return self._commit_draft(invoice_lines.update_details(self.draft, **fields))

    def apply_coupon(self, code: str) -> Coupon:
        try:
            coupon = self.coupon_repo.find_by_code(code)
        except NotFoundError:
            logger.warning(f"Coupon code {code!r} not found.")
            raise
        self._commit_draft(invoice_lines.apply_coupon(self.draft, coupon))
        logger.info(f"Coupon {coupon.code} applied successfully.")
        return coupon

    def remove_coupon(self) -> InvoiceDraft:
        return self._commit_draft(invoice_lines.remove_coupon(self.draft))

    def current_totals(self) -> InvoiceTotalsDTO:
        """Totals of the draft as it stands, recomputed on every call."""
        return compute_totals(self.draft.lines, self.draft.coupon, settings.TAX_RATE)

    def generate_invoice(self) -> InvoiceRecord:
        """Issues the draft, records it in history and hands it to the printer."""
        try:
            new_state, record, document = issue_invoice(self.store.state, self.clock())
        except ValidationError as e:
            logger.warning(f"Invoice not generated: {e}")
            raise
        self.store.replace(new_state)
        logger.info(f"Invoice {record.number} issued for {record.customer}.")
        self.printer.print_invoice(document)
        return record

    def get_history(self) -> tuple[InvoiceRecord, ...]:
        return self.store.state.history
