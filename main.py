"""Main application entry point for the Retail Hub back office."""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from retail_hub.catalog_domain.application.catalog_service import CatalogApplicationService
from retail_hub.catalog_domain.infrastructure.seed.seed_catalog import build_seed_catalog
from retail_hub.common.exceptions.custom_exceptions import ApplicationError
from retail_hub.common.logger_config import setup_logging
from retail_hub.invoicing_domain.application.invoice_service import InvoiceApplicationService
from retail_hub.invoicing_domain.infrastructure.persistence.json_coupon_repository import JsonCouponRepository
from retail_hub.invoicing_domain.infrastructure.printers.rich_invoice_printer import RichInvoicePrinter
from retail_hub.scanning_domain.application.barcode_capture_service import BarcodeCaptureService
from retail_hub.scanning_domain.infrastructure.scanners.stream_barcode_scanner import StreamBarcodeScanner
from retail_hub.state.app_state import StateStore, initial_state

logger = logging.getLogger(__name__)


@dataclass
class BackOffice:
    store: StateStore
    catalog_service: CatalogApplicationService
    invoice_service: InvoiceApplicationService
    capture_service: BarcodeCaptureService
    scanner: StreamBarcodeScanner


def setup_dependencies(scanner_stream: TextIO | None = None) -> BackOffice:
    """Initializes and wires up application dependencies around one shared state store."""
    store = StateStore(initial_state(build_seed_catalog()))
    catalog_service = CatalogApplicationService(store)
    invoice_service = InvoiceApplicationService(
        store=store, coupon_repo=JsonCouponRepository(), printer=RichInvoicePrinter()
    )
    scanner = StreamBarcodeScanner(scanner_stream if scanner_stream is not None else sys.stdin)
    capture_service = BarcodeCaptureService(scanner, catalog_service)
    return BackOffice(
        store=store,
        catalog_service=catalog_service,
        invoice_service=invoice_service,
        capture_service=capture_service,
        scanner=scanner,
    )


def run_demo(back_office: BackOffice) -> None:
    """Shows the low-stock alerts and issues a sample invoice against the seed catalog."""
    catalog_service = back_office.catalog_service
    invoice_service = back_office.invoice_service

    analytics = catalog_service.get_analytics()
    logger.info(
        f"{analytics.total_products} products, {analytics.total_units} units on hand, "
        f"{analytics.low_stock_count} low on stock."
    )
    for alert in catalog_service.get_alerts():
        logger.warning(f"[{alert.severity.value}] {alert.title}: {alert.detail}")

    try:
        first_line = invoice_service.draft.lines[0]
        invoice_service.select_product(first_line.id, "item-1")
        invoice_service.update_line(first_line.id, quantity=2)
        second_line = invoice_service.add_line()
        invoice_service.select_product(second_line.id, "item-4")
        for line in invoice_service.draft.lines:
            product = invoice_service.bound_product(line.id)
            if product is not None:
                logger.info(f"{line.quantity} x {product.name}: {product.stock} {product.unit} in stock.")
        invoice_service.set_customer_details(customer_name="Walk-in Customer", customer_contact="-")
        invoice_service.apply_coupon("welcome10")
        record = invoice_service.generate_invoice()
        logger.info(f"Issued {record.number} for {record.customer}.")
    except ApplicationError as e:
        logger.error(f"Could not issue sample invoice: {e}")


def run_scanner(back_office: BackOffice) -> int:
    """Feeds keyboard-wedge scanner input into the catalog form until the input ends."""
    capture_service = back_office.capture_service
    try:
        capture_service.start()
    except ApplicationError as e:
        logger.error(f"Barcode capture unavailable: {e}")
        return 0
    try:
        delivered = back_office.scanner.listen()
        logger.info(f"{delivered} barcodes captured. {capture_service.last_message or ''}".strip())
        return delivered
    finally:
        capture_service.stop()


if __name__ == "__main__":
    setup_logging()
    back_office = setup_dependencies()
    run_demo(back_office)
    # Scanner input is only read when piped in, e.g. from a keyboard-wedge capture file
    if not sys.stdin.isatty():
        run_scanner(back_office)
