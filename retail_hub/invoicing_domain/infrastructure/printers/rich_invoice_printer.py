"""Console invoice printer built on rich."""

import logging
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from retail_hub.common.config.settings import settings
from retail_hub.common.dtos.invoice_dtos import InvoiceDocumentDTO
from retail_hub.common.utils.date_utils import format_display_datetime
from retail_hub.invoicing_domain.domain.printers.invoice_printer import IInvoicePrinter
from retail_hub.invoicing_domain.domain.services.pricing_engine import quantize_money

logger = logging.getLogger(__name__)


class RichInvoicePrinter(IInvoicePrinter):
    """Renders the print bundle as a rich table on the given console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _money(self, value: Decimal) -> str:
        return f"{settings.CURRENCY_SYMBOL}{quantize_money(value)}"

    def build_table(self, document: InvoiceDocumentDTO) -> Table:
        table = Table(title=f"Invoice {document.invoice_number}", show_footer=False)
        table.add_column("Item")
        table.add_column("Qty", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("Discount", justify="right")
        table.add_column("Total", justify="right")

        for line in document.lines:
            table.add_row(
                escape(line.name or "-"),
                str(line.quantity),
                self._money(line.price),
                self._money(line.discount),
                self._money(line.line_total),
            )

        table.add_section()
        table.add_row("Subtotal", "", "", "", self._money(document.subtotal))
        if document.coupon_code:
            table.add_row(f"Coupon ({document.coupon_code})", "", "", "", f"-{self._money(document.deduction)}")
        tax_percent = (document.tax_rate * 100).quantize(Decimal("1"))
        table.add_row(f"GST ({tax_percent}%)", "", "", "", self._money(document.tax))
        table.add_row("Grand Total", "", "", "", self._money(document.grand_total), style="bold")
        return table

    def print_invoice(self, document: InvoiceDocumentDTO) -> None:
        self.console.print(f"[bold]{escape(settings.STORE_NAME)}[/bold]  GSTIN: {escape(settings.STORE_GSTIN)}")
        self.console.print(f"Support: {settings.STORE_SUPPORT_EMAIL}", markup=False)
        self.console.print(f"Issued: {format_display_datetime(document.issued_at)}", markup=False)
        self.console.print(f"Customer: {document.customer_name or '-'}", markup=False)
        self.console.print(f"Contact: {document.customer_contact or '-'}", markup=False)
        self.console.print(self.build_table(document))
        if document.notes:
            self.console.print(f"Notes: {document.notes}", markup=False)
        logger.info(f"Invoice {document.invoice_number} sent to printer.")
