"""Print/export capability interface."""
from abc import ABC, abstractmethod

from retail_hub.common.dtos.invoice_dtos import InvoiceDocumentDTO


class IInvoicePrinter(ABC):
    @abstractmethod
    def print_invoice(self, document: InvoiceDocumentDTO) -> None:
        """Renders the issued invoice for printing."""
        pass
