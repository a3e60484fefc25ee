# retail_hub/scanning_domain/application/barcode_capture_service.py
"""Turns decoded barcodes into catalog form actions."""

import logging
from dataclasses import replace

from retail_hub.catalog_domain.application.catalog_service import CatalogApplicationService
from retail_hub.common.dtos.catalog_dtos import CatalogFormDTO
from retail_hub.common.exceptions.custom_exceptions import CapabilityError
from retail_hub.scanning_domain.domain.scanners.barcode_scanner import IBarcodeScanner

logger = logging.getLogger(__name__)


class BarcodeCaptureService:
    """
    Each decoded code is handled synchronously as a single event:
    a known barcode loads that item into the edit form, an unknown one
    pre-fills the add form. The last event wins.
    """

    def __init__(self, scanner: IBarcodeScanner, catalog_service: CatalogApplicationService) -> None:
        self.scanner = scanner
        self.catalog_service = catalog_service

    @property
    def last_message(self) -> str | None:
        return self.catalog_service.store.state.scanner_message

    def _set_message(self, message: str | None) -> None:
        store = self.catalog_service.store
        store.replace(replace(store.state, scanner_message=message))

    def start(self) -> None:
        self._set_message(None)
        try:
            self.scanner.start(self.handle_decoded, self.handle_error)
        except Exception as e:
            message = "Unable to start barcode scanner."
            self._set_message(message)
            logger.warning(f"{message} {e}")
            raise CapabilityError(message, original_exception=e) from e

    def stop(self) -> None:
        self.scanner.stop()
        self._set_message(None)

    def handle_decoded(self, code: str) -> CatalogFormDTO:
        logger.info(f"Captured barcode {code}.")
        existing = self.catalog_service.find_by_barcode(code)
        if existing:
            return self.catalog_service.load_for_editing(existing.id)

        form = self.catalog_service.form
        new_form = CatalogFormDTO(fields=replace(form.fields, barcode=code), editing_id=None)
        store = self.catalog_service.store
        store.replace(
            replace(
                store.state,
                catalog_form=new_form,
                scanner_message="Barcode captured. Fill remaining details to add item.",
            )
        )
        return new_form

    def handle_error(self, message: str) -> None:
        """Surfaces a scanner error; catalog and invoice state are left alone."""
        logger.warning(f"Barcode scanner error: {message}")
        self._set_message(message)
