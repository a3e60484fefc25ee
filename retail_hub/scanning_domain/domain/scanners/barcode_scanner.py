# retail_hub/scanning_domain/domain/scanners/barcode_scanner.py
"""Barcode scanner capability interface."""
from abc import ABC, abstractmethod
from typing import Callable

DecodedCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]


class IBarcodeScanner(ABC):
    """An opaque source of decoded barcodes, delivered one at a time."""

    @abstractmethod
    def start(self, on_decoded: DecodedCallback, on_error: ErrorCallback) -> None:
        """Starts capturing; raises if the device cannot be initialised."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stops capturing. Safe to call when not started."""
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        pass
