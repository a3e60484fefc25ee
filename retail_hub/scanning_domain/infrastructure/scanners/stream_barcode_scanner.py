"""Scanner reading keyboard-wedge input: one decoded code per line."""

import logging
from typing import Optional, TextIO

from retail_hub.scanning_domain.domain.scanners.barcode_scanner import (
    DecodedCallback,
    ErrorCallback,
    IBarcodeScanner,
)

logger = logging.getLogger(__name__)


class StreamBarcodeScanner(IBarcodeScanner):
    """
    USB/Bluetooth scanners in keyboard mode type the code followed by Enter.
    This reads such a text stream and forwards every non-blank line.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._on_decoded: Optional[DecodedCallback] = None
        self._on_error: Optional[ErrorCallback] = None
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self, on_decoded: DecodedCallback, on_error: ErrorCallback) -> None:
        if self.stream.closed or not self.stream.readable():
            raise OSError("Scanner input stream is not readable.")
        self._on_decoded = on_decoded
        self._on_error = on_error
        self._active = True
        logger.info("Barcode scanner started.")

    def stop(self) -> None:
        if self._active:
            logger.info("Barcode scanner stopped.")
        self._active = False
        self._on_decoded = None
        self._on_error = None

    def listen(self) -> int:
        """Dispatches lines until the stream ends or the scanner is stopped; returns codes delivered."""
        delivered = 0
        while self._active:
            try:
                raw = self.stream.readline()
            except (OSError, ValueError) as e:
                # ValueError covers undecodable input and reads from a stream closed under us
                logger.warning(f"Barcode scanner read failed: {e}")
                if self._on_error:
                    self._on_error(f"Unable to read from barcode scanner: {e}")
                break
            if not raw:
                break
            code = raw.strip()
            if code and self._on_decoded:
                self._on_decoded(code)
                delivered += 1
        return delivered
