"""
Console Sink
============

Simulation/fallback output: writes the receipt to the console log instead
of a printer.
"""

import logging
from typing import Optional, Dict, Any

console_logger = logging.getLogger('receipt_print_service.console')


class ConsoleSink:
    """Writes receipts to the console logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or console_logger
        self.last_document: Optional[str] = None
        self.last_kind: Optional[str] = None
        self.count = 0

    def write(self, document: str, kind: str, label: str = 'console') -> Dict[str, Any]:
        """
        Log a receipt.

        Args:
            document: Finished receipt text
            kind: Receipt kind (test, kitchen, customer)
            label: Device the receipt was meant for

        Returns:
            Dict with success status
        """
        self.logger.info("PRINTING %s RECEIPT TO: %s (simulated)\n%s%s",
                         kind.upper(), label, document, '-' * 20 + ' end of receipt ' + '-' * 20)
        self.last_document = document
        self.last_kind = kind
        self.count += 1
        return {'success': True, 'destination': 'console', 'kind': kind}
