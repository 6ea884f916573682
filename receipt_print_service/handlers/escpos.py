"""
ESC/POS Handler
===============

Handler for ESC/POS thermal receipt printers (Epson, Star) using the
python-escpos library over USB, network, serial or a device file.
"""

import logging
from typing import Optional

from escpos.printer import Usb, Network, Serial, File

from .base import BaseHandler
from ..config import (
    PRINTER_LABEL, USB_VENDOR_ID, USB_PRODUCT_ID, PRINTER_HOST, PRINTER_PORT,
    SERIAL_DEVICE, SERIAL_BAUDRATE, FILE_DEVICE, DEFAULT_TIMEOUT,
)
from ..errors import DeviceError

logger = logging.getLogger(__name__)


class EscposHandler(BaseHandler):
    """Handler for ESC/POS printers."""

    def __init__(self, connection: str = 'usb', label: str = PRINTER_LABEL,
                 vendor_id: int = USB_VENDOR_ID, product_id: int = USB_PRODUCT_ID,
                 host: Optional[str] = PRINTER_HOST, port: int = PRINTER_PORT,
                 serial_device: str = SERIAL_DEVICE, baudrate: int = SERIAL_BAUDRATE,
                 file_device: str = FILE_DEVICE, timeout: int = DEFAULT_TIMEOUT):
        super().__init__(label)
        self.connection = connection
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.host = host
        self.port = port
        self.serial_device = serial_device
        self.baudrate = baudrate
        self.file_device = file_device
        self.timeout = timeout
        self._printer = None

    def _create_printer(self):
        """Create the python-escpos printer for the configured connection."""
        if self.connection == 'usb':
            return Usb(self.vendor_id, self.product_id)
        if self.connection == 'network':
            if not self.host:
                raise DeviceError('Printer host not configured')
            return Network(self.host, port=self.port, timeout=self.timeout)
        if self.connection == 'serial':
            return Serial(devfile=self.serial_device, baudrate=self.baudrate)
        if self.connection == 'file':
            return File(devfile=self.file_device)
        raise DeviceError(f'Unsupported connection mode: {self.connection}')

    def _require_open(self):
        if self._printer is None:
            raise DeviceError(f'{self.label} is not open')
        return self._printer

    def open(self) -> None:
        if self._printer is not None:
            return
        try:
            printer = self._create_printer()
            printer.open()
        except DeviceError:
            raise
        except Exception as e:
            raise DeviceError(f'Cannot open {self.label} ({self.connection}): {e}') from e
        self._printer = printer
        logger.debug("Opened %s via %s", self.label, self.connection)

    def close(self) -> None:
        printer, self._printer = self._printer, None
        if printer is None:
            return
        try:
            printer.close()
        except Exception as e:
            logger.warning("Closing %s failed: %s", self.label, e)

    def set_style(self, bold: bool = False, double: bool = False, align: str = 'left') -> None:
        printer = self._require_open()
        try:
            printer.set(align=align, bold=bold, double_width=double, double_height=double,
                        normal_textsize=not double)
        except Exception as e:
            raise DeviceError(f'Style command failed on {self.label}: {e}') from e

    def text(self, text: str) -> None:
        printer = self._require_open()
        try:
            printer.text(text)
        except Exception as e:
            raise DeviceError(f'Write failed on {self.label}: {e}') from e

    def cut(self) -> None:
        printer = self._require_open()
        try:
            printer.cut()
        except Exception as e:
            raise DeviceError(f'Cut failed on {self.label}: {e}') from e
