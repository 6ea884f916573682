"""
Print Dispatcher
================

Sends finished receipts to the printer device, falling back to the console
sink when there is no device or the device fails. Callers always get a
successful result: a receipt is accepted for printing, not confirmed printed.

State machine:
    Uninitialized -> startup() -> Connected | Disconnected

Every device attempt updates the state. With the 'downgrade' policy a
disconnected device is skipped until reconnect() is called.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Optional, Dict, Any

from .config import DEVICE_FAILURE_POLICY, FAILURE_POLICIES, PRINTER_LABEL
from .errors import DeviceError
from .handlers import BaseHandler, ConsoleSink
from .models import PrinterState

logger = logging.getLogger(__name__)


class PrintDispatcher:
    """Owns the printer device handle and its connection state."""

    def __init__(self, device: Optional[BaseHandler] = None,
                 sink: Optional[ConsoleSink] = None,
                 policy: str = DEVICE_FAILURE_POLICY,
                 brand: str = ''):
        """
        Initialize dispatcher.

        Args:
            device: Device handler, or None for simulation mode
            sink: Console sink used for simulation and fallback
            policy: 'per-call' or 'downgrade'
            brand: Branding line printed large above each receipt on the device
        """
        if policy not in FAILURE_POLICIES:
            raise ValueError(f'Unknown device failure policy {policy!r}. Valid: {FAILURE_POLICIES}')

        self.device = device
        self.sink = sink or ConsoleSink()
        self.policy = policy
        self.brand = brand
        self.state = PrinterState(label=device.label if device else PRINTER_LABEL)
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self.state.connected

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def startup(self) -> PrinterState:
        """Probe the device once at service start."""
        if self.device is None:
            self.state.mark_disconnected(status='Simulation mode')
            logger.info("No printer configured, running in simulation mode")
            return self.state
        return self.reconnect()

    def reconnect(self) -> PrinterState:
        """Probe the device again (manual only, never automatic)."""
        if self.device is None:
            return self.startup()

        with self._lock:
            result = self.device.test_connection()
            if result['success']:
                self.state.mark_connected()
                logger.info("Printer %s connected", self.state.label)
            else:
                self.state.mark_disconnected(result.get('error'))
                logger.warning("Printer %s not available: %s", self.state.label, result.get('error'))
        return self.state

    def status(self) -> PrinterState:
        return self.state

    # =========================================================================
    # Printing
    # =========================================================================

    @contextmanager
    def _session(self):
        """Open the device and guarantee it is closed on every exit path."""
        self.device.open()
        try:
            yield self.device
        finally:
            self.device.close()

    def _print_to_device(self, document: str, kind: str):
        with self._session() as device:
            device.set_style(bold=True, double=True, align='center')
            device.text(f'{self.brand}\n' if self.brand else '\n')
            device.set_style(bold=True, align='center')
            device.text(f'{kind.upper()}\n')
            device.set_style()
            device.text(document)
            device.cut()

    def _should_try_device(self) -> bool:
        if self.device is None:
            return False
        if self.policy == 'downgrade' and not self.state.connected:
            return False
        return True

    def dispatch(self, document: str, kind: str) -> Dict[str, Any]:
        """
        Print a finished receipt.

        Args:
            document: Receipt text
            kind: Receipt kind label (test, kitchen, customer)

        Returns:
            Dict with success (always True) and destination ('device' or 'console')
        """
        if self._should_try_device():
            with self._lock:
                try:
                    self._print_to_device(document, kind)
                except DeviceError as e:
                    self.state.mark_disconnected(str(e))
                    logger.warning("Printing %s receipt on %s failed, using console: %s",
                                   kind, self.state.label, e)
                except Exception as e:
                    self.state.mark_disconnected(str(e))
                    logger.exception("Unexpected printer error on %s, using console", self.state.label)
                else:
                    self.state.mark_connected()
                    logger.info("Printed %s receipt on %s", kind, self.state.label)
                    return {'success': True, 'destination': 'device', 'kind': kind}

        return self.sink.write(document, kind, label=self.state.label)
