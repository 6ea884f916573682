"""
Receipt Print Service Handlers
==============================

Printer device handlers and the console sink.
"""

from typing import Optional

from .base import BaseHandler
from .escpos import EscposHandler
from .console import ConsoleSink
from ..config import PRINTER_CONNECTION

__all__ = ['BaseHandler', 'EscposHandler', 'ConsoleSink', 'HANDLERS', 'get_handler',
           'create_handler']

# Handler registry by connection mode ('none' has no device)
HANDLERS = {
    'usb': EscposHandler,
    'network': EscposHandler,
    'serial': EscposHandler,
    'file': EscposHandler,
}


def get_handler(connection: str) -> type:
    """Get handler class by connection mode."""
    return HANDLERS.get(connection)


def create_handler(connection: str = PRINTER_CONNECTION, **options) -> Optional[BaseHandler]:
    """
    Create the device handler for a connection mode.

    Returns:
        Handler instance, or None in simulation mode
    """
    handler_class = get_handler(connection)
    if not handler_class:
        return None
    return handler_class(connection=connection, **options)
