"""
Receipt Print Service Models
"""

from .order import Order, LineItem, Modifier
from .payment import Payment
from .printer import PrinterState

__all__ = ['Order', 'LineItem', 'Modifier', 'Payment', 'PrinterState']
