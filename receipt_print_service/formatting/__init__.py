"""
Receipt Print Service Formatting
================================

Receipt layouts and the formatter that selects one by configuration.
"""

from .base import BaseLayout
from .simple import SimpleLayout
from .grouped import GroupedLayout
from .formatter import ReceiptFormatter, RECEIPT_KINDS, LAYOUTS, get_layout

__all__ = ['BaseLayout', 'SimpleLayout', 'GroupedLayout', 'ReceiptFormatter', 'RECEIPT_KINDS',
           'LAYOUTS', 'get_layout']
