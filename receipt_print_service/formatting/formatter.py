"""
Receipt Formatter
=================

Builds the plain-text document for each receipt kind using the configured
layout. Required fields are checked here so no partial document is ever
produced.
"""

from datetime import datetime
from typing import Optional

from ..config import RECEIPT_LAYOUT
from ..errors import ValidationError
from ..models import Order, Payment
from .simple import SimpleLayout
from .grouped import GroupedLayout

# Layout registry
LAYOUTS = {
    'simple': SimpleLayout,
    'grouped': GroupedLayout,
}

RECEIPT_KINDS = {
    'test': 'PRINTER TEST',
    'kitchen': 'KITCHEN ORDER',
    'customer': 'CUSTOMER RECEIPT',
}


def get_layout(name: str) -> type:
    """Get layout class by name."""
    return LAYOUTS.get(name)


class ReceiptFormatter:
    """Formats test, kitchen and customer receipts."""

    def __init__(self, layout: str = RECEIPT_LAYOUT, **options):
        """
        Initialize formatter.

        Args:
            layout: Layout name ('simple' or 'grouped')
            **options: Passed to the layout (width, currency, restaurant)
        """
        layout_class = get_layout(layout)
        if not layout_class:
            raise ValueError(f'Unknown receipt layout {layout!r}. Valid: {list(LAYOUTS)}')
        self.layout = layout_class(**options)

    @property
    def layout_name(self) -> str:
        return self.layout.name

    @property
    def restaurant_name(self) -> str:
        return self.layout.restaurant['name']

    def format_test(self, timestamp: Optional[datetime] = None) -> str:
        return self.layout.test_receipt(timestamp or datetime.now())

    def format_kitchen(self, order: Optional[Order], order_number: Optional[str],
                       timestamp: Optional[datetime] = None) -> str:
        """
        Format a kitchen receipt.

        Raises:
            ValidationError: order or order number missing
        """
        if order is None:
            raise ValidationError('Missing order data', field='order')
        if not order_number:
            raise ValidationError('Missing order number', field='orderNumber')
        return self.layout.kitchen_receipt(order, str(order_number), timestamp or datetime.now())

    def format_customer(self, order: Optional[Order], payment: Optional[Payment],
                        order_number: Optional[str],
                        timestamp: Optional[datetime] = None) -> str:
        """
        Format a customer receipt.

        Totals are printed as supplied by the caller, never recomputed.

        Raises:
            ValidationError: order, payment or order number missing
        """
        if order is None:
            raise ValidationError('Missing order data', field='order')
        if payment is None:
            raise ValidationError('Missing payment data', field='payment')
        if not order_number:
            raise ValidationError('Missing order number', field='orderNumber')
        return self.layout.customer_receipt(order, payment, str(order_number),
                                            timestamp or datetime.now())
