"""
Base Layout
===========

Shared receipt building blocks. Layouts differ only in how the kitchen
receipt lists its items; header, footer and the customer receipt are common.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any, List

from .. import __version__
from ..config import LINE_WIDTH, CURRENCY_SYMBOL, RESTAURANT
from ..models import Order, LineItem, Payment

CENT = Decimal('0.01')


class BaseLayout(ABC):
    """Abstract base class for receipt layouts."""

    name = ''

    def __init__(self, width: int = LINE_WIDTH, currency: str = CURRENCY_SYMBOL,
                 restaurant: Optional[Dict[str, Any]] = None):
        """
        Initialize layout.

        Args:
            width: Characters per printed line
            currency: Symbol prefixed to every amount
            restaurant: Branding (name, address, phone, vat_number, footer);
                multi-line values are separated by '|'
        """
        self.width = width
        self.currency = currency
        self.restaurant = dict(RESTAURANT, **(restaurant or {}))

    # =========================================================================
    # Helpers
    # =========================================================================

    def rule(self, char: str = '-') -> str:
        return char * self.width

    def center(self, text: str) -> str:
        return text[:self.width].center(self.width).rstrip()

    def money(self, amount: Decimal) -> str:
        return f'{self.currency}{amount.quantize(CENT, rounding=ROUND_HALF_UP):.2f}'

    def columns(self, left: str, right: str) -> str:
        """Left text and right-aligned value on one line, truncating left to fit."""
        room = self.width - len(right) - 1
        if len(left) > room:
            left = left[:max(room, 0)]
        return left + ' ' * (self.width - len(left) - len(right)) + right

    def _branding(self, key: str) -> List[str]:
        value = self.restaurant.get(key) or ''
        return [line for line in value.split('|') if line.strip()]

    def header(self, *titles: str) -> List[str]:
        lines = [self.rule('='), self.center(self.restaurant['name'])]
        lines.extend(self.center(t) for t in titles)
        lines.append(self.rule('='))
        return lines

    def item_details(self, item: LineItem) -> List[str]:
        """Kitchen detail lines under an item; absent fields are skipped."""
        lines = []
        if item.spice_level:
            lines.append(f'   Spice: {item.spice_level}')
        if item.instructions:
            lines.append(f'   Note: {item.instructions}')
        for modifier in item.modifiers:
            lines.append(f'   + {modifier.name}')
        if item.allergens:
            lines.append(f'   !! ALLERGENS: {", ".join(item.allergens)}')
        return lines

    @staticmethod
    def document(lines: List[str]) -> str:
        return '\n'.join(lines) + '\n'

    # =========================================================================
    # Receipts
    # =========================================================================

    @abstractmethod
    def kitchen_items(self, order: Order) -> List[str]:
        """
        Item body of the kitchen receipt.

        Returns:
            Lines listing every item as ``<qty>x <name>`` with its details
        """
        pass

    def test_receipt(self, timestamp: datetime) -> str:
        """Static test page; only the timestamp line changes between prints."""
        lines = self.header('PRINTER TEST')
        lines += [
            '',
            f'Test Date: {timestamp:%Y-%m-%d %H:%M:%S}',
            f'Printer Helper Version: {__version__}',
            f'Layout: {self.name}',
            '',
            'This is a test print to verify your',
            'printer is working correctly.',
            '',
            self.columns('1x Chicken Tikka Masala', self.money(Decimal('12.95'))),
            self.columns('1x Pilau Rice', self.money(Decimal('3.50'))),
            '',
            'If you can read this, your printer',
            'is connected and functioning!',
            '',
            self.rule('='),
        ]
        return self.document(lines)

    def kitchen_receipt(self, order: Order, order_number: str, timestamp: datetime) -> str:
        lines = self.header('KITCHEN ORDER')
        lines += [
            f'Order #: {order_number}',
            f'Time: {timestamp:%Y-%m-%d %H:%M:%S}',
            self.rule(),
        ]
        lines += self.kitchen_items(order) or ['(no items)']
        lines.append(self.rule())

        if order.special_instructions:
            lines.append('Special Instructions:')
            lines.append(order.special_instructions)
            lines.append(self.rule())

        lines += [
            f'Table: {order.display_table}',
            f'Type: {order.display_order_type}',
            f'Items: {order.item_count}',
            self.rule('='),
        ]
        return self.document(lines)

    def customer_receipt(self, order: Order, payment: Payment, order_number: str,
                         timestamp: datetime) -> str:
        lines = self.header(*self._branding('address'), *[f'Tel: {p}' for p in self._branding('phone')])
        if self.restaurant.get('vat_number'):
            lines.insert(-1, self.center(f'VAT No: {self.restaurant["vat_number"]}'))

        lines += [
            f'Receipt #: {order_number}',
            f'Date: {timestamp:%d/%m/%Y}',
            f'Time: {timestamp:%H:%M:%S}',
        ]
        if order.cashier:
            lines.append(f'Cashier: {order.cashier}')
        if order.customer_name:
            lines.append(f'Customer: {order.customer_name}')
        lines.append(self.rule())

        for item in order.items:
            lines.append(self.columns(f'{item.quantity}x {item.name}', self.money(item.line_total)))
            for modifier in item.modifiers:
                if modifier.price:
                    lines.append(self.columns(f'   + {modifier.name}', self.money(modifier.price)))
                else:
                    lines.append(f'   + {modifier.name}')
        lines.append(self.rule())

        lines.append(self.columns('Subtotal:', self.money(_total(order, payment, 'subtotal'))))
        discount = _total(order, payment, 'discount')
        if discount > 0:
            lines.append(self.columns('Discount:', '-' + self.money(discount)))
        delivery_fee = _total(order, payment, 'delivery_fee')
        if delivery_fee > 0:
            lines.append(self.columns('Delivery Fee:', self.money(delivery_fee)))
        service_charge = _total(order, payment, 'service_charge')
        if service_charge > 0:
            lines.append(self.columns('Service Charge:', self.money(service_charge)))
        lines.append(self.columns('VAT:', self.money(_total(order, payment, 'vat'))))
        lines.append(self.rule())
        lines.append(self.columns('TOTAL:', self.money(_total(order, payment, 'total'))))
        lines.append(self.rule())

        lines.append(f'Payment Method: {payment.method.upper()}')
        lines.append(f'Status: {payment.status.upper()}')
        if payment.masked_card:
            lines.append(f'Card: {payment.masked_card}')
        if payment.is_card and payment.is_approved:
            lines.append('Card Payment Approved')
        if payment.is_cash and payment.amount_tendered is not None:
            lines.append(self.columns('Tendered:', self.money(payment.amount_tendered)))
            if payment.change is not None:
                lines.append(self.columns('Change:', self.money(payment.change)))
        lines.append(f'Order Type: {order.display_order_type}')
        if order.delivery_address:
            lines.append('Deliver to:')
            lines.extend(f'  {line}' for line in order.delivery_address.splitlines())

        lines.append(self.rule('='))
        lines.extend(self.center(line) for line in self._branding('footer'))
        lines.append(self.rule('='))
        return self.document(lines)


def _total(order: Order, payment: Payment, field: str) -> Decimal:
    """Order value, else the payment's mirrored value, else zero."""
    value = getattr(order, field)
    if value is None:
        value = getattr(payment, field)
    return value if value is not None else Decimal('0')
