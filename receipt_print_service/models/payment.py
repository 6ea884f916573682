"""
Payment Model
=============

Payment confirmation for a customer receipt. Totals mirror the order's and
are only used where the order leaves a field out.
"""

import re
from decimal import Decimal
from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..errors import ValidationError
from .fields import pick, text, money, money_str

APPROVED_STATUSES = ('approved', 'paid', 'completed', 'success', 'succeeded')


@dataclass
class Payment:
    """Payment details."""

    method: str = 'card'  # card, cash, online, voucher
    status: str = 'paid'
    card_last4: Optional[str] = None

    # Mirrored totals
    subtotal: Optional[Decimal] = None
    vat: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    delivery_fee: Optional[Decimal] = None
    service_charge: Optional[Decimal] = None
    total: Optional[Decimal] = None

    # Cash handling
    amount_tendered: Optional[Decimal] = None
    change: Optional[Decimal] = None

    @property
    def masked_card(self) -> Optional[str]:
        if not self.card_last4:
            return None
        return f'**** {self.card_last4}'

    @property
    def is_card(self) -> bool:
        return self.method.lower() == 'card'

    @property
    def is_approved(self) -> bool:
        return self.status.lower() in APPROVED_STATUSES

    @property
    def is_cash(self) -> bool:
        return self.method.lower() == 'cash'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Payment':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ValidationError('payment must be an object', field='payment')

        return cls(
            method=text(pick(data, 'method', 'paymentMethod', 'payment_method', 'type')) or 'card',
            status=text(pick(data, 'status', 'paymentStatus', 'payment_status')) or 'paid',
            card_last4=_last4(pick(data, 'cardLast4', 'card_last4', 'last4', 'maskedCard',
                                   'masked_card', 'cardNumber')),
            subtotal=money(pick(data, 'subtotal', 'subTotal'), 'payment subtotal'),
            vat=money(pick(data, 'vat', 'vatAmount', 'tax', 'taxAmount'), 'payment vat'),
            discount=money(pick(data, 'discount', 'discountAmount'), 'payment discount'),
            delivery_fee=money(pick(data, 'deliveryFee', 'delivery_fee'), 'payment delivery fee'),
            service_charge=money(pick(data, 'serviceCharge', 'service_charge'), 'payment service charge'),
            total=money(pick(data, 'total', 'amount', 'totalAmount'), 'payment total'),
            amount_tendered=money(pick(data, 'amountTendered', 'amount_tendered', 'cashReceived',
                                       'tendered'), 'amount tendered'),
            change=money(pick(data, 'change', 'changeDue', 'change_due'), 'change'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'method': self.method,
            'status': self.status,
            'card_last4': self.card_last4,
            'subtotal': money_str(self.subtotal),
            'vat': money_str(self.vat),
            'discount': money_str(self.discount),
            'delivery_fee': money_str(self.delivery_fee),
            'service_charge': money_str(self.service_charge),
            'total': money_str(self.total),
            'amount_tendered': money_str(self.amount_tendered),
            'change': money_str(self.change),
        }


def _last4(value: Any) -> Optional[str]:
    """Keep only the last four digits of whatever card reference we got."""
    if value is None:
        return None
    digits = re.sub(r'\D', '', str(value))
    return digits[-4:] or None
