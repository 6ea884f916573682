"""
Order Model
===========

An order as sent by the point-of-sale frontend. Monetary totals are
precomputed by the caller and printed as given.
"""

from decimal import Decimal
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union

from ..config import DEFAULT_ORDER_TYPE
from ..errors import ValidationError
from .fields import pick, text, money, money_str


@dataclass
class Modifier:
    """Add-on to a line item with its own price delta."""

    name: str
    price: Decimal = Decimal('0')

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], str]) -> 'Modifier':
        """Create from dictionary (a bare string is a free modifier)."""
        if isinstance(data, str):
            name = text(data)
            if not name:
                raise ValidationError('Modifier name required', field='modifiers')
            return cls(name=name)

        if not isinstance(data, dict):
            raise ValidationError('Modifier must be an object or a string', field='modifiers')

        name = text(pick(data, 'name', 'label'))
        if not name:
            raise ValidationError('Modifier name required', field='modifiers')

        price = money(pick(data, 'price', 'priceDelta', 'price_delta'), 'modifier price')
        return cls(name=name, price=price or Decimal('0'))

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'price': money_str(self.price)}


@dataclass
class LineItem:
    """One ordered item."""

    name: str
    quantity: int = 1
    price: Decimal = Decimal('0')  # unit price

    # Kitchen details
    spice_level: Optional[str] = None
    instructions: Optional[str] = None
    allergens: List[str] = field(default_factory=list)
    modifiers: List[Modifier] = field(default_factory=list)
    category: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        """Unit price times quantity."""
        return self.price * self.quantity

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ValidationError('Each item must be an object', field='items')

        name = text(pick(data, 'name', 'itemName', 'item_name', 'title'))
        if not name:
            raise ValidationError('Item name required', field='items')

        return cls(
            name=name,
            quantity=_quantity(data.get('quantity', data.get('qty', 1)), name),
            price=money(pick(data, 'price', 'unitPrice', 'unit_price'), f'price of {name}') or Decimal('0'),
            spice_level=text(pick(data, 'spiceLevel', 'spice_level', 'spice')),
            instructions=text(pick(data, 'instructions', 'notes', 'specialInstructions',
                                   'special_instructions')),
            allergens=_allergens(pick(data, 'allergens', default=[])),
            modifiers=[Modifier.from_dict(m) for m in _as_list(
                pick(data, 'modifiers', 'addons', 'extras', default=[]), 'modifiers')],
            category=text(pick(data, 'category', 'section')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'quantity': self.quantity,
            'price': money_str(self.price),
            'spice_level': self.spice_level,
            'instructions': self.instructions,
            'allergens': list(self.allergens),
            'modifiers': [m.to_dict() for m in self.modifiers],
            'category': self.category,
        }


@dataclass
class Order:
    """Order configuration as received from the frontend."""

    # Identification
    order_number: Optional[str] = None
    order_type: Optional[str] = None  # dine-in, delivery, takeaway, collection
    table_number: Optional[str] = None

    items: List[LineItem] = field(default_factory=list)
    special_instructions: Optional[str] = None

    # Totals (caller-supplied, never recomputed)
    subtotal: Optional[Decimal] = None
    vat: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    delivery_fee: Optional[Decimal] = None
    service_charge: Optional[Decimal] = None
    total: Optional[Decimal] = None

    # Extras
    delivery_address: Optional[str] = None
    cashier: Optional[str] = None
    customer_name: Optional[str] = None

    @property
    def display_order_type(self) -> str:
        """Order type as printed, e.g. ``dine_in`` -> ``DINE-IN``."""
        if not self.order_type:
            return DEFAULT_ORDER_TYPE
        return self.order_type.upper().replace('_', '-').replace(' ', '-')

    @property
    def display_table(self) -> str:
        return self.table_number or 'N/A'

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ValidationError('order must be an object', field='order')

        totals = data.get('totals') if isinstance(data.get('totals'), dict) else {}

        def amount(name: str, *keys: str) -> Optional[Decimal]:
            return money(pick(data, *keys, default=pick(totals, *keys)), name)

        return cls(
            order_number=text(pick(data, 'orderNumber', 'order_number', 'number', 'id')),
            order_type=text(pick(data, 'orderType', 'order_type', 'type')),
            table_number=text(pick(data, 'tableNumber', 'table_number', 'table')),
            items=[LineItem.from_dict(i) for i in _as_list(data.get('items', []), 'items')],
            special_instructions=text(pick(data, 'specialInstructions', 'special_instructions',
                                           'notes')),
            subtotal=amount('subtotal', 'subtotal', 'subTotal'),
            vat=amount('vat', 'vat', 'vatAmount', 'vat_amount', 'tax', 'taxAmount'),
            discount=amount('discount', 'discount', 'discountAmount', 'discount_amount'),
            delivery_fee=amount('delivery_fee', 'deliveryFee', 'delivery_fee', 'deliveryCharge'),
            service_charge=amount('service_charge', 'serviceCharge', 'service_charge'),
            total=amount('total', 'total', 'totalAmount', 'total_amount'),
            delivery_address=_address(pick(data, 'deliveryAddress', 'delivery_address', 'address')),
            cashier=text(pick(data, 'cashier', 'staff', 'server')),
            customer_name=text(pick(data, 'customerName', 'customer_name')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'order_number': self.order_number,
            'order_type': self.order_type,
            'table_number': self.table_number,
            'items': [i.to_dict() for i in self.items],
            'special_instructions': self.special_instructions,
            'subtotal': money_str(self.subtotal),
            'vat': money_str(self.vat),
            'discount': money_str(self.discount),
            'delivery_fee': money_str(self.delivery_fee),
            'service_charge': money_str(self.service_charge),
            'total': money_str(self.total),
            'delivery_address': self.delivery_address,
            'cashier': self.cashier,
            'customer_name': self.customer_name,
        }


def _quantity(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f'Quantity of {name} must be a whole number', field='quantity')
    try:
        quantity = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f'Quantity of {name} must be a whole number', field='quantity')
    if quantity < 1:
        raise ValidationError(f'Quantity of {name} must be at least 1', field='quantity')
    return quantity


def _as_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f'{field_name} must be a list', field=field_name)
    return value


def _allergens(value: Any) -> List[str]:
    if isinstance(value, str):
        value = value.split(',')
    result = []
    for allergen in _as_list(value, 'allergens'):
        allergen = text(allergen)
        if allergen and allergen not in result:
            result.append(allergen)
    return result


def _address(value: Any) -> Optional[str]:
    """Flatten an address object into newline-separated lines."""
    if isinstance(value, dict):
        parts = [text(value.get(k)) for k in ('line1', 'street', 'line2', 'city', 'postcode',
                                                'postalCode', 'zip')]
        value = '\n'.join(p for p in parts if p)
    return text(value)
