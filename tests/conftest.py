from datetime import datetime

import pytest

from receipt_print_service.app import create_app
from receipt_print_service.dispatcher import PrintDispatcher
from receipt_print_service.errors import DeviceError
from receipt_print_service.formatting import ReceiptFormatter
from receipt_print_service.handlers import BaseHandler, ConsoleSink


class FakeDevice(BaseHandler):
    """Records the command stream; fails on the named step when asked."""

    def __init__(self, label='Fake TM-T20', fail_on=None):
        super().__init__(label)
        self.fail_on = fail_on
        self.is_open = False
        self.commands = []
        self.opens = 0
        self.closes = 0

    def _step(self, name, *args):
        if self.fail_on == name:
            raise DeviceError(f'{name} failed')
        self.commands.append((name,) + args)

    def open(self):
        self._step('open')
        self.opens += 1
        self.is_open = True

    def close(self):
        if self.is_open:
            self.closes += 1
        self.is_open = False

    def set_style(self, bold=False, double=False, align='left'):
        self._step('set_style', bold, double, align)

    def text(self, text):
        self._step('text', text)

    def cut(self):
        self._step('cut')

    @property
    def printed(self):
        return ''.join(c[1] for c in self.commands if c[0] == 'text')


@pytest.fixture
def timestamp():
    return datetime(2026, 10, 19, 18, 30, 5)


@pytest.fixture
def grouped():
    return ReceiptFormatter('grouped')


@pytest.fixture
def simple():
    return ReceiptFormatter('simple')


@pytest.fixture
def sink():
    return ConsoleSink()


@pytest.fixture
def make_client(sink):
    """Build a test client around an optional fake device."""
    def factory(device=None, layout='grouped', policy='per-call', sample_on_empty=False):
        dispatcher = PrintDispatcher(device=device, sink=sink, policy=policy)
        app = create_app(formatter=ReceiptFormatter(layout), dispatcher=dispatcher,
                         sample_on_empty=sample_on_empty)
        app.config['TESTING'] = True
        return app.test_client()
    return factory


@pytest.fixture
def client(make_client):
    """Client in simulation mode (no printer attached)."""
    return make_client()


@pytest.fixture
def kitchen_order():
    return {
        'orderType': 'dine-in',
        'tableNumber': '12',
        'items': [
            {'name': 'Onion Bhaji', 'quantity': 1, 'price': '4.50', 'category': 'Starters'},
            {'name': 'Lamb Rogan Josh', 'quantity': 2, 'price': '13.95', 'category': 'Mains',
             'spiceLevel': 'Hot', 'notes': 'No coriander', 'allergens': ['Dairy', 'Mustard']},
            {'name': 'Naan', 'quantity': 2, 'price': '2.95', 'category': 'Rice & Bread'},
            {'name': 'Mango Lassi', 'quantity': 1, 'price': '3.75', 'category': 'Drinks'},
        ],
        'specialInstructions': 'Birthday table, bring starters together',
    }


@pytest.fixture
def customer_order():
    return {
        'orderType': 'delivery',
        'items': [
            {'name': 'Chicken Tikka Masala', 'quantity': 2, 'price': '12.95',
             'modifiers': [{'name': 'Extra sauce', 'price': '0.50'}, 'No onions']},
            {'name': 'Pilau Rice', 'quantity': 1, 'price': '3.50'},
        ],
        'subtotal': '29.40',
        'discount': '2.00',
        'deliveryFee': '2.50',
        'vat': '4.98',
        'total': '29.90',
        'deliveryAddress': {'line1': '12 High Street', 'city': 'London', 'postcode': 'SW1A 2AA'},
        'cashier': 'Priya',
    }


@pytest.fixture
def card_payment():
    return {'method': 'card', 'status': 'approved', 'cardNumber': '4111 1111 1111 1234'}
