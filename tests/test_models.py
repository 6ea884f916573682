from decimal import Decimal

import pytest

from receipt_print_service.errors import ValidationError
from receipt_print_service.models import Order, LineItem, Modifier, Payment, PrinterState


class TestLineItem:

    def test_minimal_item_defaults(self):
        item = LineItem.from_dict({'name': 'Naan'})
        assert item.quantity == 1
        assert item.price == Decimal('0')
        assert item.spice_level is None
        assert item.allergens == []
        assert item.modifiers == []

    def test_alternate_key_spellings(self):
        item = LineItem.from_dict({
            'item_name': 'Korma', 'qty': '3', 'unitPrice': '£9.50',
            'spice_level': 'Mild', 'instructions': 'Extra cream',
        })
        assert item.name == 'Korma'
        assert item.quantity == 3
        assert item.price == Decimal('9.50')
        assert item.spice_level == 'Mild'
        assert item.instructions == 'Extra cream'

    def test_line_total(self):
        item = LineItem.from_dict({'name': 'Naan', 'quantity': 3, 'price': 2.95})
        assert item.line_total == Decimal('8.85')

    @pytest.mark.parametrize('quantity', [0, -1, 'two', 1.5, True])
    def test_invalid_quantity(self, quantity):
        with pytest.raises(ValidationError) as exc:
            LineItem.from_dict({'name': 'Naan', 'quantity': quantity})
        assert exc.value.field == 'quantity'

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            LineItem.from_dict({'name': 'Naan', 'price': '-1'})

    def test_name_required(self):
        with pytest.raises(ValidationError):
            LineItem.from_dict({'quantity': 1})

    def test_allergens_from_string_deduplicated(self):
        item = LineItem.from_dict({'name': 'Korma', 'allergens': 'Nuts, Dairy, Nuts'})
        assert item.allergens == ['Nuts', 'Dairy']

    def test_modifiers_objects_and_strings(self):
        item = LineItem.from_dict({'name': 'Korma', 'modifiers': [
            {'name': 'Extra chicken', 'price': '2.00'}, 'No onions']})
        assert item.modifiers == [Modifier('Extra chicken', Decimal('2.00')),
                                  Modifier('No onions', Decimal('0'))]


class TestOrder:

    def test_display_defaults(self):
        order = Order.from_dict({'items': []})
        assert order.display_order_type == 'DINE-IN'
        assert order.display_table == 'N/A'

    @pytest.mark.parametrize('raw,expected', [
        ('takeaway', 'TAKEAWAY'),
        ('dine_in', 'DINE-IN'),
        ('Dine In', 'DINE-IN'),
    ])
    def test_display_order_type(self, raw, expected):
        assert Order.from_dict({'orderType': raw}).display_order_type == expected

    def test_totals_parsed(self):
        order = Order.from_dict({'subtotal': '10.00', 'vat': 1.67, 'total': '10'})
        assert order.subtotal == Decimal('10.00')
        assert order.vat == Decimal('1.67')
        assert order.total == Decimal('10')
        assert order.discount is None

    def test_totals_from_nested_object(self):
        order = Order.from_dict({'totals': {'subtotal': '5.00', 'total': '6.00'}})
        assert order.subtotal == Decimal('5.00')
        assert order.total == Decimal('6.00')

    def test_service_charge_spellings(self):
        assert Order.from_dict({'serviceCharge': '1.65'}).service_charge == Decimal('1.65')
        assert Order.from_dict({'totals': {'service_charge': 2}}).service_charge == Decimal('2')
        assert Order.from_dict({}).to_dict()['service_charge'] is None

    def test_invalid_total(self):
        with pytest.raises(ValidationError) as exc:
            Order.from_dict({'total': 'lots'})
        assert exc.value.field == 'total'

    def test_items_must_be_list(self):
        with pytest.raises(ValidationError):
            Order.from_dict({'items': {'name': 'Naan'}})

    def test_address_object_flattened(self):
        order = Order.from_dict({'deliveryAddress': {'line1': '1 Main St', 'city': 'Leeds'}})
        assert order.delivery_address == '1 Main St\nLeeds'

    def test_item_count(self):
        order = Order.from_dict({'items': [{'name': 'A', 'quantity': 2}, {'name': 'B'}]})
        assert order.item_count == 3

    def test_to_dict_formats_money(self):
        order = Order.from_dict({'orderNumber': 7, 'total': 12.5})
        data = order.to_dict()
        assert data['order_number'] == '7'
        assert data['total'] == '12.50'


class TestPayment:

    def test_defaults(self):
        payment = Payment.from_dict({})
        assert payment.method == 'card'
        assert payment.status == 'paid'
        assert payment.masked_card is None

    def test_card_reduced_to_last_four(self):
        payment = Payment.from_dict({'cardNumber': '4111-1111-1111-9876'})
        assert payment.card_last4 == '9876'
        assert payment.masked_card == '**** 9876'

    def test_cash(self):
        payment = Payment.from_dict({'method': 'Cash', 'amountTendered': '20', 'change': '3.55'})
        assert payment.is_cash
        assert payment.amount_tendered == Decimal('20')

    @pytest.mark.parametrize('method,status,approved', [
        ('card', 'approved', True),
        ('Card', 'PAID', True),
        ('card', 'declined', False),
        ('cash', 'paid', False),
    ])
    def test_card_approval(self, method, status, approved):
        payment = Payment.from_dict({'method': method, 'status': status})
        assert (payment.is_card and payment.is_approved) is approved

    def test_service_charge(self):
        payment = Payment.from_dict({'service_charge': '0.75'})
        assert payment.service_charge == Decimal('0.75')
        assert payment.to_dict()['service_charge'] == '0.75'

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            Payment.from_dict(['card'])


class TestPrinterState:

    def test_transitions(self):
        state = PrinterState(label='TM-T20')
        assert state.status == 'Uninitialized'
        state.mark_connected()
        assert state.connected and state.status == 'Ready'
        state.mark_disconnected('paper jam')
        assert not state.connected
        assert state.last_error == 'paper jam'
        assert 'paper jam' in state.message

    def test_to_dict_serializes_timestamp(self):
        state = PrinterState(label='TM-T20')
        state.mark_connected()
        assert isinstance(state.to_dict()['last_checked'], str)
