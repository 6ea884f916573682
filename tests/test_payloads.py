from datetime import datetime, timedelta

import pytest

from receipt_print_service.errors import ValidationError
from receipt_print_service.payloads import (
    extract_kitchen, extract_customer, parse_timestamp, require_dict,
)
from receipt_print_service.samples import SAMPLE_ORDER_NUMBER


class TestParseTimestamp:

    def test_iso_string(self):
        assert parse_timestamp('2026-10-19T18:30:05') == datetime(2026, 10, 19, 18, 30, 5)

    def test_utc_suffix_converted_to_local_naive(self):
        parsed = parse_timestamp('2026-10-19T18:30:05Z')
        assert parsed.tzinfo is None

    @pytest.mark.parametrize('value', [None, '', 'yesterday', 12345])
    def test_unusable_means_now(self, value):
        assert datetime.now() - parse_timestamp(value) < timedelta(seconds=5)


class TestExtractKitchen:

    def test_current_shape(self):
        order, number, timestamp = extract_kitchen({
            'order': {'items': [{'name': 'Naan', 'quantity': 2}]},
            'orderNumber': 42,
            'timestamp': '2026-10-19T18:30:05',
        })
        assert order.items[0].name == 'Naan'
        assert number == '42'
        assert timestamp == datetime(2026, 10, 19, 18, 30, 5)

    def test_legacy_shape_reads_number_from_order(self):
        order, number, _ = extract_kitchen({'orderData': {'orderNumber': 'A-17', 'items': []}})
        assert order is not None
        assert number == 'A-17'

    def test_snake_case_shape(self):
        order, number, _ = extract_kitchen({'order_data': {'order_number': 'B-3', 'items': [
            {'name': 'Naan', 'quantity': 2}]}}, sample_on_empty=True)
        assert number == 'B-3'
        assert [i.name for i in order.items] == ['Naan']

    def test_body_number_wins_over_order(self):
        _, number, _ = extract_kitchen({'order': {'orderNumber': '1'}, 'orderNumber': '2'})
        assert number == '2'

    def test_missing_everything(self):
        order, number, _ = extract_kitchen({}, sample_on_empty=False)
        assert order is None
        assert number is None

    def test_sample_substituted_when_enabled(self):
        order, number, _ = extract_kitchen({}, sample_on_empty=True)
        assert number == SAMPLE_ORDER_NUMBER
        assert order.items

    def test_invalid_item_raises(self):
        with pytest.raises(ValidationError):
            extract_kitchen({'order': {'items': [{'name': 'Naan', 'quantity': 0}]},
                             'orderNumber': '1'})


class TestExtractCustomer:

    def test_current_shape(self):
        order, payment, number, _ = extract_customer({
            'order': {'total': '10.00'}, 'payment': {'method': 'cash'}, 'orderNumber': '9'})
        assert order.total is not None
        assert payment.method == 'cash'
        assert number == '9'

    def test_legacy_shape(self):
        order, payment, number, _ = extract_customer({
            'orderData': {'orderNumber': '5'}, 'paymentData': {'method': 'Card'}})
        assert number == '5'
        assert payment.method == 'Card'

    @pytest.mark.parametrize('key', ['order', 'orderData', 'order_data'])
    def test_missing_payment_not_sampled_when_order_given(self, key):
        order, payment, _, _ = extract_customer({key: {}, 'orderNumber': '1'}, sample_on_empty=True)
        assert order is not None and not order.items
        assert payment is None

    def test_sample_when_empty(self):
        order, payment, number, _ = extract_customer(None, sample_on_empty=True)
        assert order is not None and payment is not None
        assert number == SAMPLE_ORDER_NUMBER


class TestRequireDict:

    def test_none_is_empty(self):
        assert require_dict(None) == {}

    def test_list_rejected(self):
        with pytest.raises(ValidationError):
            require_dict([1, 2])
