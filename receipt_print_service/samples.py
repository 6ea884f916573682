"""
Sample order data for demo prints.

Used when SAMPLE_DATA_ON_EMPTY is enabled and a request carries no order.
"""

SAMPLE_ORDER_NUMBER = 'TEST-001'

SAMPLE_ORDER = {
    'orderNumber': SAMPLE_ORDER_NUMBER,
    'orderType': 'dine-in',
    'tableNumber': '5',
    'cashier': 'Staff',
    'items': [
        {
            'name': 'Chicken Tikka Masala',
            'quantity': 1,
            'price': '12.95',
            'spiceLevel': 'Medium',
            'notes': 'Extra sauce',
            'category': 'Mains',
            'allergens': ['Dairy', 'Nuts'],
        },
        {
            'name': 'Pilau Rice',
            'quantity': 1,
            'price': '3.50',
            'category': 'Rice & Bread',
        },
    ],
    'subtotal': '16.45',
    'vat': '2.74',
    'total': '16.45',
}

SAMPLE_PAYMENT = {
    'method': 'Card',
    'status': 'Approved',
    'cardLast4': '1234',
    'total': '16.45',
}
