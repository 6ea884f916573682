"""
Receipt Print Service Configuration
"""

import os


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_choice(name: str, choices: tuple, default: str) -> str:
    value = os.environ.get(name, default).strip().lower()
    return value if value in choices else default


# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('RECEIPT_PRINT_PORT', 3001))
HOST = os.environ.get('RECEIPT_PRINT_HOST', '127.0.0.1')
DEBUG = _env_bool('RECEIPT_PRINT_DEBUG')

LOG_LEVEL = os.environ.get('RECEIPT_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

SERVICE_NAME = 'Cottage Tandoori Printer Helper'

# =============================================================================
# Printer Connection
# =============================================================================

# none = simulation mode, receipts go to the console log
CONNECTION_MODES = ('none', 'usb', 'network', 'serial', 'file')

PRINTER_CONNECTION = _env_choice('RECEIPT_PRINTER_CONNECTION', CONNECTION_MODES, 'none')
PRINTER_LABEL = os.environ.get('RECEIPT_PRINTER_LABEL', 'Epson TM-T20III')

USB_VENDOR_ID = int(os.environ.get('RECEIPT_USB_VENDOR_ID', '0x04b8'), 16)
USB_PRODUCT_ID = int(os.environ.get('RECEIPT_USB_PRODUCT_ID', '0x0e28'), 16)

PRINTER_HOST = os.environ.get('RECEIPT_PRINTER_HOST')
PRINTER_PORT = int(os.environ.get('RECEIPT_PRINTER_PORT', 9100))

SERIAL_DEVICE = os.environ.get('RECEIPT_SERIAL_DEVICE', '/dev/ttyS0')
SERIAL_BAUDRATE = int(os.environ.get('RECEIPT_SERIAL_BAUDRATE', 9600))

FILE_DEVICE = os.environ.get('RECEIPT_FILE_DEVICE', '/dev/usb/lp0')

DEFAULT_TIMEOUT = 10  # seconds

# per-call: every print tries the device again
# downgrade: a failed print keeps the device off until a manual reconnect
FAILURE_POLICIES = ('per-call', 'downgrade')
DEVICE_FAILURE_POLICY = _env_choice('RECEIPT_DEVICE_FAILURE_POLICY', FAILURE_POLICIES, 'per-call')

# =============================================================================
# Receipt Layout
# =============================================================================

LAYOUTS = ('simple', 'grouped')
RECEIPT_LAYOUT = _env_choice('RECEIPT_LAYOUT', LAYOUTS, 'grouped')

LINE_WIDTH = int(os.environ.get('RECEIPT_LINE_WIDTH', 42))
CURRENCY_SYMBOL = os.environ.get('RECEIPT_CURRENCY', '£')

# Substitute sample data when a print request carries no order at all
SAMPLE_DATA_ON_EMPTY = _env_bool('RECEIPT_SAMPLE_DATA')

RESTAURANT = {
    'name': os.environ.get('RECEIPT_RESTAURANT_NAME', 'COTTAGE TANDOORI'),
    'address': os.environ.get('RECEIPT_RESTAURANT_ADDRESS',
                              '123 Restaurant Street|London, UK SW1A 1AA'),
    'phone': os.environ.get('RECEIPT_RESTAURANT_PHONE', '020 1234 5678'),
    'vat_number': os.environ.get('RECEIPT_RESTAURANT_VAT_NUMBER', ''),
    'footer': 'Thank you for your visit!|Please come again soon!',
}

# =============================================================================
# Kitchen Sections
# =============================================================================

# Order matters: sections print in this order. Keys are matched case-insensitively.
KITCHEN_SECTIONS = {
    'Starters': ('starter', 'starters', 'appetizer', 'appetizers', 'sundries'),
    'Mains': ('main', 'mains', 'main course', 'curry', 'curries', 'tandoori'),
    'Rice & Bread': ('rice & bread', 'rice and bread', 'rice', 'bread', 'breads', 'naan'),
    'Drinks': ('drink', 'drinks', 'beverage', 'beverages'),
    'Others': (),
}
DEFAULT_SECTION = 'Others'

ORDER_TYPES = ('dine-in', 'delivery', 'takeaway', 'collection')
DEFAULT_ORDER_TYPE = 'DINE-IN'

PAYMENT_METHODS = ('card', 'cash', 'online', 'voucher')
