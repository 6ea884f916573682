"""
Receipt Print Service - Main Application
========================================

HTTP front of the print helper used by the point-of-sale frontend.

Run: python -m receipt_print_service
"""

import logging
from datetime import datetime
from typing import Optional, Callable

from flask import Blueprint, Flask, current_app, request, jsonify
from flask_cors import CORS

from . import __version__
from .config import (
    PORT, HOST, DEBUG, LOG_LEVEL, LOG_FORMAT, SERVICE_NAME, PRINTER_CONNECTION,
    RECEIPT_LAYOUT, DEVICE_FAILURE_POLICY, SAMPLE_DATA_ON_EMPTY,
)
from .dispatcher import PrintDispatcher
from .errors import ValidationError
from .formatting import ReceiptFormatter
from .handlers import create_handler
from .payloads import extract_kitchen, extract_customer, require_dict

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__)

EXTENSION = 'receipt_print'

# =============================================================================
# Application Setup
# =============================================================================


def create_app(formatter: Optional[ReceiptFormatter] = None,
               dispatcher: Optional[PrintDispatcher] = None,
               sample_on_empty: bool = SAMPLE_DATA_ON_EMPTY) -> Flask:
    """
    Create the Flask application.

    Args:
        formatter: Receipt formatter (configured layout when omitted)
        dispatcher: Print dispatcher (configured device when omitted)
        sample_on_empty: Substitute sample data when a request has no order

    The dispatcher's device is probed once here.
    """
    app = Flask(__name__)
    CORS(app)

    formatter = formatter or ReceiptFormatter()
    if dispatcher is None:
        dispatcher = PrintDispatcher(device=create_handler(), brand=formatter.restaurant_name)
    dispatcher.startup()

    app.extensions[EXTENSION] = {
        'formatter': formatter,
        'dispatcher': dispatcher,
        'sample_on_empty': sample_on_empty,
    }
    app.register_blueprint(api)
    return app


def _formatter() -> ReceiptFormatter:
    return current_app.extensions[EXTENSION]['formatter']


def _dispatcher() -> PrintDispatcher:
    return current_app.extensions[EXTENSION]['dispatcher']


def _sample_on_empty() -> bool:
    return current_app.extensions[EXTENSION]['sample_on_empty']


def _now() -> str:
    return datetime.now().isoformat()


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@api.route('/api', methods=['GET'])
def api_info():
    """API info (JSON)."""
    return jsonify({
        'service': SERVICE_NAME,
        'version': __version__,
        'status': 'running',
        'layout': _formatter().layout_name,
        'endpoints': {
            'health': '/api/health',
            'printer_status': '/api/printer-status',
            'printer_reconnect': '/api/printer-reconnect',
            'test_print': '/api/test-print',
            'print_kitchen': '/api/print-kitchen',
            'print_customer': '/api/print-customer',
        }
    })


@api.route('/api/health', methods=['GET'])
@api.route('/health', methods=['GET'])
def health():
    """Health check."""
    return jsonify({
        'status': 'ok',
        'message': f'{SERVICE_NAME} is running',
        'service': SERVICE_NAME,
        'version': __version__,
        'timestamp': _now(),
        'printer_connected': _dispatcher().connected,
    })


def _status_response():
    state = _dispatcher().status()
    return jsonify({
        'connected': state.connected,
        'status': state.status,
        'message': state.message,
        'printer': state.to_dict(),
        'timestamp': _now(),
    })


@api.route('/api/printer-status', methods=['GET'])
@api.route('/status', methods=['GET'])
def printer_status():
    """Printer connectivity."""
    return _status_response()


@api.route('/api/printer-reconnect', methods=['POST'])
def printer_reconnect():
    """Probe the printer again after it was plugged in or fixed."""
    _dispatcher().reconnect()
    return _status_response()


# =============================================================================
# Printing
# =============================================================================

def _print(kind: str, build: Callable[[dict], tuple]):
    """
    Run one print request.

    build() returns (document, order_number) or raises ValidationError.
    """
    try:
        body = request.get_json(silent=True)
        if kind != 'test':
            body = require_dict(body)
        document, order_number = build(body)
        _dispatcher().dispatch(document, kind)

    except ValidationError as e:
        logger.info("Rejected %s print: %s", kind, e)
        return jsonify({
            'success': False,
            'error': str(e),
            'message': f'Cannot print {kind} receipt: {e}',
        }), 400

    except Exception as e:
        logger.exception("%s print failed", kind.capitalize())
        return jsonify({'success': False, 'error': str(e)}), 500

    response = {
        'success': True,
        'message': f'{kind.capitalize()} receipt sent to printer',
        'timestamp': _now(),
    }
    if order_number is not None:
        response['orderNumber'] = order_number
    return jsonify(response)


@api.route('/api/test-print', methods=['POST'])
@api.route('/print/test', methods=['POST'])
def print_test():
    """Print a test page."""
    return _print('test', lambda body: (_formatter().format_test(), None))


@api.route('/api/print-kitchen', methods=['POST'])
@api.route('/print/kitchen', methods=['POST'])
def print_kitchen():
    """Print a kitchen receipt."""
    def build(body):
        order, order_number, timestamp = extract_kitchen(body, _sample_on_empty())
        return _formatter().format_kitchen(order, order_number, timestamp), order_number

    return _print('kitchen', build)


@api.route('/api/print-customer', methods=['POST'])
@api.route('/print/customer', methods=['POST'])
def print_customer():
    """Print a customer receipt."""
    def build(body):
        order, payment, order_number, timestamp = extract_customer(body, _sample_on_empty())
        return _formatter().format_customer(order, payment, order_number, timestamp), order_number

    return _print('customer', build)


# =============================================================================
# Main
# =============================================================================

def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging for the service process."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def main():
    """Run the service."""
    configure_logging()

    print("=" * 60)
    print(f"  {SERVICE_NAME}")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Port: {PORT}")
    print(f"  Printer: {PRINTER_CONNECTION}")
    print(f"  Layout: {RECEIPT_LAYOUT}")
    print(f"  On device failure: {DEVICE_FAILURE_POLICY}")
    print("=" * 60)
    print("  API Endpoints:")
    print("    GET  /api/health            (/health)          - Health check")
    print("    GET  /api/printer-status    (/status)          - Printer status")
    print("    POST /api/printer-reconnect                    - Probe printer again")
    print("    POST /api/test-print        (/print/test)      - Test receipt")
    print("    POST /api/print-kitchen     (/print/kitchen)   - Kitchen receipt")
    print("    POST /api/print-customer    (/print/customer)  - Customer receipt")
    print("=" * 60)

    app = create_app()
    state = app.extensions[EXTENSION]['dispatcher'].status()
    print(f"  Printer state: {state.status} - {state.message}")
    print("=" * 60)

    app.run(host=HOST, port=PORT, debug=DEBUG, threaded=True)


if __name__ == '__main__':
    main()
