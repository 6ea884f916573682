"""
Receipt Print Service Client
============================

Python SDK for talking to a running print helper.

Usage:
    from receipt_print_service.client import PrintClient

    client = PrintClient('http://localhost:3001')

    if client.is_online():
        client.print_kitchen({'items': [{'name': 'Naan', 'quantity': 2}]}, order_number='42')
"""

import requests
from datetime import datetime
from typing import Dict, Any, Optional, Union


class PrintClient:
    """Client for the receipt print service."""

    def __init__(self, base_url: str = 'http://localhost:3001', timeout: int = 30):
        """
        Initialize client.

        Args:
            base_url: Base URL of the print service
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Dict[str, Any]:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'GET':
                response = requests.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data or {}, timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')

            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except ValueError as e:
            return {'success': False, 'error': f'Invalid response: {e}'}

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Check service health."""
        return self._request('GET', '/api/health')

    def is_online(self) -> bool:
        """Check if service is online."""
        return self.health().get('status') == 'ok'

    def printer_status(self) -> Dict[str, Any]:
        """Get printer connectivity."""
        return self._request('GET', '/api/printer-status')

    def reconnect(self) -> Dict[str, Any]:
        """Ask the service to probe the printer again."""
        return self._request('POST', '/api/printer-reconnect')

    # =========================================================================
    # Printing
    # =========================================================================

    def test_print(self) -> Dict[str, Any]:
        """Print a test page."""
        return self._request('POST', '/api/test-print')

    def print_kitchen(self, order: Dict[str, Any], order_number: Union[str, int],
                      timestamp: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Print a kitchen receipt.

        Args:
            order: Order with items (name, quantity, category, ...)
            order_number: Order number shown on the ticket
            timestamp: Order time (service time when omitted)
        """
        data = {'order': order, 'orderNumber': str(order_number)}
        if timestamp:
            data['timestamp'] = timestamp.isoformat()
        return self._request('POST', '/api/print-kitchen', data)

    def print_customer(self, order: Dict[str, Any], payment: Dict[str, Any],
                       order_number: Union[str, int],
                       timestamp: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Print a customer receipt.

        Args:
            order: Order with items and precomputed totals
            payment: Payment method, status and optional card suffix
            order_number: Receipt number
            timestamp: Order time (service time when omitted)
        """
        data = {'order': order, 'payment': payment, 'orderNumber': str(order_number)}
        if timestamp:
            data['timestamp'] = timestamp.isoformat()
        return self._request('POST', '/api/print-customer', data)
