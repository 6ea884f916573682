"""
Receipt Print Service
=====================

Local print helper for a restaurant point-of-sale frontend. Formats orders
into plain-text receipts and sends them to an ESC/POS receipt printer, or to
the console log when no printer is attached.

Supports:
- Test, kitchen and customer receipts
- Flat or category-grouped kitchen layouts
- USB, network, serial and file ESC/POS connections (via python-escpos)

Usage:
    python -m receipt_print_service

API Endpoints:
    GET  /api/health             - Health check
    GET  /api/printer-status     - Printer connectivity
    POST /api/test-print         - Print a test page
    POST /api/print-kitchen      - Print a kitchen receipt
    POST /api/print-customer     - Print a customer receipt
"""

__version__ = '1.1.0'
__author__ = 'Cottage Tandoori'
