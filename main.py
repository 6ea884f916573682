#!/usr/bin/env python
"""
Receipt Print Service - Standalone Entry Point

Run directly:
    python main.py

Or with environment variables:
    RECEIPT_PRINT_PORT=3002 RECEIPT_PRINTER_CONNECTION=usb python main.py
"""

from receipt_print_service.app import main


if __name__ == '__main__':
    main()
