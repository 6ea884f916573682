"""Run: python -m receipt_print_service"""

from .app import main

if __name__ == '__main__':
    main()
