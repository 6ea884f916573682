"""
Base Handler
============

Abstract base class for receipt printer device handlers.

A handler is a device session: open it, send styled text, cut, close.
Every driver failure must surface as DeviceError.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from ..errors import DeviceError


class BaseHandler(ABC):
    """Abstract base class for printer device handlers."""

    def __init__(self, label: str = ''):
        """Initialize handler with a human-readable device label."""
        self.label = label

    @abstractmethod
    def open(self) -> None:
        """
        Acquire the device.

        Raises:
            DeviceError: Device missing or not reachable
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the device. Safe to call when not open."""
        pass

    @abstractmethod
    def set_style(self, bold: bool = False, double: bool = False, align: str = 'left') -> None:
        """
        Set text style for following text.

        Args:
            bold: Emphasized text
            double: Double width and height
            align: 'left', 'center' or 'right'
        """
        pass

    @abstractmethod
    def text(self, text: str) -> None:
        """Print text as-is (caller supplies newlines)."""
        pass

    @abstractmethod
    def cut(self) -> None:
        """Feed and cut paper."""
        pass

    def test_connection(self) -> Dict[str, Any]:
        """
        Test connection to the device by opening and closing it.

        Returns:
            Dict with connection test results
        """
        try:
            self.open()
        except DeviceError as e:
            return {'success': False, 'error': str(e)}
        except Exception as e:
            return {'success': False, 'error': f'{type(e).__name__}: {e}'}
        finally:
            self.close()
        return {'success': True, 'message': f'{self.label} connected'}
