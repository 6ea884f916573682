"""
Receipt Print Service Errors
============================

ValidationError is caller-facing (HTTP 400). DeviceError never leaves the
dispatcher: it is logged and the receipt goes to the console sink instead.
"""

from typing import Optional


class PrintServiceError(Exception):
    """Base class for service errors."""


class ValidationError(PrintServiceError):
    """Request is missing a required field or carries an invalid value."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DeviceError(PrintServiceError):
    """Printer device could not be opened or failed during a job."""
