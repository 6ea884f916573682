"""
Printer State
=============

Connectivity of the single receipt printer owned by the dispatcher.
"""

from datetime import datetime
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class PrinterState:
    """Printer connectivity and status."""

    label: str = ""
    connected: bool = False
    status: str = "Uninitialized"  # Uninitialized, Ready, Disconnected, Simulation mode
    last_error: Optional[str] = None
    last_checked: Optional[datetime] = None

    @property
    def message(self) -> str:
        if self.connected:
            return f'Printer {self.label} connected'
        if self.last_error:
            return f'Printer {self.label} unavailable: {self.last_error}'
        return 'No printer attached, receipts are logged to the console'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        if data.get('last_checked'):
            data['last_checked'] = data['last_checked'].isoformat()
        return data

    def mark_connected(self):
        self.connected = True
        self.status = "Ready"
        self.last_error = None
        self.last_checked = datetime.now()

    def mark_disconnected(self, error: Optional[str] = None, status: str = "Disconnected"):
        self.connected = False
        self.status = status
        self.last_error = error
        self.last_checked = datetime.now()
