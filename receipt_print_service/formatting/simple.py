"""
Simple Layout
=============

Kitchen items as a flat list in the order they were rung in.
"""

from typing import List

from .base import BaseLayout
from ..models import Order


class SimpleLayout(BaseLayout):
    """Flat kitchen list."""

    name = 'simple'

    def kitchen_items(self, order: Order) -> List[str]:
        lines = []
        for item in order.items:
            lines.append(f'{item.quantity}x {item.name}')
            lines.extend(self.item_details(item))
        return lines
