"""
Grouped Layout
==============

Kitchen items grouped into the fixed kitchen sections (Starters, Mains,
Rice & Bread, Drinks, Others) so each station can find its lines.
"""

from typing import Dict, List, Optional

from .base import BaseLayout
from ..config import KITCHEN_SECTIONS, DEFAULT_SECTION
from ..models import Order, LineItem


class GroupedLayout(BaseLayout):
    """Kitchen list grouped by category section."""

    name = 'grouped'

    def __init__(self, *args, sections: Optional[Dict[str, tuple]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.sections = sections or KITCHEN_SECTIONS
        self._lookup = {}
        for section, aliases in self.sections.items():
            self._lookup[section.lower()] = section
            for alias in aliases:
                self._lookup[alias.lower()] = section

    def section_for(self, item: LineItem) -> str:
        """Section name for an item; unknown or missing categories go to Others."""
        if not item.category:
            return DEFAULT_SECTION
        return self._lookup.get(item.category.strip().lower(), DEFAULT_SECTION)

    def kitchen_items(self, order: Order) -> List[str]:
        grouped = {section: [] for section in self.sections}
        grouped.setdefault(DEFAULT_SECTION, [])
        for item in order.items:
            grouped[self.section_for(item)].append(item)

        lines = []
        for section, items in grouped.items():
            if not items:
                continue
            if lines:
                lines.append('')
            lines.append(f'[{section.upper()}]')
            for item in items:
                lines.append(f'{item.quantity}x {item.name}')
                lines.extend(self.item_details(item))
        return lines
