"""
Field helpers shared by the order and payment models.

Frontend versions disagree on key names (``orderNumber`` vs ``order_number``,
``notes`` vs ``instructions``), so lookups accept several spellings.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ..errors import ValidationError


def pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present, non-empty value among keys."""
    for key in keys:
        value = data.get(key)
        if value is not None and value != '':
            return value
    return default


def text(value: Any) -> Optional[str]:
    """Coerce to a stripped string; empty becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def money(value: Any, field: str, required: bool = False) -> Optional[Decimal]:
    """
    Parse a non-negative currency amount.

    Args:
        value: Number or numeric string (a leading currency symbol is tolerated)
        field: Field name used in the error message
        required: Raise when value is absent instead of returning None

    Returns:
        Decimal amount, or None when absent and not required
    """
    if value is None or value == '':
        if required:
            raise ValidationError(f'{field} is required', field=field)
        return None

    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number', field=field)

    raw = str(value).strip().lstrip('£$€').replace(',', '')
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f'{field} must be a number, got {value!r}', field=field)

    if not amount.is_finite():
        raise ValidationError(f'{field} must be a finite number', field=field)
    if amount < 0:
        raise ValidationError(f'{field} must not be negative', field=field)
    return amount


def money_str(amount: Optional[Decimal]) -> Optional[str]:
    """Two-decimal string for JSON output."""
    if amount is None:
        return None
    return f'{amount:.2f}'
