"""
Print Request Payloads
======================

Pulls order, payment, order number and timestamp out of a request body.
Two body shapes are in use by the frontends:

    {"order": {...}, "payment": {...}, "orderNumber": "42", "timestamp": "..."}
    {"orderData": {"orderNumber": "42", ...}, "paymentData": {...}}
"""

import logging
from datetime import datetime
from typing import Optional, Dict, Any, Tuple

from .config import SAMPLE_DATA_ON_EMPTY
from .errors import ValidationError
from .models import Order, Payment
from .models.fields import pick, text
from .samples import SAMPLE_ORDER, SAMPLE_PAYMENT

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp; anything unusable means now."""
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith('Z'):
            raw = raw[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            logger.debug("Ignoring unparseable timestamp %r", value)
        else:
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone().replace(tzinfo=None)
            return parsed
    return datetime.now()


ORDER_KEYS = ('order', 'orderData', 'order_data')


def _raw_order(body: Dict[str, Any], sample_on_empty: bool) -> Optional[Dict[str, Any]]:
    raw = pick(body, *ORDER_KEYS)
    if raw is None and sample_on_empty:
        logger.info("No order in request, substituting sample order")
        return dict(SAMPLE_ORDER)
    return raw


def _order_number(body: Dict[str, Any], order: Optional[Order]) -> Optional[str]:
    number = text(pick(body, 'orderNumber', 'order_number'))
    if number is None and order is not None:
        number = order.order_number
    return number


def extract_kitchen(body: Optional[Dict[str, Any]],
                    sample_on_empty: bool = SAMPLE_DATA_ON_EMPTY
                    ) -> Tuple[Optional[Order], Optional[str], datetime]:
    """
    Extract kitchen print arguments.

    Returns:
        (order, order_number, timestamp); order and order_number may be None,
        the formatter decides whether that is acceptable
    """
    body = body if isinstance(body, dict) else {}
    raw = _raw_order(body, sample_on_empty)
    order = Order.from_dict(raw) if raw is not None else None
    return order, _order_number(body, order), parse_timestamp(body.get('timestamp'))


def extract_customer(body: Optional[Dict[str, Any]],
                     sample_on_empty: bool = SAMPLE_DATA_ON_EMPTY
                     ) -> Tuple[Optional[Order], Optional[Payment], Optional[str], datetime]:
    """
    Extract customer print arguments.

    Returns:
        (order, payment, order_number, timestamp)
    """
    body = body if isinstance(body, dict) else {}
    raw_order = _raw_order(body, sample_on_empty)
    raw_payment = pick(body, 'payment', 'paymentData', 'payment_data')
    if raw_payment is None and sample_on_empty and pick(body, *ORDER_KEYS) is None:
        raw_payment = dict(SAMPLE_PAYMENT)

    order = Order.from_dict(raw_order) if raw_order is not None else None
    payment = Payment.from_dict(raw_payment) if raw_payment is not None else None
    return order, payment, _order_number(body, order), parse_timestamp(body.get('timestamp'))


def require_dict(body: Any) -> Dict[str, Any]:
    """Reject a JSON body that is not an object."""
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError('Request body must be a JSON object')
    return body
