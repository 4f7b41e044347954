"""
Orders Celery tasks.
"""
import logging

from celery import shared_task

from shared.domain.exceptions import ExternalServiceError
from ..domain.value_objects import CouponCode, ProductId

logger = logging.getLogger(__name__)


# =============================================================================
# Events
# =============================================================================

@shared_task(name='orders.handle_order_event')
def handle_order_event(event_type: str, payload: dict) -> dict:
    """
    Deliver one released order event to its handler.

    Args:
        event_type: event class name, e.g. ``OrderPaid``
        payload: JSON payload built by the event publisher

    Returns:
        Summary of the delivery, stored in the result backend
    """
    from .container import build_event_handlers

    try:
        handled = build_event_handlers().handle(event_type, payload)
    except Exception:
        logger.error("Handling %s failed: event_id=%s", event_type, payload.get('event_id'), exc_info=True)
        raise

    return {
        'success': True,
        'event_type': event_type,
        'event_id': payload.get('event_id'),
        'handled': handled,
    }


def dispatch_order_event(event_type: str, payload: dict) -> None:
    """Queue an event for ``handle_order_event``."""
    handle_order_event.delay(event_type, payload)


# =============================================================================
# Compensation
# =============================================================================

RETRY_OPTIONS = {
    'autoretry_for': (ExternalServiceError,),
    'retry_backoff': True,
    'retry_backoff_max': 600,
    'max_retries': 10,
    'acks_late': True,
}


@shared_task(name='orders.restore_stocks', **RETRY_OPTIONS)
def restore_stocks(items: list) -> dict:
    """
    Give stock back to the catalog, retrying while it is unreachable.

    Args:
        items: ``[{'product_id': int, 'quantity': int}, ...]``
    """
    from .container import build_product_client

    quantities = {ProductId.of(int(item['product_id'])): int(item['quantity']) for item in items}
    build_product_client().restore_stocks(quantities)
    logger.info("Deferred stock restore done: %s", items)
    return {'success': True, 'items': items}


@shared_task(name='orders.restore_coupon', **RETRY_OPTIONS)
def restore_coupon(coupon_code: str) -> dict:
    """Make a coupon usable again, retrying while the coupon service is unreachable."""
    from .container import build_coupon_client

    restored = build_coupon_client().restore_coupon(CouponCode.of(coupon_code))
    if not restored:
        logger.warning("Deferred coupon restore was refused: coupon_code=%s", coupon_code)
    return {'success': True, 'coupon_code': coupon_code, 'restored': restored}
