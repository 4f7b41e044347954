"""
Order event handlers.

Reactions to released order events. Handlers receive the JSON payload built
by the event publisher, so they run the same way inline and in a worker.
Stock and coupon restoration on cancellation belong to the cancel use case,
not to these handlers.
"""
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping

from .ports import AnalyticsClient, NotificationClient

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any]


class OrderEventHandlers:
    """Dispatches order events to notification and analytics."""

    def __init__(self, notification_client: NotificationClient, analytics_client: AnalyticsClient):
        self.notification_client = notification_client
        self.analytics_client = analytics_client
        self._handlers: Dict[str, Callable[[Payload], None]] = {
            'OrderCreated': self.on_order_created,
            'OrderPaid': self.on_order_paid,
            'OrderCancelled': self.on_order_cancelled,
        }

    @property
    def event_types(self):
        return tuple(self._handlers)

    def handle(self, event_type: str, payload: Payload) -> bool:
        """
        Run the handler registered for ``event_type``.

        Returns False when nothing is registered for the event.
        """
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.warning("No handler registered for event: %s", event_type)
            return False
        logger.info("Handling %s: event_id=%s", event_type, payload.get('event_id'))
        handler(payload)
        return True

    def on_order_created(self, payload: Payload) -> None:
        customer_id = int(payload['customer_id'])
        total_amount = Decimal(payload['total_amount'])
        self.notification_client.send_order_created(customer_id, total_amount)
        self.analytics_client.record_order_created(customer_id, total_amount)

    def on_order_paid(self, payload: Payload) -> None:
        self.notification_client.send_payment_confirmation(
            int(payload['customer_id']),
            int(payload['order_id']),
            Decimal(payload['paid_amount']),
        )

    def on_order_cancelled(self, payload: Payload) -> None:
        self.notification_client.send_order_cancellation(
            int(payload['customer_id']),
            int(payload['order_id']),
        )
