"""
Notification and analytics adapters.

Both downstream systems live outside this service; the adapters record the
outgoing message in the log.
"""
import logging
from decimal import Decimal

from ...application.ports import AnalyticsClient, NotificationClient

logger = logging.getLogger(__name__)


class LoggingNotificationClient(NotificationClient):

    def send_order_created(self, customer_id: int, total_amount: Decimal) -> None:
        logger.info("[notification] order placed: customer_id=%s, total=%s", customer_id, total_amount)

    def send_payment_confirmation(self, customer_id: int, order_id: int, paid_amount: Decimal) -> None:
        logger.info(
            "[notification] payment confirmed: customer_id=%s, order_id=%s, amount=%s",
            customer_id, order_id, paid_amount,
        )

    def send_order_cancellation(self, customer_id: int, order_id: int) -> None:
        logger.info("[notification] order cancelled: customer_id=%s, order_id=%s", customer_id, order_id)


class LoggingAnalyticsClient(AnalyticsClient):

    def record_order_created(self, customer_id: int, total_amount: Decimal) -> None:
        logger.info("[analytics] order created: customer_id=%s, total=%s", customer_id, total_amount)
