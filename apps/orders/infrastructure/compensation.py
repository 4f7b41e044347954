"""
Celery-backed compensation scheduler.
"""
import logging
from typing import Mapping

from ..application.ports import CompensationScheduler
from ..domain.value_objects import CouponCode, ProductId
from .tasks import restore_coupon, restore_stocks

logger = logging.getLogger(__name__)


class CeleryCompensationScheduler(CompensationScheduler):
    """Queues restorations on the broker, where the tasks retry with backoff."""

    def schedule_stock_restore(self, quantities: Mapping[ProductId, int]) -> None:
        items = [
            {'product_id': product_id.value, 'quantity': quantity}
            for product_id, quantity in quantities.items()
        ]
        logger.info("Scheduling stock restore: %s", items)
        restore_stocks.delay(items)

    def schedule_coupon_restore(self, coupon_code: CouponCode) -> None:
        logger.info("Scheduling coupon restore: coupon_code=%s", coupon_code)
        restore_coupon.delay(coupon_code.value)
