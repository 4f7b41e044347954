"""
Restoration of stock and coupons given out by an order.
"""
import logging
from dataclasses import dataclass
from typing import Mapping

from ...domain.value_objects import CouponCode, ProductId
from ..ports import CompensationScheduler, CouponClient, ProductClient

logger = logging.getLogger(__name__)


@dataclass
class Compensator:
    """
    Gives stock and coupons back to their contexts.

    Each restoration is attempted on its own. One that raises is handed to the
    scheduler for retrying, so it does not stop the next one.
    """

    product_client: ProductClient
    coupon_client: CouponClient
    scheduler: CompensationScheduler

    def restore_stocks(self, quantities: Mapping[ProductId, int]) -> None:
        try:
            self.product_client.restore_stocks(quantities)
        except Exception:
            logger.warning("Stock restore failed, scheduling retry: %s", dict(quantities), exc_info=True)
            self.scheduler.schedule_stock_restore(quantities)

    def restore_coupon(self, coupon_code: CouponCode) -> None:
        try:
            restored = self.coupon_client.restore_coupon(coupon_code)
        except Exception:
            logger.warning("Coupon restore failed, scheduling retry: coupon_code=%s", coupon_code, exc_info=True)
            self.scheduler.schedule_coupon_restore(coupon_code)
            return
        if not restored:
            logger.warning("Coupon restore was refused: coupon_code=%s", coupon_code)
