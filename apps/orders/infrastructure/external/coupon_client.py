"""
HTTP adapter for the coupon context.
"""
import logging
from typing import Optional

from shared.domain.exceptions import ExternalServiceError, ValidationError
from shared.infrastructure.http import JsonHttpClient
from ...application.ports import CouponClient
from ...domain.value_objects import CouponCode, CustomerId, Money

logger = logging.getLogger(__name__)


class HttpCouponClient(CouponClient):
    """Coupon discount calculation and redemption."""

    def __init__(self, http: JsonHttpClient):
        self.http = http

    def calculate_discount(self, coupon_code: CouponCode, order_amount: Money) -> Optional[Money]:
        response = self.http.post(
            f'/coupons/{coupon_code.value}/discount',
            json={'orderAmount': str(order_amount.amount)},
            accept_statuses=(404, 422),
        )
        if response.status_code in (404, 422):
            logger.info("Coupon rejected: coupon_code=%s, status=%s", coupon_code, response.status_code)
            return None

        discount = self.http.json(response).get('discountAmount')
        if discount is None:
            return None
        try:
            return Money.of(str(discount))
        except ValidationError as e:
            raise ExternalServiceError(
                self.http.service_name, f"malformed discount amount: {e.message}"
            ) from e

    def use_coupon(self, coupon_code: CouponCode, customer_id: CustomerId) -> bool:
        response = self.http.post(
            f'/coupons/{coupon_code.value}/use',
            json={'customerId': customer_id.value},
            accept_statuses=(404, 409, 422),
        )
        return response.ok

    def restore_coupon(self, coupon_code: CouponCode) -> bool:
        response = self.http.post(
            f'/coupons/{coupon_code.value}/restore',
            accept_statuses=(404, 409),
        )
        return response.ok
