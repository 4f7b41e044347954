"""
Coupon context port.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ...domain.value_objects import CouponCode, CustomerId, Money


class CouponClient(ABC):
    """
    Anti-corruption boundary to the coupon context.

    The coupon context owns discount calculation; orders only store the code
    and the amount it returned.
    """

    @abstractmethod
    def calculate_discount(self, coupon_code: CouponCode, order_amount: Money) -> Optional[Money]:
        """Discount for ``order_amount``, or None when the coupon cannot be used."""
        pass

    @abstractmethod
    def use_coupon(self, coupon_code: CouponCode, customer_id: CustomerId) -> bool:
        """Mark the coupon as consumed by the customer."""
        pass

    @abstractmethod
    def restore_coupon(self, coupon_code: CouponCode) -> bool:
        """Make a consumed coupon usable again."""
        pass
