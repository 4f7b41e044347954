"""
Deferred compensation port.
"""
from abc import ABC, abstractmethod
from typing import Mapping

from ...domain.value_objects import CouponCode, ProductId


class CompensationScheduler(ABC):
    """
    Takes over a stock or coupon restoration that failed inline.

    Implementations must persist the request and keep retrying it, since the
    order state that triggered it has already been committed.
    """

    @abstractmethod
    def schedule_stock_restore(self, quantities: Mapping[ProductId, int]) -> None:
        pass

    @abstractmethod
    def schedule_coupon_restore(self, coupon_code: CouponCode) -> None:
        pass
