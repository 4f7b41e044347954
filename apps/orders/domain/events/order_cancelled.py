"""
Order cancelled domain event.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from shared.domain import DomainEvent
from ..value_objects import CouponCode, CustomerId

if TYPE_CHECKING:
    from ..entities.order_item import OrderItem


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(DomainEvent):
    """
    Event raised when an order is cancelled.

    Carries a snapshot of the cancelled lines and the coupon so downstream
    consumers do not have to read the order back.
    """
    order_id: Optional[int]
    customer_id: CustomerId
    order_items: Tuple['OrderItem', ...]
    coupon_code: Optional[CouponCode] = None
