"""
Order paid domain event.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shared.domain import DomainEvent
from ..value_objects import CustomerId, Money


@dataclass(frozen=True, kw_only=True)
class OrderPaid(DomainEvent):
    """Event raised when payment for an order is captured."""
    order_id: Optional[int]
    customer_id: CustomerId
    paid_amount: Money
    paid_at: datetime
