"""
Order created domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent
from ..value_objects import CustomerId, Money


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    """Event raised when a new order is placed."""
    customer_id: CustomerId
    total_amount: Money
