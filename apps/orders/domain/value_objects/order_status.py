"""
Order status value object.

The state machine is plain data: a transition table and predicate sets keyed
by status, consulted by the methods below.
"""
from enum import Enum
from typing import Dict, FrozenSet


class OrderStatus(str, Enum):
    """Order lifecycle states."""
    PENDING = 'PENDING'
    PAID = 'PAID'
    SHIPPED = 'SHIPPED'
    DELIVERED = 'DELIVERED'
    CANCELLED = 'CANCELLED'

    @property
    def description(self) -> str:
        return STATUS_DESCRIPTIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: 'OrderStatus') -> bool:
        return target in ALLOWED_TRANSITIONS[self]

    def can_be_cancelled(self) -> bool:
        return self in CANCELLABLE_STATUSES

    def can_be_paid(self) -> bool:
        return self in PAYABLE_STATUSES

    def can_be_shipped(self) -> bool:
        return self in SHIPPABLE_STATUSES


STATUS_DESCRIPTIONS: Dict[OrderStatus, str] = {
    OrderStatus.PENDING: 'awaiting payment',
    OrderStatus.PAID: 'paid',
    OrderStatus.SHIPPED: 'being shipped',
    OrderStatus.DELIVERED: 'delivered',
    OrderStatus.CANCELLED: 'cancelled',
}

ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

# PAID orders are additionally limited by the post-payment window on Order.
CANCELLABLE_STATUSES: FrozenSet[OrderStatus] = frozenset({OrderStatus.PENDING, OrderStatus.PAID})
PAYABLE_STATUSES: FrozenSet[OrderStatus] = frozenset({OrderStatus.PENDING})
SHIPPABLE_STATUSES: FrozenSet[OrderStatus] = frozenset({OrderStatus.PAID})
