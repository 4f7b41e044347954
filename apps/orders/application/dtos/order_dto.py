"""
Order output DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ...domain.entities import Order, OrderItem
from ...domain.value_objects import OrderPriority


@dataclass
class OrderItemDTO:
    """DTO for an order line."""
    product_id: int
    product_name: str
    price: Decimal
    quantity: int
    total_price: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            product_id=item.product_id.value,
            product_name=item.product_name,
            price=item.price.amount,
            quantity=item.quantity.value,
            total_price=item.calculate_total_price().amount,
        )


@dataclass
class OrderDTO:
    """Read view of an order."""
    id: int
    customer_id: int
    items: List[OrderItemDTO]
    address: str
    status: str
    status_description: str
    coupon_code: Optional[str]
    total_amount: Decimal
    discount_amount: Decimal
    final_amount: Decimal
    cancellable: bool
    ordered_at: Optional[datetime]
    paid_at: Optional[datetime]

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            customer_id=order.customer_id.value,
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            address=order.shipping_address.value,
            status=order.status.value,
            status_description=order.status.description,
            coupon_code=order.coupon_code.value if order.coupon_code else None,
            total_amount=order.calculate_total_amount().amount,
            discount_amount=order.discount_amount.amount,
            final_amount=order.calculate_final_amount().amount,
            cancellable=order.is_cancellable(),
            ordered_at=order.ordered_at,
            paid_at=order.paid_at,
        )


@dataclass
class PriorityDTO:
    """Priority of an order."""
    order_id: int
    priority: str
    description: str
    level: int

    @classmethod
    def from_priority(cls, order_id: int, priority: OrderPriority) -> 'PriorityDTO':
        return cls(
            order_id=order_id,
            priority=priority.name,
            description=priority.description,
            level=priority.level,
        )


@dataclass
class DiscountDTO:
    """Loyalty discount available for an order."""
    order_id: int
    discount_amount: Decimal
    total_amount: Decimal
