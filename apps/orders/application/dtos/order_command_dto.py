"""
Order command DTOs.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OrderItemRequestDTO:
    """One requested line of a new order."""
    product_id: int
    quantity: int


@dataclass
class CreateOrderDTO:
    """DTO for placing an order."""
    customer_id: int
    items: List[OrderItemRequestDTO] = field(default_factory=list)
    shipping_address: str = ""
    coupon_code: Optional[str] = None


@dataclass
class OrderIdDTO:
    """DTO addressing a single order (pay, ship and read queries)."""
    order_id: int


@dataclass
class CancelOrderDTO:
    """DTO for cancelling an order on behalf of a customer."""
    order_id: int
    customer_id: int
