# Serializers
from .order_serializer import (
    OrderItemRequestSerializer,
    OrderCreateSerializer,
    OrderCancelSerializer,
    OrderIdSerializer,
    OrderItemSerializer,
    OrderSerializer,
    OrderPrioritySerializer,
    OrderDiscountSerializer,
)

__all__ = [
    'OrderItemRequestSerializer',
    'OrderCreateSerializer',
    'OrderCancelSerializer',
    'OrderIdSerializer',
    'OrderItemSerializer',
    'OrderSerializer',
    'OrderPrioritySerializer',
    'OrderDiscountSerializer',
]
