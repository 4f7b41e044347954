# DTOs
from .order_command_dto import (
    CreateOrderDTO,
    OrderItemRequestDTO,
    OrderIdDTO,
    CancelOrderDTO,
)
from .order_dto import OrderDTO, OrderItemDTO, PriorityDTO, DiscountDTO

__all__ = [
    'CreateOrderDTO',
    'OrderItemRequestDTO',
    'OrderIdDTO',
    'CancelOrderDTO',
    'OrderDTO',
    'OrderItemDTO',
    'PriorityDTO',
    'DiscountDTO',
]
