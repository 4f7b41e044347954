# Use cases
from .create_order import CreateOrderUseCase
from .pay_order import PayOrderUseCase
from .cancel_order import CancelOrderUseCase
from .ship_order import ShipOrderUseCase
from .get_order import GetOrderUseCase, GetOrderPriorityUseCase, CalculateDiscountUseCase

__all__ = [
    'CreateOrderUseCase',
    'PayOrderUseCase',
    'CancelOrderUseCase',
    'ShipOrderUseCase',
    'GetOrderUseCase',
    'GetOrderPriorityUseCase',
    'CalculateDiscountUseCase',
]
