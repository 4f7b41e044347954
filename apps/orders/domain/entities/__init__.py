# Domain entities
from .order import Order, CANCELLATION_WINDOW_HOURS
from .order_item import OrderItem

__all__ = ['Order', 'OrderItem', 'CANCELLATION_WINDOW_HOURS']
