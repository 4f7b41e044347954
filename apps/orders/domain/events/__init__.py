# Domain events
from .order_created import OrderCreated
from .order_paid import OrderPaid
from .order_cancelled import OrderCancelled

__all__ = ['OrderCreated', 'OrderPaid', 'OrderCancelled']
