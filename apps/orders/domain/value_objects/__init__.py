# Value objects
from .money import Money
from .quantity import Quantity
from .identifiers import CustomerId, ProductId
from .coupon_code import CouponCode
from .shipping_address import ShippingAddress
from .order_status import OrderStatus
from .order_priority import OrderPriority

__all__ = [
    'Money',
    'Quantity',
    'CustomerId',
    'ProductId',
    'CouponCode',
    'ShippingAddress',
    'OrderStatus',
    'OrderPriority',
]
