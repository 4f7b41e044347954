# Django models
from .order_model import OrderModel, OrderItemModel

__all__ = ['OrderModel', 'OrderItemModel']
