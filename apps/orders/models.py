# Django discovers the app's models through this module.
from .infrastructure.models import OrderModel, OrderItemModel  # noqa: F401
