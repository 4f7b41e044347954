"""
Helpers shared by the order use cases.
"""
from ...domain.entities import Order
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories import OrderRepository


def load_order(order_repository: OrderRepository, order_id: int, for_update: bool = False) -> Order:
    """Load an order or raise ``OrderNotFoundError``."""
    order = order_repository.find_by_id(order_id, for_update=for_update)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order
