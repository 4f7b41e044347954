"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects import CustomerId


class OrderRepository(ABC):
    """
    Abstract repository for Order aggregate.

    ``save`` assigns the id of a new order and releases the order's buffered
    domain events once the write has succeeded.
    """

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Save an order."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: int, for_update: bool = False) -> Optional[Order]:
        """Find an order by ID, optionally locking it for the current transaction."""
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> List[Order]:
        """Find all orders placed by a customer."""
        pass

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Delete an order."""
        pass
