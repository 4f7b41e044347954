"""
Customer context port.
"""
from abc import ABC, abstractmethod

from ...domain.value_objects import CustomerId


class CustomerClient(ABC):
    """Anti-corruption boundary to the customer context."""

    @abstractmethod
    def can_order(self, customer_id: CustomerId) -> bool:
        """Whether the customer is currently allowed to place orders."""
        pass
