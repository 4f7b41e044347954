"""
Product catalog port.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

from ...domain.value_objects import Money, ProductId


@dataclass(frozen=True)
class ProductInfo:
    """Catalog view of a product, translated into order-context types."""
    product_id: ProductId
    name: str
    unit_price: Money
    stock_quantity: int
    available: bool


class ProductClient(ABC):
    """Anti-corruption boundary to the product catalog."""

    @abstractmethod
    def get_products(self, product_ids: Iterable[ProductId]) -> Dict[ProductId, ProductInfo]:
        """Batch lookup; unknown ids are absent from the result."""
        pass

    @abstractmethod
    def decrease_stocks(self, quantities: Mapping[ProductId, int]) -> bool:
        """Decrease stock for every product or for none of them."""
        pass

    @abstractmethod
    def restore_stocks(self, quantities: Mapping[ProductId, int]) -> None:
        """Give previously decreased stock back."""
        pass
