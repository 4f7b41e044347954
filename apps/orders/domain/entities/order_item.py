"""
Order item entity.
"""
from dataclasses import dataclass

from shared.domain import BaseEntity
from ..exceptions import InvalidOrderItemError
from ..value_objects import Money, ProductId, Quantity


@dataclass(kw_only=True, eq=False)
class OrderItem(BaseEntity):
    """
    A line of an order.

    Name and price are snapshots taken from the catalog when the order is
    placed; later catalog changes do not affect existing orders.
    """
    product_id: ProductId
    product_name: str
    price: Money
    quantity: Quantity

    def __post_init__(self):
        if self.product_id is None:
            raise InvalidOrderItemError("Product id is required", field="product_id")
        if not self.product_name or not self.product_name.strip():
            raise InvalidOrderItemError("Product name is required", field="product_name")
        if self.price is None or not self.price.is_positive():
            raise InvalidOrderItemError("Product price must be greater than zero", field="price")
        if self.quantity is None:
            raise InvalidOrderItemError("Quantity is required", field="quantity")

    def calculate_total_price(self) -> Money:
        """Calculate the line total."""
        return self.price.multiply(self.quantity.value)

    def change_quantity(self, new_quantity: Quantity) -> None:
        if new_quantity is None:
            raise InvalidOrderItemError("Quantity is required", field="quantity")
        self.quantity = new_quantity

    def is_same_product(self, product_id: ProductId) -> bool:
        return self.product_id == product_id
