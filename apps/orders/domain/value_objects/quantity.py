"""
Quantity value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidQuantityError

MIN_QUANTITY = 1
MAX_QUANTITY = 100


@dataclass(frozen=True)
class Quantity(ValueObject):
    """Ordered quantity of a single product, between 1 and 100."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(f"Quantity must be an integer, got {self.value!r}")
        if self.value < MIN_QUANTITY:
            raise InvalidQuantityError(f"Quantity must be at least {MIN_QUANTITY}")
        if self.value > MAX_QUANTITY:
            raise InvalidQuantityError(f"Quantity cannot exceed {MAX_QUANTITY}")

    @classmethod
    def of(cls, value: int) -> 'Quantity':
        return cls(value=value)

    def add(self, other: 'Quantity') -> 'Quantity':
        # No subtract: quantities only ever grow inside an order line.
        return Quantity(value=self.value + other.value)

    def is_greater_than(self, target: int) -> bool:
        return self.value > target

    def __str__(self) -> str:
        return str(self.value)
