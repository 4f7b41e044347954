"""
Shipping address value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidShippingAddressError

MIN_LENGTH = 10
MAX_LENGTH = 200


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Delivery address of an order."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidShippingAddressError("Shipping address is required")
        if len(self.value) < MIN_LENGTH:
            raise InvalidShippingAddressError(
                f"Shipping address must be at least {MIN_LENGTH} characters"
            )
        if len(self.value) > MAX_LENGTH:
            raise InvalidShippingAddressError(
                f"Shipping address must be at most {MAX_LENGTH} characters"
            )

    @classmethod
    def of(cls, value: str) -> 'ShippingAddress':
        return cls(value=value)

    def __str__(self) -> str:
        return self.value
