"""
Identifier value objects for the customer and product contexts.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidIdentifierError


def _validate_positive(kind: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidIdentifierError(kind, value)


@dataclass(frozen=True)
class CustomerId(ValueObject):
    """Identifier of a customer owned by the customer context."""
    value: int

    def __post_init__(self):
        _validate_positive("customer", self.value)

    @classmethod
    def of(cls, value: int) -> 'CustomerId':
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductId(ValueObject):
    """Identifier of a product owned by the catalog context."""
    value: int

    def __post_init__(self):
        _validate_positive("product", self.value)

    @classmethod
    def of(cls, value: int) -> 'ProductId':
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)
