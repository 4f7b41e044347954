"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable, validate themselves on construction
    and are compared by their attributes.
    """

    def _values(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._values()))

    def _replace_value(self, name: str, value) -> None:
        """Normalise a field during ``__post_init__`` of a frozen dataclass."""
        object.__setattr__(self, name, value)
