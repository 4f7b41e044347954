"""
Order priority value object.
"""
from enum import Enum


class OrderPriority(Enum):
    """Handling priority derived from the order amount. Lower level is more urgent."""
    HIGH = ('High', 1)
    MEDIUM = ('Medium', 2)
    LOW = ('Low', 3)

    def __init__(self, description: str, level: int):
        self.description = description
        self.level = level

    def is_higher_than(self, other: 'OrderPriority') -> bool:
        return self.level < other.level

    def is_lower_than(self, other: 'OrderPriority') -> bool:
        return self.level > other.level

    def is_same_as(self, other: 'OrderPriority') -> bool:
        return self.level == other.level
