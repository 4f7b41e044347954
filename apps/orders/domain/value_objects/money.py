"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Union

from shared.domain import ValueObject
from ..exceptions import InvalidMoneyError

MAX_SCALE = 2
_CENT = Decimal('0.01')


@dataclass(frozen=True)
class Money(ValueObject):
    """Non-negative amount with at most two decimal places."""
    amount: Decimal

    def __post_init__(self):
        amount = self.amount
        if amount is None:
            raise InvalidMoneyError("Amount cannot be null")
        if isinstance(amount, bool):
            raise InvalidMoneyError(f"Invalid amount: {amount!r}")
        if not isinstance(amount, Decimal):
            try:
                amount = Decimal(str(amount))
            except InvalidOperation:
                raise InvalidMoneyError(f"Invalid amount: {self.amount!r}") from None
        if not amount.is_finite():
            raise InvalidMoneyError(f"Invalid amount: {self.amount!r}")
        if amount < 0:
            raise InvalidMoneyError("Amount cannot be negative")
        if -amount.as_tuple().exponent > MAX_SCALE:
            raise InvalidMoneyError(f"Amount cannot have more than {MAX_SCALE} decimal places")
        self._replace_value('amount', amount)

    @classmethod
    def of(cls, amount: Union[Decimal, int, str]) -> 'Money':
        return cls(amount=amount)

    @classmethod
    def zero(cls) -> 'Money':
        return cls(amount=Decimal('0'))

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        return Money(amount=self.amount + other.amount)

    def subtract(self, other: 'Money') -> 'Money':
        """Subtract money value; the result must not be negative."""
        return Money(amount=self.amount - other.amount)

    def multiply(self, quantity: int) -> 'Money':
        """Multiply money by a whole factor."""
        return Money(amount=self.amount * quantity)

    def multiply_rate(self, rate: Decimal) -> 'Money':
        """Apply a rate, truncating the result to cents."""
        return Money(amount=(self.amount * rate).quantize(_CENT, rounding=ROUND_DOWN))

    def is_greater_than(self, other: 'Money') -> bool:
        return self.amount > other.amount

    def is_greater_than_or_equal(self, other: 'Money') -> bool:
        return self.amount >= other.amount

    def is_less_than(self, other: 'Money') -> bool:
        return self.amount < other.amount

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_zero(self) -> bool:
        return self.amount == 0

    def min(self, other: 'Money') -> 'Money':
        return self if self.amount <= other.amount else other

    def __str__(self) -> str:
        return str(self.amount)
