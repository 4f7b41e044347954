"""
Coupon code value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidCouponCodeError

COUPON_CODE_PATTERN = re.compile(r'^[A-Z0-9]{6,20}$')


@dataclass(frozen=True)
class CouponCode(ValueObject):
    """Coupon code: 6-20 upper-case letters and digits."""
    value: str

    def __post_init__(self):
        if self.value is None or not str(self.value).strip():
            raise InvalidCouponCodeError("Coupon code is required")
        if not isinstance(self.value, str) or not COUPON_CODE_PATTERN.fullmatch(self.value):
            raise InvalidCouponCodeError(
                "Coupon code must be 6-20 upper-case letters or digits"
            )

    @classmethod
    def of(cls, value: str) -> 'CouponCode':
        return cls(value=value)

    def __str__(self) -> str:
        return self.value
