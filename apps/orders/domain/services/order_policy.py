"""
Order policy: the named thresholds used by the order domain service.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..value_objects import Money


@dataclass(frozen=True)
class OrderPolicy:
    """Customer tiering, priority and order-limit thresholds."""
    vip_threshold: Money = Money.of(100000)
    premium_threshold: Money = Money.of(50000)
    vip_discount_rate: Decimal = Decimal('0.10')
    premium_discount_rate: Decimal = Decimal('0.05')
    min_order_amount: Money = Money.of(1000)
    max_order_amount: Money = Money.of(1000000)
    max_item_count: int = 20

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, Any]]) -> 'OrderPolicy':
        """Build a policy from a settings dict; missing keys keep their defaults."""
        if not config:
            return cls()
        values = {}
        for key in ('vip_threshold', 'premium_threshold', 'min_order_amount', 'max_order_amount'):
            if key in config:
                values[key] = Money.of(config[key])
        for key in ('vip_discount_rate', 'premium_discount_rate'):
            if key in config:
                values[key] = Decimal(str(config[key]))
        if 'max_item_count' in config:
            values['max_item_count'] = int(config['max_item_count'])
        return cls(**values)
