"""
Order domain service.

Business rules that need more than a single order instance: loyalty
discounts over a customer's history, priority classification and order-level
limits.
"""
import logging
from decimal import Decimal
from typing import Iterable, Optional

from ..entities.order import Order
from ..exceptions import OrderPolicyViolationError
from ..value_objects import CustomerId, Money, OrderPriority
from .order_policy import OrderPolicy

logger = logging.getLogger(__name__)


class OrderDomainService:
    """Stateless rules parameterised by an ``OrderPolicy``."""

    def __init__(self, policy: Optional[OrderPolicy] = None):
        self.policy = policy or OrderPolicy()

    def calculate_discount(
        self,
        customer_id: CustomerId,
        order_amount: Money,
        customer_order_history: Iterable[Order],
    ) -> Money:
        """
        Loyalty discount for a new order.

        The tier comes from the customer's lifetime total (history plus this
        order); the rate is applied to ``order_amount`` only.
        """
        logger.info("Calculating discount: customer_id=%s, order_amount=%s", customer_id, order_amount)

        lifetime_total = Money.zero()
        for order in customer_order_history:
            lifetime_total = lifetime_total.add(order.calculate_total_amount())
        lifetime_total = lifetime_total.add(order_amount)

        rate, tier = self._discount_rate(lifetime_total)
        discount = order_amount.multiply_rate(rate)

        logger.info(
            "Discount calculated: tier=%s, rate=%s%%, discount=%s",
            tier, rate * 100, discount,
        )
        return discount

    def _discount_rate(self, lifetime_total: Money) -> tuple:
        if lifetime_total.is_greater_than_or_equal(self.policy.vip_threshold):
            return self.policy.vip_discount_rate, 'VIP'
        if lifetime_total.is_greater_than_or_equal(self.policy.premium_threshold):
            return self.policy.premium_discount_rate, 'PREMIUM'
        return Decimal('0'), 'REGULAR'

    def determine_priority(self, order_amount: Money) -> OrderPriority:
        """Classify an order by its amount."""
        if order_amount.is_greater_than_or_equal(self.policy.vip_threshold):
            priority = OrderPriority.HIGH
        elif order_amount.is_greater_than_or_equal(self.policy.premium_threshold):
            priority = OrderPriority.MEDIUM
        else:
            priority = OrderPriority.LOW

        logger.info("Order priority determined: amount=%s, priority=%s", order_amount, priority.name)
        return priority

    def validate_order(self, order_amount: Money, item_count: int) -> None:
        """Check order-level amount and size limits."""
        policy = self.policy
        if order_amount.is_less_than(policy.min_order_amount):
            raise OrderPolicyViolationError(
                f"Minimum order amount is {policy.min_order_amount}", field="total_amount"
            )
        if order_amount.is_greater_than(policy.max_order_amount):
            raise OrderPolicyViolationError(
                f"Maximum order amount is {policy.max_order_amount}", field="total_amount"
            )
        if item_count < 1:
            raise OrderPolicyViolationError("An order must contain at least one item", field="items")
        if item_count > policy.max_item_count:
            raise OrderPolicyViolationError(
                f"An order can contain at most {policy.max_item_count} items", field="items"
            )
        logger.debug("Order validated: amount=%s, item_count=%s", order_amount, item_count)
