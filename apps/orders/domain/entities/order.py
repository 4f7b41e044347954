"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from shared.domain import AggregateRoot, utc_now
from ..value_objects import (
    CouponCode,
    CustomerId,
    Money,
    OrderStatus,
    ProductId,
    ShippingAddress,
)
from ..events.order_created import OrderCreated
from ..events.order_paid import OrderPaid
from ..events.order_cancelled import OrderCancelled
from ..exceptions import (
    CancellationWindowExpiredError,
    DiscountExceedsTotalError,
    EmptyOrderError,
    InvalidMoneyError,
    InvalidOrderStateError,
    NonPositivePaymentError,
    OrderOwnershipError,
)
from .order_item import OrderItem

CANCELLATION_WINDOW_HOURS = 24


@dataclass(kw_only=True, eq=False)
class Order(AggregateRoot):
    """
    Order aggregate root.

    All changes to an order and its lines go through this class. Invariants:

    * an order always has at least one line
    * a discount never exceeds the order total when applied
    * status changes follow ``OrderStatus`` transitions only
    * only the owner may cancel, and a paid order only within the
      cancellation window
    * the final amount is never negative

    Each state change buffers at most one domain event; the repository
    releases the buffer after a successful save.
    """
    customer_id: CustomerId
    items: List[OrderItem]
    shipping_address: ShippingAddress
    status: OrderStatus = OrderStatus.PENDING
    coupon_code: Optional[CouponCode] = None
    discount_amount: Money = field(default_factory=Money.zero)
    ordered_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.items:
            raise EmptyOrderError()
        self.items = list(self.items)

    @classmethod
    def create(
        cls,
        customer_id: CustomerId,
        items: Sequence[OrderItem],
        shipping_address: ShippingAddress,
        now: Optional[datetime] = None,
    ) -> 'Order':
        """Factory method to create a new order."""
        if not items:
            raise EmptyOrderError()
        order = cls(
            customer_id=customer_id,
            items=list(items),
            shipping_address=shipping_address,
            status=OrderStatus.PENDING,
            discount_amount=Money.zero(),
            ordered_at=now or utc_now(),
        )
        order.add_domain_event(
            OrderCreated(
                customer_id=customer_id,
                total_amount=order.calculate_total_amount(),
            )
        )
        return order

    # Behaviour

    def apply_coupon(self, coupon_code: CouponCode, discount_amount: Money) -> None:
        """Apply a coupon whose discount was computed by the coupon service."""
        if discount_amount is None:
            raise InvalidMoneyError("Discount amount is required")
        if self.status != OrderStatus.PENDING:
            raise InvalidOrderStateError("apply a coupon to", self.status.value, self.status.description)
        total = self.calculate_total_amount()
        if discount_amount.is_greater_than(total):
            raise DiscountExceedsTotalError(discount_amount, total)

        self.coupon_code = coupon_code
        self.discount_amount = discount_amount

    def pay(self, now: Optional[datetime] = None) -> None:
        """Capture payment for the order."""
        if not self.status.can_be_paid():
            raise InvalidOrderStateError("pay", self.status.value, self.status.description)

        final_amount = self.calculate_final_amount()
        if not final_amount.is_positive():
            raise NonPositivePaymentError(final_amount)

        self._change_status(OrderStatus.PAID)
        self.paid_at = now or utc_now()
        self.add_domain_event(
            OrderPaid(
                order_id=self.id,
                customer_id=self.customer_id,
                paid_amount=final_amount,
                paid_at=self.paid_at,
            )
        )

    def cancel(self, requester_id: CustomerId, now: Optional[datetime] = None) -> None:
        """Cancel the order on behalf of ``requester_id``."""
        if self.customer_id != requester_id:
            raise OrderOwnershipError()
        if not self.status.can_be_cancelled():
            raise InvalidOrderStateError("cancel", self.status.value, self.status.description)
        if self._cancellation_window_closed(now or utc_now()):
            raise CancellationWindowExpiredError(CANCELLATION_WINDOW_HOURS)

        self._change_status(OrderStatus.CANCELLED)
        self.add_domain_event(
            OrderCancelled(
                order_id=self.id,
                customer_id=self.customer_id,
                order_items=tuple(replace(item) for item in self.items),
                coupon_code=self.coupon_code,
            )
        )

    def ship(self) -> None:
        """Hand the order over to shipping."""
        if not self.status.can_be_shipped():
            raise InvalidOrderStateError("ship", self.status.value, self.status.description)
        self._change_status(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        """Mark the order as delivered."""
        if not self.status.can_transition_to(OrderStatus.DELIVERED):
            raise InvalidOrderStateError("deliver", self.status.value, self.status.description)
        self._change_status(OrderStatus.DELIVERED)

    def _change_status(self, new_status: OrderStatus) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidOrderStateError(
                f"move to {new_status.value}", self.status.value, self.status.description
            )
        self.status = new_status

    def _cancellation_window_closed(self, now: datetime) -> bool:
        if self.paid_at is None:
            return False
        return now > self.paid_at + timedelta(hours=CANCELLATION_WINDOW_HOURS)

    # Queries

    def calculate_total_amount(self) -> Money:
        """Total before discount."""
        total = Money.zero()
        for item in self.items:
            total = total.add(item.calculate_total_price())
        return total

    def calculate_final_amount(self) -> Money:
        """Total after discount, never below zero."""
        total = self.calculate_total_amount()
        if not self.discount_amount.is_less_than(total):
            return Money.zero()
        return total.subtract(self.discount_amount)

    def is_cancellable(self, now: Optional[datetime] = None) -> bool:
        """
        Whether ``cancel`` would pass its status and time checks.

        Display only: the ownership check is not part of this answer.
        """
        if not self.status.can_be_cancelled():
            return False
        return not self._cancellation_window_closed(now or utc_now())

    def quantities_by_product(self) -> Dict[ProductId, int]:
        """Ordered quantity summed per product, in first-seen order."""
        quantities: Dict[ProductId, int] = {}
        for item in self.items:
            quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity.value
        return quantities

    @property
    def order_items(self) -> Tuple[OrderItem, ...]:
        """Read-only view of the order lines."""
        return tuple(self.items)

    @property
    def item_count(self) -> int:
        """Number of order lines."""
        return len(self.items)
