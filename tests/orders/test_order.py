"""
Tests for the Order aggregate.
"""
from datetime import datetime, timedelta, timezone

import pytest

from apps.orders.domain.entities import CANCELLATION_WINDOW_HOURS, Order
from apps.orders.domain.events import OrderCancelled, OrderCreated, OrderPaid
from apps.orders.domain.exceptions import (
    CancellationWindowExpiredError,
    DiscountExceedsTotalError,
    EmptyOrderError,
    InvalidMoneyError,
    InvalidOrderItemError,
    InvalidOrderStateError,
    NonPositivePaymentError,
    OrderOwnershipError,
)
from apps.orders.domain.value_objects import (
    CouponCode,
    CustomerId,
    Money,
    OrderStatus,
    ProductId,
    Quantity,
)
from shared.domain import InvalidOperationError, ValidationError
from tests.orders.fakes import make_item

PAID_AT = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def order(order_factory):
    return order_factory()


@pytest.fixture
def paid_order(order):
    order.id = 10
    order.pay(now=PAID_AT)
    order.pull_domain_events()
    return order


class TestOrderItem:

    def test_total_price(self):
        item = make_item(price='1000000', quantity=2)
        assert item.calculate_total_price() == Money.of(2000000)

    @pytest.mark.parametrize('price', ['0', '0.00'])
    def test_price_must_be_positive(self, price):
        with pytest.raises(InvalidOrderItemError):
            make_item(price=price)

    def test_name_is_required(self):
        with pytest.raises(InvalidOrderItemError):
            make_item(name='   ')

    def test_change_quantity(self):
        item = make_item(quantity=1)
        item.change_quantity(Quantity.of(3))
        assert item.quantity == Quantity.of(3)
        with pytest.raises(InvalidOrderItemError):
            item.change_quantity(None)

    def test_is_same_product(self):
        assert make_item(product_id=5).is_same_product(ProductId.of(5))
        assert not make_item(product_id=5).is_same_product(ProductId.of(6))


class TestCreate:

    def test_empty_items_fail(self, customer_id, shipping_address):
        with pytest.raises(EmptyOrderError):
            Order.create(customer_id, [], shipping_address)

    def test_empty_items_is_an_invalid_argument(self, customer_id, shipping_address):
        with pytest.raises(ValidationError):
            Order.create(customer_id, [], shipping_address)

    def test_new_order_is_pending(self, order):
        assert order.status == OrderStatus.PENDING
        assert order.discount_amount == Money.zero()
        assert order.coupon_code is None
        assert order.ordered_at is not None
        assert order.paid_at is None
        assert order.id is None

    def test_buffers_created_event_with_total(self, order, customer_id):
        events = order.domain_events
        assert len(events) == 1
        assert isinstance(events[0], OrderCreated)
        assert events[0].customer_id == customer_id
        assert events[0].total_amount == Money.of(2050000)

    def test_total_amount(self, order):
        assert order.calculate_total_amount() == Money.of(2050000)
        assert order.item_count == 2

    def test_order_items_view_is_immutable(self, order):
        assert isinstance(order.order_items, tuple)
        assert len(order.order_items) == 2

    def test_quantities_are_summed_per_product(self, order_factory):
        order = order_factory(lines=((1, '100', 2), (2, '50', 1), (1, '100', 3)))
        assert order.quantities_by_product() == {ProductId.of(1): 5, ProductId.of(2): 1}


class TestDomainEventBuffer:

    def test_pull_returns_and_clears(self, order):
        events = order.pull_domain_events()
        assert len(events) == 1
        assert order.pull_domain_events() == []
        assert order.domain_events == []

    def test_failed_operation_buffers_nothing(self, order):
        order.pull_domain_events()
        with pytest.raises(InvalidOrderStateError):
            order.ship()
        assert order.domain_events == []


class TestApplyCoupon:

    def test_discount_reduces_final_amount(self, order):
        order.apply_coupon(CouponCode.of('SAVE50000'), Money.of(50000))
        assert order.calculate_final_amount() == Money.of(2000000)
        assert order.coupon_code == CouponCode.of('SAVE50000')

    def test_discount_above_total_fails(self, order):
        with pytest.raises(DiscountExceedsTotalError):
            order.apply_coupon(CouponCode.of('BIGSALE'), Money.of(2050001))
        assert order.coupon_code is None

    def test_discount_above_total_is_a_state_conflict(self, order):
        with pytest.raises(InvalidOperationError):
            order.apply_coupon(CouponCode.of('BIGSALE'), Money.of(3000000))

    def test_missing_discount_fails(self, order):
        with pytest.raises(InvalidMoneyError):
            order.apply_coupon(CouponCode.of('SAVE10'), None)

    def test_second_coupon_replaces_first(self, order):
        order.apply_coupon(CouponCode.of('FIRST1'), Money.of(1000))
        order.apply_coupon(CouponCode.of('SECOND'), Money.of(2000))
        assert order.coupon_code == CouponCode.of('SECOND')
        assert order.discount_amount == Money.of(2000)

    def test_only_pending_orders_take_coupons(self, paid_order):
        with pytest.raises(InvalidOrderStateError):
            paid_order.apply_coupon(CouponCode.of('SAVE10'), Money.of(10))

    def test_discount_equal_to_total_leaves_zero(self, order):
        order.apply_coupon(CouponCode.of('FREEBIE'), Money.of(2050000))
        assert order.calculate_final_amount() == Money.zero()


class TestPay:

    def test_pay_pending_order(self, order, customer_id):
        order.id = 10
        order.pull_domain_events()
        order.pay(now=PAID_AT)

        assert order.status == OrderStatus.PAID
        assert order.paid_at == PAID_AT
        [event] = order.pull_domain_events()
        assert isinstance(event, OrderPaid)
        assert event.order_id == 10
        assert event.customer_id == customer_id
        assert event.paid_amount == Money.of(2050000)
        assert event.paid_at == PAID_AT

    def test_paid_amount_is_after_discount(self, order):
        order.apply_coupon(CouponCode.of('SAVE50000'), Money.of(50000))
        order.pull_domain_events()
        order.pay()
        [event] = order.pull_domain_events()
        assert event.paid_amount == Money.of(2000000)

    def test_paying_twice_fails(self, paid_order):
        with pytest.raises(InvalidOrderStateError, match="paid"):
            paid_order.pay()

    def test_zero_final_amount_cannot_be_paid(self, order):
        order.apply_coupon(CouponCode.of('FREEBIE'), Money.of(2050000))
        with pytest.raises(NonPositivePaymentError):
            order.pay()
        assert order.status == OrderStatus.PENDING


class TestCancel:

    def test_owner_cancels_before_payment(self, order, customer_id):
        order.id = 10
        order.pull_domain_events()
        order.cancel(customer_id)

        assert order.status == OrderStatus.CANCELLED
        [event] = order.pull_domain_events()
        assert isinstance(event, OrderCancelled)
        assert event.order_id == 10
        assert [(i.product_id, i.quantity) for i in event.order_items] == [
            (i.product_id, i.quantity) for i in order.order_items
        ]
        assert event.coupon_code is None

    def test_cancelled_event_holds_copies_of_items(self, order, customer_id):
        order.cancel(customer_id)
        event = order.pull_domain_events()[-1]

        order.items[0].change_quantity(Quantity.of(9))

        assert event.order_items[0] is not order.items[0]
        assert event.order_items[0].quantity == Quantity.of(2)

    def test_cancel_keeps_coupon_and_discount(self, order, customer_id):
        order.apply_coupon(CouponCode.of('SAVE50000'), Money.of(50000))
        order.cancel(customer_id)
        assert order.discount_amount == Money.of(50000)
        assert order.domain_events[-1].coupon_code == CouponCode.of('SAVE50000')

    @pytest.mark.parametrize('prepare', ['pending', 'paid', 'shipped', 'cancelled'])
    def test_other_customer_cannot_cancel(self, order, customer_id, prepare):
        if prepare in ('paid', 'shipped'):
            order.pay(now=PAID_AT)
        if prepare == 'shipped':
            order.ship()
        if prepare == 'cancelled':
            order.cancel(customer_id)
        with pytest.raises(OrderOwnershipError):
            order.cancel(CustomerId.of(999))

    def test_shipped_order_cannot_be_cancelled(self, paid_order, customer_id):
        paid_order.ship()
        with pytest.raises(InvalidOrderStateError, match="being shipped"):
            paid_order.cancel(customer_id)

    def test_cancelled_order_cannot_be_cancelled_again(self, order, customer_id):
        order.cancel(customer_id)
        with pytest.raises(InvalidOrderStateError):
            order.cancel(customer_id)

    @pytest.mark.parametrize('elapsed', [
        timedelta(hours=1),
        timedelta(hours=CANCELLATION_WINDOW_HOURS) - timedelta(seconds=1),
        timedelta(hours=CANCELLATION_WINDOW_HOURS),
    ])
    def test_paid_order_cancellable_within_window(self, paid_order, customer_id, elapsed):
        paid_order.cancel(customer_id, now=PAID_AT + elapsed)
        assert paid_order.status == OrderStatus.CANCELLED

    def test_paid_order_not_cancellable_after_window(self, paid_order, customer_id):
        late = PAID_AT + timedelta(hours=CANCELLATION_WINDOW_HOURS, microseconds=1)
        with pytest.raises(CancellationWindowExpiredError):
            paid_order.cancel(customer_id, now=late)
        assert paid_order.status == OrderStatus.PAID
        assert paid_order.domain_events == []

    def test_is_cancellable(self, paid_order):
        assert paid_order.is_cancellable(now=PAID_AT + timedelta(hours=24))
        assert not paid_order.is_cancellable(now=PAID_AT + timedelta(hours=25))
        paid_order.ship()
        assert not paid_order.is_cancellable(now=PAID_AT)


class TestShipAndDeliver:

    def test_ship_paid_order_emits_no_event(self, paid_order):
        paid_order.ship()
        assert paid_order.status == OrderStatus.SHIPPED
        assert paid_order.domain_events == []

    def test_pending_order_cannot_ship(self, order):
        with pytest.raises(InvalidOrderStateError, match="awaiting payment"):
            order.ship()

    def test_deliver_shipped_order(self, paid_order):
        paid_order.ship()
        paid_order.deliver()
        assert paid_order.status == OrderStatus.DELIVERED
        assert paid_order.status.is_terminal

    def test_deliver_requires_shipping(self, paid_order):
        with pytest.raises(InvalidOrderStateError):
            paid_order.deliver()


class TestIdentity:

    def test_unsaved_orders_are_only_equal_to_themselves(self, order_factory):
        first, second = order_factory(), order_factory()
        assert first == first
        assert first != second

    def test_saved_orders_compare_by_id(self, order_factory):
        first, second = order_factory(), order_factory()
        first.id = second.id = 3
        assert first == second
