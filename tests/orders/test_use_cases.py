"""
Tests for the order use cases against in-memory ports.
"""
from datetime import timedelta
from decimal import Decimal

import pytest

from apps.orders.application.dtos import (
    CancelOrderDTO,
    CreateOrderDTO,
    OrderIdDTO,
    OrderItemRequestDTO,
)
from apps.orders.application.use_cases import (
    CalculateDiscountUseCase,
    CancelOrderUseCase,
    CreateOrderUseCase,
    GetOrderPriorityUseCase,
    GetOrderUseCase,
    PayOrderUseCase,
    ShipOrderUseCase,
)
from apps.orders.domain.events import OrderCancelled, OrderCreated, OrderPaid
from apps.orders.domain.exceptions import (
    CouponRedemptionError,
    CustomerNotEligibleError,
    EmptyOrderError,
    InsufficientStockError,
    InvalidCouponCodeError,
    InvalidCouponError,
    InvalidOrderStateError,
    OrderNotFoundError,
    OrderOwnershipError,
    OrderPolicyViolationError,
    ProductNotFoundError,
    ProductUnavailableError,
    StockDecreaseFailedError,
)
from apps.orders.domain.services import OrderDomainService
from apps.orders.domain.value_objects import CouponCode, Money, OrderStatus, ProductId
from shared.domain import InvalidOperationError, ValidationError, utc_now
from shared.domain.exceptions import ExternalServiceError, ExternalServiceTimeoutError
from tests.orders.fakes import (
    FailingOrderRepository,
    FakeCouponClient,
    FakeCustomerClient,
    FakeProductClient,
    InMemoryOrderRepository,
    RecordingCompensationScheduler,
    product,
)

pytestmark = pytest.mark.django_db

ADDRESS = "123 Teheran-ro, Gangnam-gu, Seoul"


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def customers():
    return FakeCustomerClient()


@pytest.fixture
def products():
    return FakeProductClient([
        product(1, price='30000', stock=10),
        product(2, price='15000', stock=1),
        product(3, price='5000', available=False, name='Retired mug'),
    ])


@pytest.fixture
def coupons():
    return FakeCouponClient(discount=Money.of(5000))


@pytest.fixture
def scheduler():
    return RecordingCompensationScheduler()


@pytest.fixture
def create_order(repository, customers, products, coupons, scheduler):
    return CreateOrderUseCase(
        order_repository=repository,
        customer_client=customers,
        product_client=products,
        coupon_client=coupons,
        order_domain_service=OrderDomainService(),
        compensation_scheduler=scheduler,
    )


def create_dto(*lines, coupon_code=None, customer_id=1):
    return CreateOrderDTO(
        customer_id=customer_id,
        items=[OrderItemRequestDTO(product_id=pid, quantity=qty) for pid, qty in lines],
        shipping_address=ADDRESS,
        coupon_code=coupon_code,
    )


def place_order(create_order, *lines, **kwargs) -> int:
    return create_order.execute(create_dto(*(lines or ((1, 2),)), **kwargs)).data


class TestCreateOrder:

    def test_creates_order_and_decrements_stock_once(self, create_order, repository, products):
        result = create_order.execute(create_dto((1, 2), (2, 1)))

        assert result.success
        order = repository.find_by_id(result.data)
        assert order.status == OrderStatus.PENDING
        assert order.calculate_total_amount() == Money.of(75000)
        assert [item.product_name for item in order.items] == ['Product 1', 'Product 2']
        assert products.decrease_calls == [{ProductId.of(1): 2, ProductId.of(2): 1}]
        assert repository.save_calls == 1

    def test_products_are_looked_up_in_one_batch(self, create_order, products):
        create_order.execute(create_dto((1, 1), (2, 1), (1, 1)))
        assert products.lookups == [[ProductId.of(1), ProductId.of(2)]]
        assert products.decrease_calls == [{ProductId.of(1): 2, ProductId.of(2): 1}]

    def test_releases_created_event_on_save(self, create_order, repository):
        create_order.execute(create_dto((1, 1)))
        [event] = repository.released_events
        assert isinstance(event, OrderCreated)
        assert event.total_amount == Money.of(30000)

    def test_ineligible_customer(self, create_order, customers, products):
        customers.allowed = False
        with pytest.raises(CustomerNotEligibleError):
            create_order.execute(create_dto((1, 1)))
        assert products.lookups == []

    def test_insufficient_stock_issues_no_decrement(self, create_order, products, repository):
        with pytest.raises(InsufficientStockError) as exc_info:
            create_order.execute(create_dto((2, 2)))

        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.requested == 2
        assert exc_info.value.available == 1
        assert products.decrease_calls == []
        assert repository.orders == {}

    def test_unknown_product(self, create_order, products):
        with pytest.raises(ProductNotFoundError):
            create_order.execute(create_dto((42, 1)))
        assert products.decrease_calls == []

    def test_unavailable_product(self, create_order):
        with pytest.raises(ProductUnavailableError, match="Retired mug"):
            create_order.execute(create_dto((3, 1)))

    def test_empty_items(self, create_order, products):
        with pytest.raises(EmptyOrderError):
            create_order.execute(create_dto())
        assert products.lookups == []

    def test_order_limits_are_enforced(self, create_order, products):
        products.products[ProductId.of(9)] = product(9, price='500')
        with pytest.raises(OrderPolicyViolationError):
            create_order.execute(create_dto((9, 1)))
        assert products.decrease_calls == []

    def test_invalid_shipping_address(self, create_order):
        dto = create_dto((1, 1))
        dto.shipping_address = "short"
        with pytest.raises(ValidationError):
            create_order.execute(dto)

    def test_coupon_is_applied_and_consumed(self, create_order, repository, coupons):
        order_id = place_order(create_order, (1, 2), coupon_code='WELCOME10')

        order = repository.find_by_id(order_id)
        assert order.coupon_code == CouponCode.of('WELCOME10')
        assert order.calculate_final_amount() == Money.of(55000)
        assert coupons.used == [CouponCode.of('WELCOME10')]

    @pytest.mark.parametrize('blank', ['', '   ', None])
    def test_blank_coupon_is_ignored(self, create_order, coupons, blank):
        place_order(create_order, (1, 1), coupon_code=blank)
        assert coupons.used == []

    def test_malformed_coupon(self, create_order, products):
        with pytest.raises(InvalidCouponCodeError):
            create_order.execute(create_dto((1, 1), coupon_code='bad'))
        assert products.lookups == []

    def test_rejected_coupon(self, create_order, coupons, products):
        coupons.discount = None
        with pytest.raises(InvalidCouponError):
            create_order.execute(create_dto((1, 1), coupon_code='EXPIRED1'))
        assert coupons.used == []
        assert products.decrease_calls == []

    def test_coupon_redemption_refused(self, create_order, coupons, products):
        coupons.use_result = False
        with pytest.raises(CouponRedemptionError):
            create_order.execute(create_dto((1, 1), coupon_code='WELCOME10'))
        assert products.decrease_calls == []

    def test_stock_decrease_refused_restores_coupon(self, create_order, coupons, products, repository):
        products.decrease_result = False
        with pytest.raises(StockDecreaseFailedError) as exc_info:
            create_order.execute(create_dto((1, 1), coupon_code='WELCOME10'))

        assert isinstance(exc_info.value, InvalidOperationError)
        assert coupons.restored == [CouponCode.of('WELCOME10')]
        assert repository.orders == {}

    def test_stock_service_failure_restores_coupon(self, create_order, coupons, products, repository, scheduler):
        products.decrease_error = ExternalServiceTimeoutError('product', 2)
        with pytest.raises(ExternalServiceTimeoutError):
            create_order.execute(create_dto((1, 1), coupon_code='WELCOME10'))

        assert coupons.used == [CouponCode.of('WELCOME10')]
        assert coupons.restored == [CouponCode.of('WELCOME10')]
        assert products.restore_calls == []
        assert scheduler.coupon_restores == []
        assert repository.orders == {}

    def test_coupon_service_failure_restores_coupon(self, create_order, coupons, products):
        coupons.use_error = ExternalServiceError('coupon', 'connection refused')
        with pytest.raises(ExternalServiceError):
            create_order.execute(create_dto((1, 1), coupon_code='WELCOME10'))

        assert coupons.restored == [CouponCode.of('WELCOME10')]
        assert products.decrease_calls == []

    def test_failed_coupon_restore_is_scheduled(self, create_order, coupons, products, scheduler):
        products.decrease_result = False
        coupons.restore_error = ExternalServiceTimeoutError('coupon', 2)
        with pytest.raises(StockDecreaseFailedError):
            create_order.execute(create_dto((1, 1), coupon_code='WELCOME10'))

        assert scheduler.coupon_restores == [CouponCode.of('WELCOME10')]

    def test_persistence_failure_compensates(self, customers, products, coupons, scheduler):
        use_case = CreateOrderUseCase(
            order_repository=FailingOrderRepository(),
            customer_client=customers,
            product_client=products,
            coupon_client=coupons,
            order_domain_service=OrderDomainService(),
            compensation_scheduler=scheduler,
        )
        with pytest.raises(RuntimeError):
            use_case.execute(create_dto((1, 3), coupon_code='WELCOME10'))

        assert products.restore_calls == [{ProductId.of(1): 3}]
        assert coupons.restored == [CouponCode.of('WELCOME10')]

    def test_failed_stock_restore_does_not_skip_coupon(self, customers, products, coupons, scheduler):
        products.restore_error = ExternalServiceTimeoutError('product', 2)
        use_case = CreateOrderUseCase(
            order_repository=FailingOrderRepository(),
            customer_client=customers,
            product_client=products,
            coupon_client=coupons,
            order_domain_service=OrderDomainService(),
            compensation_scheduler=scheduler,
        )
        with pytest.raises(RuntimeError):
            use_case.execute(create_dto((1, 3), coupon_code='WELCOME10'))

        assert scheduler.stock_restores == [{ProductId.of(1): 3}]
        assert coupons.restored == [CouponCode.of('WELCOME10')]


class TestPayOrder:

    def test_pays_order(self, create_order, repository):
        order_id = place_order(create_order)
        repository.released_events.clear()

        result = PayOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=order_id))

        assert result.data == order_id
        order = repository.find_by_id(order_id)
        assert order.status == OrderStatus.PAID
        assert order.paid_at is not None
        [event] = repository.released_events
        assert isinstance(event, OrderPaid)
        assert event.order_id == order_id

    def test_paying_twice_conflicts(self, create_order, repository):
        order_id = place_order(create_order)
        use_case = PayOrderUseCase(order_repository=repository)
        use_case.execute(OrderIdDTO(order_id=order_id))
        with pytest.raises(InvalidOrderStateError):
            use_case.execute(OrderIdDTO(order_id=order_id))

    def test_unknown_order(self, repository):
        with pytest.raises(OrderNotFoundError):
            PayOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=404))


class TestCancelOrder:

    @pytest.fixture
    def cancel_order(self, repository, products, coupons, scheduler):
        return CancelOrderUseCase(
            order_repository=repository,
            product_client=products,
            coupon_client=coupons,
            compensation_scheduler=scheduler,
        )

    def test_cancel_restores_stock_and_coupon(self, create_order, cancel_order, repository, products, coupons):
        order_id = place_order(create_order, (1, 2), (2, 1), coupon_code='WELCOME10')
        repository.released_events.clear()

        cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=1))

        assert repository.find_by_id(order_id).status == OrderStatus.CANCELLED
        assert products.restore_calls == [{ProductId.of(1): 2, ProductId.of(2): 1}]
        assert coupons.restored == [CouponCode.of('WELCOME10')]
        [event] = repository.released_events
        assert isinstance(event, OrderCancelled)

    def test_failed_stock_restore_keeps_cancellation(
        self, create_order, cancel_order, repository, products, coupons, scheduler
    ):
        order_id = place_order(create_order, (1, 2), coupon_code='WELCOME10')
        products.restore_error = ExternalServiceTimeoutError('product', 2)

        result = cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=1))

        assert result.data == order_id
        assert repository.find_by_id(order_id).status == OrderStatus.CANCELLED
        assert scheduler.stock_restores == [{ProductId.of(1): 2}]
        assert coupons.restored == [CouponCode.of('WELCOME10')]

    def test_failed_coupon_restore_is_scheduled(self, create_order, cancel_order, products, coupons, scheduler):
        order_id = place_order(create_order, (1, 2), coupon_code='WELCOME10')
        coupons.restore_error = ExternalServiceError('coupon', 'connection refused')

        cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=1))

        assert products.restore_calls == [{ProductId.of(1): 2}]
        assert scheduler.coupon_restores == [CouponCode.of('WELCOME10')]
        assert scheduler.stock_restores == []

    def test_cancel_without_coupon(self, create_order, cancel_order, coupons):
        order_id = place_order(create_order)
        cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=1))
        assert coupons.restored == []

    def test_other_customer_cannot_cancel(self, create_order, cancel_order, repository, products):
        order_id = place_order(create_order)
        with pytest.raises(OrderOwnershipError):
            cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=2))
        assert repository.find_by_id(order_id).status == OrderStatus.PENDING
        assert products.restore_calls == []

    def test_window_expired(self, create_order, cancel_order, repository, products):
        order_id = place_order(create_order)
        order = repository.find_by_id(order_id)
        order.pay(now=utc_now() - timedelta(hours=25))
        repository.save(order)

        with pytest.raises(InvalidOperationError):
            cancel_order.execute(CancelOrderDTO(order_id=order_id, customer_id=1))
        assert products.restore_calls == []

    def test_unknown_order(self, cancel_order):
        with pytest.raises(OrderNotFoundError):
            cancel_order.execute(CancelOrderDTO(order_id=404, customer_id=1))


class TestShipOrder:

    def test_ships_paid_order(self, create_order, repository):
        order_id = place_order(create_order)
        PayOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=order_id))
        repository.released_events.clear()

        ShipOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=order_id))

        assert repository.find_by_id(order_id).status == OrderStatus.SHIPPED
        assert repository.released_events == []

    def test_pending_order_cannot_ship(self, create_order, repository):
        order_id = place_order(create_order)
        with pytest.raises(InvalidOrderStateError):
            ShipOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=order_id))


class TestQueries:

    def test_get_order(self, create_order, repository):
        order_id = place_order(create_order, (1, 2), coupon_code='WELCOME10')

        dto = GetOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=order_id)).data

        assert dto.id == order_id
        assert dto.customer_id == 1
        assert dto.address == ADDRESS
        assert dto.status == 'PENDING'
        assert dto.coupon_code == 'WELCOME10'
        assert dto.total_amount == Decimal('60000')
        assert dto.discount_amount == Decimal('5000')
        assert dto.final_amount == Decimal('55000')
        assert dto.cancellable is True
        assert dto.items[0].total_price == Decimal('60000')

    def test_get_unknown_order(self, repository):
        with pytest.raises(OrderNotFoundError):
            GetOrderUseCase(order_repository=repository).execute(OrderIdDTO(order_id=1))

    def test_priority(self, create_order, repository):
        order_id = place_order(create_order, (1, 2))
        use_case = GetOrderPriorityUseCase(order_repository=repository, order_domain_service=OrderDomainService())

        dto = use_case.execute(OrderIdDTO(order_id=order_id)).data

        assert (dto.order_id, dto.priority, dto.level) == (order_id, 'MEDIUM', 2)
        assert dto.description == 'Medium'

    def test_discount_counts_the_order_once(self, create_order, repository):
        first_id = place_order(create_order, (1, 1))
        second_id = place_order(create_order, (1, 1))
        use_case = CalculateDiscountUseCase(order_repository=repository, order_domain_service=OrderDomainService())

        dto = use_case.execute(OrderIdDTO(order_id=second_id)).data

        # history 30000 + current 30000 reaches the premium tier
        assert dto.order_id == second_id
        assert dto.total_amount == Decimal('30000')
        assert dto.discount_amount == Decimal('1500.00')
        assert first_id != second_id
