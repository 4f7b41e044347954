"""
Wiring of the order use cases to their infrastructure.
"""
from typing import Any, Mapping

from django.conf import settings

from shared.infrastructure.events import DomainEventPublisher
from shared.infrastructure.http import JsonHttpClient
from ..application.event_handlers import OrderEventHandlers
from ..application.use_cases import (
    CalculateDiscountUseCase,
    CancelOrderUseCase,
    CreateOrderUseCase,
    GetOrderPriorityUseCase,
    GetOrderUseCase,
    PayOrderUseCase,
    ShipOrderUseCase,
)
from ..domain.services import OrderDomainService, OrderPolicy
from .external import (
    HttpCouponClient,
    HttpCustomerClient,
    HttpProductClient,
    LoggingAnalyticsClient,
    LoggingNotificationClient,
)
from .compensation import CeleryCompensationScheduler
from .repositories import DjangoOrderRepository
from .tasks import dispatch_order_event


def _service_config(name: str) -> Mapping[str, Any]:
    services = getattr(settings, 'EXTERNAL_SERVICES', {})
    if name not in services:
        raise KeyError(f"EXTERNAL_SERVICES['{name}'] is not configured")
    return services[name]


def build_http_client(name: str) -> JsonHttpClient:
    config = _service_config(name)
    return JsonHttpClient(
        service_name=name,
        base_url=config['base_url'],
        timeout=(float(config.get('connect_timeout', 3.05)), float(config.get('read_timeout', 15))),
    )


def build_product_client() -> HttpProductClient:
    return HttpProductClient(build_http_client('product'))


def build_coupon_client() -> HttpCouponClient:
    return HttpCouponClient(build_http_client('coupon'))


def build_compensation_scheduler() -> CeleryCompensationScheduler:
    return CeleryCompensationScheduler()


def build_order_repository() -> DjangoOrderRepository:
    return DjangoOrderRepository(event_publisher=DomainEventPublisher(dispatch_order_event))


def build_domain_service() -> OrderDomainService:
    return OrderDomainService(OrderPolicy.from_mapping(getattr(settings, 'ORDER_POLICY', None)))


def build_event_handlers() -> OrderEventHandlers:
    return OrderEventHandlers(
        notification_client=LoggingNotificationClient(),
        analytics_client=LoggingAnalyticsClient(),
    )


def create_order_use_case() -> CreateOrderUseCase:
    return CreateOrderUseCase(
        order_repository=build_order_repository(),
        customer_client=HttpCustomerClient(build_http_client('customer')),
        product_client=build_product_client(),
        coupon_client=build_coupon_client(),
        order_domain_service=build_domain_service(),
        compensation_scheduler=build_compensation_scheduler(),
    )


def pay_order_use_case() -> PayOrderUseCase:
    return PayOrderUseCase(order_repository=build_order_repository())


def cancel_order_use_case() -> CancelOrderUseCase:
    return CancelOrderUseCase(
        order_repository=build_order_repository(),
        product_client=build_product_client(),
        coupon_client=build_coupon_client(),
        compensation_scheduler=build_compensation_scheduler(),
    )


def ship_order_use_case() -> ShipOrderUseCase:
    return ShipOrderUseCase(order_repository=build_order_repository())


def get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase(order_repository=build_order_repository())


def get_order_priority_use_case() -> GetOrderPriorityUseCase:
    return GetOrderPriorityUseCase(
        order_repository=build_order_repository(),
        order_domain_service=build_domain_service(),
    )


def calculate_discount_use_case() -> CalculateDiscountUseCase:
    return CalculateDiscountUseCase(
        order_repository=build_order_repository(),
        order_domain_service=build_domain_service(),
    )
