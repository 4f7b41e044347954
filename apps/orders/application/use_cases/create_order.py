"""
Create order use case.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from ...domain.entities import Order, OrderItem
from ...domain.exceptions import (
    CouponRedemptionError,
    CustomerNotEligibleError,
    EmptyOrderError,
    InsufficientStockError,
    InvalidCouponError,
    ProductNotFoundError,
    ProductUnavailableError,
    StockDecreaseFailedError,
)
from ...domain.repositories import OrderRepository
from ...domain.services import OrderDomainService
from ...domain.value_objects import (
    CouponCode,
    CustomerId,
    Money,
    ProductId,
    Quantity,
    ShippingAddress,
)
from ..dtos import CreateOrderDTO, OrderItemRequestDTO
from ..ports import (
    CompensationScheduler,
    CouponClient,
    CustomerClient,
    ProductClient,
    ProductInfo,
)
from ._compensation import Compensator

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderUseCase(UseCase[CreateOrderDTO, int]):
    """
    Place a new order.

    Steps run in order and stop at the first failure: customer eligibility,
    product lookup, line validation, order limits, coupon, stock decrement,
    persistence. External side effects issued before a later failure are
    compensated (coupon and stock restored); a restoration that fails inline
    is handed to the compensation scheduler.
    """

    order_repository: OrderRepository
    customer_client: CustomerClient
    product_client: ProductClient
    coupon_client: CouponClient
    order_domain_service: OrderDomainService
    compensation_scheduler: CompensationScheduler

    def execute(self, input_dto: CreateOrderDTO) -> UseCaseResult[int]:
        logger.info("Creating order: customer_id=%s", input_dto.customer_id)

        customer_id = CustomerId.of(input_dto.customer_id)
        shipping_address = ShippingAddress.of(input_dto.shipping_address)
        coupon_code = self._parse_coupon(input_dto.coupon_code)

        self._validate_customer(customer_id)
        order_items = self._create_order_items(input_dto.items)
        self.order_domain_service.validate_order(self._sum_totals(order_items), len(order_items))
        order = Order.create(customer_id, order_items, shipping_address)

        if coupon_code is not None:
            self._apply_coupon(order, coupon_code)

        stock_quantities = order.quantities_by_product()
        try:
            decreased = self.product_client.decrease_stocks(stock_quantities)
        except Exception:
            # Whether the catalog applied the decrement is unknown; only the coupon goes back.
            self._compensate(coupon_code=coupon_code)
            raise
        if not decreased:
            self._compensate(coupon_code=coupon_code)
            raise StockDecreaseFailedError()

        try:
            with transaction.atomic():
                saved_order = self.order_repository.save(order)
        except Exception:
            logger.exception("Persisting order failed, compensating: customer_id=%s", customer_id)
            self._compensate(stock_quantities, coupon_code)
            raise

        logger.info("Order created: order_id=%s", saved_order.id)
        return UseCaseResult.ok(saved_order.id)

    @staticmethod
    def _parse_coupon(raw_code: Optional[str]) -> Optional[CouponCode]:
        if raw_code is None or not raw_code.strip():
            return None
        return CouponCode.of(raw_code)

    def _validate_customer(self, customer_id: CustomerId) -> None:
        if not self.customer_client.can_order(customer_id):
            raise CustomerNotEligibleError(customer_id.value)

    def _create_order_items(self, item_requests: List[OrderItemRequestDTO]) -> List[OrderItem]:
        if not item_requests:
            raise EmptyOrderError()
        product_ids = list(dict.fromkeys(ProductId.of(request.product_id) for request in item_requests))
        products = self.product_client.get_products(product_ids)
        return [self._create_order_item(request, products) for request in item_requests]

    @staticmethod
    def _sum_totals(order_items: List[OrderItem]) -> Money:
        total = Money.zero()
        for item in order_items:
            total = total.add(item.calculate_total_price())
        return total

    @staticmethod
    def _create_order_item(
        request: OrderItemRequestDTO,
        products: Dict[ProductId, ProductInfo],
    ) -> OrderItem:
        product_id = ProductId.of(request.product_id)
        quantity = Quantity.of(request.quantity)
        product = products.get(product_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)
        if not product.available:
            raise ProductUnavailableError(product.name)
        if product.stock_quantity < quantity.value:
            raise InsufficientStockError(
                product_id=str(product_id),
                requested=quantity.value,
                available=product.stock_quantity,
                product_name=product.name,
            )
        return OrderItem(
            product_id=product_id,
            product_name=product.name,
            price=product.unit_price,
            quantity=quantity,
        )

    def _apply_coupon(self, order: Order, coupon_code: CouponCode) -> None:
        discount: Optional[Money] = self.coupon_client.calculate_discount(
            coupon_code, order.calculate_total_amount()
        )
        if discount is None:
            raise InvalidCouponError(coupon_code.value)

        order.apply_coupon(coupon_code, discount)

        try:
            used = self.coupon_client.use_coupon(coupon_code, order.customer_id)
        except Exception:
            self._compensate(coupon_code=coupon_code)
            raise
        if not used:
            raise CouponRedemptionError(coupon_code.value)

    def _compensate(
        self,
        stock_quantities: Optional[Dict[ProductId, int]] = None,
        coupon_code: Optional[CouponCode] = None,
    ) -> None:
        compensator = Compensator(self.product_client, self.coupon_client, self.compensation_scheduler)
        if stock_quantities:
            compensator.restore_stocks(stock_quantities)
        if coupon_code is not None:
            compensator.restore_coupon(coupon_code)
