"""
Cancel order use case.
"""
import logging
from dataclasses import dataclass

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from ...domain.repositories import OrderRepository
from ...domain.value_objects import CustomerId
from ..dtos import CancelOrderDTO
from ..ports import CompensationScheduler, CouponClient, ProductClient
from ._compensation import Compensator
from ._loading import load_order

logger = logging.getLogger(__name__)


@dataclass
class CancelOrderUseCase(UseCase[CancelOrderDTO, int]):
    """
    Cancel an order on behalf of its customer.

    Stock and the coupon are given back only after the cancelled order has
    been saved. The cancellation stands even when a restoration fails; the
    failed restoration is retried through the compensation scheduler.
    """

    order_repository: OrderRepository
    product_client: ProductClient
    coupon_client: CouponClient
    compensation_scheduler: CompensationScheduler

    def execute(self, input_dto: CancelOrderDTO) -> UseCaseResult[int]:
        logger.info(
            "Cancelling order: order_id=%s, customer_id=%s",
            input_dto.order_id, input_dto.customer_id,
        )
        requester_id = CustomerId.of(input_dto.customer_id)

        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id, for_update=True)
            order.cancel(requester_id)
            self.order_repository.save(order)

        compensator = Compensator(self.product_client, self.coupon_client, self.compensation_scheduler)
        compensator.restore_stocks(order.quantities_by_product())
        if order.coupon_code is not None:
            compensator.restore_coupon(order.coupon_code)

        logger.info("Order cancelled: order_id=%s", order.id)
        return UseCaseResult.ok(order.id)
