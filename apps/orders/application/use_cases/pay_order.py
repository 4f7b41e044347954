"""
Pay order use case.
"""
import logging
from dataclasses import dataclass

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from ...domain.repositories import OrderRepository
from ..dtos import OrderIdDTO
from ._loading import load_order

logger = logging.getLogger(__name__)


@dataclass
class PayOrderUseCase(UseCase[OrderIdDTO, int]):
    """Capture payment for a pending order."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderIdDTO) -> UseCaseResult[int]:
        logger.info("Paying order: order_id=%s", input_dto.order_id)

        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id, for_update=True)
            order.pay()
            self.order_repository.save(order)

        logger.info("Order paid: order_id=%s, paid_at=%s", order.id, order.paid_at)
        return UseCaseResult.ok(order.id)
