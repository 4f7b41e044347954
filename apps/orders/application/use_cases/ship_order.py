"""
Ship order use case.
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
class ShipOrderUseCase(UseCase[OrderIdDTO, int]):
    """Hand a paid order over to shipping."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderIdDTO) -> UseCaseResult[int]:
        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id, for_update=True)
            order.ship()
            self.order_repository.save(order)

        logger.info("Order shipped: order_id=%s", order.id)
        return UseCaseResult.ok(order.id)
