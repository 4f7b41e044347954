"""
Order query use cases.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories import OrderRepository
from ...domain.services import OrderDomainService
from ..dtos import DiscountDTO, OrderDTO, OrderIdDTO, PriorityDTO
from ._loading import load_order

logger = logging.getLogger(__name__)


@dataclass
class GetOrderUseCase(UseCase[OrderIdDTO, OrderDTO]):
    """Read view of a single order."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderIdDTO) -> UseCaseResult[OrderDTO]:
        order = load_order(self.order_repository, input_dto.order_id)
        return UseCaseResult.ok(OrderDTO.from_entity(order))


@dataclass
class GetOrderPriorityUseCase(UseCase[OrderIdDTO, PriorityDTO]):
    """Priority of an order, based on its total before discount."""

    order_repository: OrderRepository
    order_domain_service: OrderDomainService

    def execute(self, input_dto: OrderIdDTO) -> UseCaseResult[PriorityDTO]:
        order = load_order(self.order_repository, input_dto.order_id)
        priority = self.order_domain_service.determine_priority(order.calculate_total_amount())
        return UseCaseResult.ok(PriorityDTO.from_priority(order.id, priority))


@dataclass
class CalculateDiscountUseCase(UseCase[OrderIdDTO, DiscountDTO]):
    """
    Loyalty discount the customer would get on an order.

    The history is the customer's other orders; the order being evaluated is
    counted once, as the current order amount.
    """

    order_repository: OrderRepository
    order_domain_service: OrderDomainService

    def execute(self, input_dto: OrderIdDTO) -> UseCaseResult[DiscountDTO]:
        order = load_order(self.order_repository, input_dto.order_id)
        history = [
            other for other in self.order_repository.find_by_customer_id(order.customer_id)
            if other.id != order.id
        ]
        total = order.calculate_total_amount()
        discount = self.order_domain_service.calculate_discount(order.customer_id, total, history)
        logger.debug("Discount for order %s over %d previous orders", order.id, len(history))
        return UseCaseResult.ok(
            DiscountDTO(order_id=order.id, discount_amount=discount.amount, total_amount=total.amount)
        )
