"""
Django ORM implementation of OrderRepository.
"""
import logging
from typing import List, Optional

from django.db import transaction

from shared.infrastructure.events import DomainEventPublisher
from ...domain.entities import Order, OrderItem
from ...domain.repositories import OrderRepository
from ...domain.value_objects import (
    CouponCode,
    CustomerId,
    Money,
    OrderStatus,
    ProductId,
    Quantity,
    ShippingAddress,
)
from ..models import OrderItemModel, OrderModel

logger = logging.getLogger(__name__)


class DjangoOrderRepository(OrderRepository):
    """
    Django ORM based order repository implementation.

    Lines are rewritten on every save. Events buffered on the order are
    released after the rows are written and handed to the publisher, which
    delivers them once the surrounding transaction commits.
    """

    def __init__(self, event_publisher: Optional[DomainEventPublisher] = None):
        self.event_publisher = event_publisher

    def save(self, order: Order) -> Order:
        """Save an order."""
        with transaction.atomic():
            model, created = OrderModel.objects.update_or_create(
                id=order.id,
                defaults={
                    'customer_id': order.customer_id.value,
                    'status': order.status.value,
                    'shipping_address': order.shipping_address.value,
                    'coupon_code': order.coupon_code.value if order.coupon_code else None,
                    'discount_amount': order.discount_amount.amount,
                    'ordered_at': order.ordered_at,
                    'paid_at': order.paid_at,
                },
            )
            model.items.all().delete()
            for position, item in enumerate(order.items):
                item_model = OrderItemModel.objects.create(
                    order=model,
                    position=position,
                    product_id=item.product_id.value,
                    product_name=item.product_name,
                    price=item.price.amount,
                    quantity=item.quantity.value,
                )
                item.id = item_model.id
            order.id = model.id

            events = order.pull_domain_events()
            if self.event_publisher is not None and events:
                self.event_publisher.publish(events)

        logger.debug("Order saved: order_id=%s, created=%s, events=%d", order.id, created, len(events))
        return order

    def find_by_id(self, order_id: int, for_update: bool = False) -> Optional[Order]:
        """Find an order by ID."""
        queryset = OrderModel.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        try:
            model = queryset.get(id=order_id)
        except OrderModel.DoesNotExist:
            return None
        return self._to_entity(model)

    def find_by_customer_id(self, customer_id: CustomerId) -> List[Order]:
        """Find all orders placed by a customer."""
        models = OrderModel.objects.filter(customer_id=customer_id.value).prefetch_related('items')
        return [self._to_entity(model) for model in models]

    def delete(self, order: Order) -> None:
        """Delete an order."""
        if order.id is not None:
            OrderModel.objects.filter(id=order.id).delete()

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            customer_id=CustomerId(value=model.customer_id),
            items=[self._item_to_entity(item) for item in model.items.all()],
            shipping_address=ShippingAddress(value=model.shipping_address),
            status=OrderStatus(model.status),
            coupon_code=CouponCode(value=model.coupon_code) if model.coupon_code else None,
            discount_amount=Money.of(model.discount_amount),
            ordered_at=model.ordered_at,
            paid_at=model.paid_at,
        )

    @staticmethod
    def _item_to_entity(model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            product_id=ProductId(value=model.product_id),
            product_name=model.product_name,
            price=Money.of(model.price),
            quantity=Quantity(value=model.quantity),
        )
