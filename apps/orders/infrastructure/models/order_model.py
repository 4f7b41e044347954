"""
Order Django ORM models.
"""
from django.db import models

from ...domain.value_objects import OrderStatus


class OrderModel(models.Model):
    """Order model."""

    STATUS_CHOICES = [(status.value, status.description) for status in OrderStatus]

    id = models.BigAutoField(primary_key=True)
    customer_id = models.BigIntegerField(db_index=True)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=OrderStatus.PENDING.value, db_index=True
    )
    shipping_address = models.CharField(max_length=200)
    coupon_code = models.CharField(max_length=20, null=True, blank=True)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    ordered_at = models.DateTimeField(null=True, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'orders'
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return f"Order #{self.pk} ({self.status})"


class OrderItemModel(models.Model):
    """Order line, keyed by its position within the order."""

    id = models.BigAutoField(primary_key=True)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='items')
    position = models.PositiveSmallIntegerField()
    product_id = models.BigIntegerField()
    product_name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()

    class Meta:
        app_label = 'orders'
        db_table = 'order_items'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(fields=['order', 'position'], name='uniq_order_item_position'),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
