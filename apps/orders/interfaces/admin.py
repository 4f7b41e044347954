"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models import OrderModel, OrderItemModel


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    readonly_fields = ('position', 'product_id', 'product_name', 'price', 'quantity')


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('id', 'customer_id', 'status', 'coupon_code', 'discount_amount', 'ordered_at', 'paid_at')
    list_filter = ('status', 'ordered_at')
    search_fields = ('id', 'customer_id', 'coupon_code')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [OrderItemInline]
