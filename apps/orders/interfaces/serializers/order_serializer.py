"""
Order serializers.
"""
from rest_framework import serializers


class OrderItemRequestSerializer(serializers.Serializer):
    """One requested order line."""
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField()


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order."""
    customer_id = serializers.IntegerField()
    items = OrderItemRequestSerializer(many=True)
    shipping_address = serializers.CharField(trim_whitespace=False)
    coupon_code = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrderCancelSerializer(serializers.Serializer):
    """Serializer for cancelling an order."""
    customer_id = serializers.IntegerField()


class OrderIdSerializer(serializers.Serializer):
    """Id of the order a command was applied to."""
    order_id = serializers.IntegerField(read_only=True)


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.IntegerField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    address = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_description = serializers.CharField(read_only=True)
    coupon_code = serializers.CharField(read_only=True, allow_null=True)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    final_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    cancellable = serializers.BooleanField(read_only=True)
    ordered_at = serializers.DateTimeField(read_only=True)
    paid_at = serializers.DateTimeField(read_only=True, allow_null=True)


class OrderPrioritySerializer(serializers.Serializer):
    """Serializer for order priority output."""
    order_id = serializers.IntegerField(read_only=True)
    priority = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    level = serializers.IntegerField(read_only=True)


class OrderDiscountSerializer(serializers.Serializer):
    """Serializer for loyalty discount output."""
    order_id = serializers.IntegerField(read_only=True)
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
