"""
Orders API v1 views.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.views import APIView

from shared.interfaces.responses import success_response
from ....application.dtos import (
    CancelOrderDTO,
    CreateOrderDTO,
    OrderIdDTO,
    OrderItemRequestDTO,
)
from ....infrastructure import container
from ...serializers import (
    OrderCancelSerializer,
    OrderCreateSerializer,
    OrderDiscountSerializer,
    OrderIdSerializer,
    OrderPrioritySerializer,
    OrderSerializer,
)

logger = logging.getLogger(__name__)


@extend_schema(tags=['Orders'])
class OrderCreateView(APIView):
    """Order creation endpoint."""

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderIdSerializer},
        summary="Place an order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        input_dto = CreateOrderDTO(
            customer_id=data['customer_id'],
            items=[OrderItemRequestDTO(**item) for item in data['items']],
            shipping_address=data['shipping_address'],
            coupon_code=data.get('coupon_code'),
        )
        result = container.create_order_use_case().execute(input_dto)

        return success_response(
            OrderIdSerializer({'order_id': result.data}).data,
            'Order created',
            status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: int):
        result = container.get_order_use_case().execute(OrderIdDTO(order_id=order_id))
        return success_response(OrderSerializer(result.data).data, 'Order retrieved')


@extend_schema(tags=['Orders'])
class OrderPayView(APIView):
    """Order payment endpoint."""

    @extend_schema(
        request=None,
        responses={200: OrderIdSerializer},
        summary="Pay for an order",
    )
    def post(self, request, order_id: int):
        result = container.pay_order_use_case().execute(OrderIdDTO(order_id=order_id))
        return success_response(OrderIdSerializer({'order_id': result.data}).data, 'Order paid')


@extend_schema(tags=['Orders'])
class OrderCancelView(APIView):
    """Order cancellation endpoint."""

    @extend_schema(
        request=OrderCancelSerializer,
        responses={200: OrderIdSerializer},
        summary="Cancel an order",
    )
    def post(self, request, order_id: int):
        serializer = OrderCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        input_dto = CancelOrderDTO(order_id=order_id, customer_id=serializer.validated_data['customer_id'])
        result = container.cancel_order_use_case().execute(input_dto)
        return success_response(OrderIdSerializer({'order_id': result.data}).data, 'Order cancelled')


@extend_schema(tags=['Orders'])
class OrderShipView(APIView):
    """Order shipping endpoint."""

    @extend_schema(
        request=None,
        responses={200: OrderIdSerializer},
        summary="Ship a paid order",
    )
    def post(self, request, order_id: int):
        result = container.ship_order_use_case().execute(OrderIdDTO(order_id=order_id))
        return success_response(OrderIdSerializer({'order_id': result.data}).data, 'Order shipped')


@extend_schema(tags=['Orders'])
class OrderPriorityView(APIView):
    """Order priority endpoint."""

    @extend_schema(
        responses={200: OrderPrioritySerializer},
        summary="Get order priority",
    )
    def get(self, request, order_id: int):
        result = container.get_order_priority_use_case().execute(OrderIdDTO(order_id=order_id))
        return success_response(OrderPrioritySerializer(result.data).data, 'Order priority retrieved')


@extend_schema(tags=['Orders'])
class OrderDiscountView(APIView):
    """Loyalty discount endpoint."""

    @extend_schema(
        responses={200: OrderDiscountSerializer},
        summary="Calculate the loyalty discount for an order",
    )
    def get(self, request, order_id: int):
        result = container.calculate_discount_use_case().execute(OrderIdDTO(order_id=order_id))
        return success_response(OrderDiscountSerializer(result.data).data, 'Discount calculated')
