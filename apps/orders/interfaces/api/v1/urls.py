"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    OrderCancelView,
    OrderCreateView,
    OrderDetailView,
    OrderDiscountView,
    OrderPayView,
    OrderPriorityView,
    OrderShipView,
)

urlpatterns = [
    path('', OrderCreateView.as_view(), name='order-create'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<int:order_id>/pay/', OrderPayView.as_view(), name='order-pay'),
    path('<int:order_id>/cancel/', OrderCancelView.as_view(), name='order-cancel'),
    path('<int:order_id>/ship/', OrderShipView.as_view(), name='order-ship'),
    path('<int:order_id>/priority/', OrderPriorityView.as_view(), name='order-priority'),
    path('<int:order_id>/discount/', OrderDiscountView.as_view(), name='order-discount'),
]
