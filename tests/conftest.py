"""
Pytest configuration and fixtures.
"""
import pytest

from apps.orders.domain.entities import Order
from apps.orders.domain.value_objects import CustomerId, ShippingAddress
from tests.orders.fakes import make_item


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer_id():
    return CustomerId.of(1)


@pytest.fixture
def shipping_address():
    return ShippingAddress.of("123 Teheran-ro, Gangnam-gu, Seoul")


@pytest.fixture
def order_factory(customer_id, shipping_address):
    """Build a pending order from ``(product_id, price, quantity)`` tuples."""
    def factory(lines=((1, '1000000', 2), (2, '50000', 1)), owner=None, now=None):
        items = [make_item(product_id, price, quantity) for product_id, price, quantity in lines]
        return Order.create(owner or customer_id, items, shipping_address, now=now)
    return factory
