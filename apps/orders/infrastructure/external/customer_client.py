"""
HTTP adapter for the customer context.
"""
import logging

from shared.infrastructure.http import JsonHttpClient
from ...application.ports import CustomerClient
from ...domain.value_objects import CustomerId

logger = logging.getLogger(__name__)


class HttpCustomerClient(CustomerClient):
    """Reads ordering eligibility from ``GET /customers/{id}``."""

    def __init__(self, http: JsonHttpClient):
        self.http = http

    def can_order(self, customer_id: CustomerId) -> bool:
        response = self.http.get(f'/customers/{customer_id.value}', accept_statuses=(404,))
        if response.status_code == 404:
            logger.info("Customer not found: customer_id=%s", customer_id)
            return False
        return bool(self.http.json(response).get('canOrder', False))
