"""
HTTP adapter for the product catalog.
"""
import logging
from typing import Dict, Iterable, Mapping

from shared.domain.exceptions import ExternalServiceError
from shared.infrastructure.http import JsonHttpClient
from ...application.ports import ProductClient, ProductInfo
from ...domain.value_objects import Money, ProductId

logger = logging.getLogger(__name__)


def _stock_lines(quantities: Mapping[ProductId, int]) -> list:
    return [
        {'productId': product_id.value, 'quantity': quantity}
        for product_id, quantity in quantities.items()
    ]


class HttpProductClient(ProductClient):
    """Catalog lookups and stock adjustments."""

    def __init__(self, http: JsonHttpClient):
        self.http = http

    def get_products(self, product_ids: Iterable[ProductId]) -> Dict[ProductId, ProductInfo]:
        ids = [product_id.value for product_id in product_ids]
        response = self.http.post('/products/batch', json={'productIds': ids})
        payload = self.http.json(response)

        products = {}
        try:
            for entry in payload:
                info = ProductInfo(
                    product_id=ProductId.of(int(entry['productId'])),
                    name=entry['productName'],
                    unit_price=Money.of(str(entry['price'])),
                    stock_quantity=int(entry['stockQuantity']),
                    available=bool(entry['available']),
                )
                products[info.product_id] = info
        except (KeyError, TypeError, ValueError) as e:
            raise ExternalServiceError(self.http.service_name, f"malformed product payload: {e}") from e
        logger.debug("Fetched %d of %d products", len(products), len(ids))
        return products

    def decrease_stocks(self, quantities: Mapping[ProductId, int]) -> bool:
        response = self.http.post(
            '/products/stocks/decrease',
            json={'items': _stock_lines(quantities)},
            accept_statuses=(409,),
        )
        if response.status_code == 409:
            logger.info("Stock decrease refused: %s", _stock_lines(quantities))
            return False
        return True

    def restore_stocks(self, quantities: Mapping[ProductId, int]) -> None:
        self.http.post('/products/stocks/restore', json={'items': _stock_lines(quantities)})
