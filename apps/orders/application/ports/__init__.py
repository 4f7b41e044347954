# Ports to external contexts
from .customer_client import CustomerClient
from .product_client import ProductClient, ProductInfo
from .coupon_client import CouponClient
from .notification_client import NotificationClient, AnalyticsClient
from .compensation_scheduler import CompensationScheduler

__all__ = [
    'CustomerClient',
    'ProductClient',
    'ProductInfo',
    'CouponClient',
    'NotificationClient',
    'AnalyticsClient',
    'CompensationScheduler',
]
