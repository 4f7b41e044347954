# Adapters to the other contexts
from .customer_client import HttpCustomerClient
from .product_client import HttpProductClient
from .coupon_client import HttpCouponClient
from .notification_client import LoggingNotificationClient, LoggingAnalyticsClient

__all__ = [
    'HttpCustomerClient',
    'HttpProductClient',
    'HttpCouponClient',
    'LoggingNotificationClient',
    'LoggingAnalyticsClient',
]
