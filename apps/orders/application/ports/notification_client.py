"""
Notification and analytics ports used by the order event handlers.
"""
from abc import ABC, abstractmethod
from decimal import Decimal


class NotificationClient(ABC):
    """Customer-facing notifications."""

    @abstractmethod
    def send_order_created(self, customer_id: int, total_amount: Decimal) -> None:
        pass

    @abstractmethod
    def send_payment_confirmation(self, customer_id: int, order_id: int, paid_amount: Decimal) -> None:
        pass

    @abstractmethod
    def send_order_cancellation(self, customer_id: int, order_id: int) -> None:
        pass


class AnalyticsClient(ABC):
    """Sales statistics sink."""

    @abstractmethod
    def record_order_created(self, customer_id: int, total_amount: Decimal) -> None:
        pass
