"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    ValidationError,
    InvalidOperationError,
    InsufficientStockError,
)


class InvalidMoneyError(ValidationError):
    """Raised when a money amount is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="amount", code="INVALID_MONEY")


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is out of range."""

    def __init__(self, message: str):
        super().__init__(message=message, field="quantity", code="INVALID_QUANTITY")


class InvalidIdentifierError(ValidationError):
    """Raised when a customer or product id is not a positive integer."""

    def __init__(self, kind: str, value):
        super().__init__(
            message=f"Invalid {kind} id: {value!r}",
            field=f"{kind}_id",
            code="INVALID_IDENTIFIER",
        )
        self.value = value


class InvalidCouponCodeError(ValidationError):
    """Raised when a coupon code is malformed."""

    def __init__(self, message: str):
        super().__init__(message=message, field="coupon_code", code="INVALID_COUPON_CODE")


class InvalidShippingAddressError(ValidationError):
    """Raised when a shipping address is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="shipping_address", code="INVALID_SHIPPING_ADDRESS")


class InvalidOrderItemError(ValidationError):
    """Raised when an order line is invalid."""

    def __init__(self, message: str, field: str = "items"):
        super().__init__(message=message, field=field, code="INVALID_ORDER_ITEM")


class EmptyOrderError(ValidationError):
    """Raised when creating an order without items."""

    def __init__(self):
        super().__init__(
            message="An order must contain at least one item",
            field="items",
            code="EMPTY_ORDER",
        )


class OrderPolicyViolationError(ValidationError):
    """Raised when an order breaks an amount or size limit."""

    def __init__(self, message: str, field: str):
        super().__init__(message=message, field=field, code="ORDER_POLICY_VIOLATION")


class ProductNotFoundError(ValidationError):
    """Raised when an ordered product is unknown to the catalog."""

    def __init__(self, product_id):
        super().__init__(
            message=f"Product '{product_id}' not found",
            field="items",
            code="PRODUCT_NOT_FOUND",
        )
        self.product_id = product_id


class ProductUnavailableError(ValidationError):
    """Raised when an ordered product is not for sale."""

    def __init__(self, product_name: str):
        super().__init__(
            message=f"Product '{product_name}' is not available for purchase",
            field="items",
            code="PRODUCT_UNAVAILABLE",
        )
        self.product_name = product_name


class InvalidCouponError(ValidationError):
    """Raised when the coupon service rejects a coupon."""

    def __init__(self, coupon_code: str):
        super().__init__(
            message=f"Coupon '{coupon_code}' is not valid for this order",
            field="coupon_code",
            code="INVALID_COUPON",
        )
        self.coupon_code = coupon_code


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier):
        super().__init__(entity_name="Order", entity_id=str(identifier), code="ORDER_NOT_FOUND")
        self.identifier = identifier


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str, description: str = ""):
        super().__init__(
            message=f"Cannot {operation} an order that is {description or current_state}",
            operation=operation,
            state=current_state,
        )


class DiscountExceedsTotalError(InvalidOperationError):
    """Raised when a discount is larger than the order total."""

    def __init__(self, discount, total):
        super().__init__(
            message=f"Discount {discount} cannot exceed the order total {total}",
            operation="apply_coupon",
            code="DISCOUNT_EXCEEDS_TOTAL",
        )


class NonPositivePaymentError(InvalidOperationError):
    """Raised when the amount to charge is not positive."""

    def __init__(self, amount):
        super().__init__(
            message=f"Payment amount must be greater than zero, got {amount}",
            operation="pay",
            code="NON_POSITIVE_PAYMENT",
        )


class OrderOwnershipError(InvalidOperationError):
    """Raised when someone other than the customer tries to cancel an order."""

    def __init__(self):
        super().__init__(
            message="Only the customer who placed the order can cancel it",
            operation="cancel",
            code="NOT_ORDER_OWNER",
        )


class CancellationWindowExpiredError(InvalidOperationError):
    """Raised when the post-payment cancellation window has passed."""

    def __init__(self, hours: int):
        super().__init__(
            message=f"Orders can only be cancelled within {hours} hours of payment",
            operation="cancel",
            state="PAID",
            code="CANCELLATION_WINDOW_EXPIRED",
        )
        self.hours = hours


class CustomerNotEligibleError(InvalidOperationError):
    """Raised when the customer service refuses a new order."""

    def __init__(self, customer_id):
        super().__init__(
            message=f"Customer '{customer_id}' is not allowed to place orders",
            operation="create",
            code="CUSTOMER_NOT_ELIGIBLE",
        )
        self.customer_id = customer_id


class CouponRedemptionError(InvalidOperationError):
    """Raised when the coupon service refuses to mark a coupon as used."""

    def __init__(self, coupon_code: str):
        super().__init__(
            message=f"Coupon '{coupon_code}' could not be redeemed",
            operation="create",
            code="COUPON_REDEMPTION_FAILED",
        )
        self.coupon_code = coupon_code


class StockDecreaseFailedError(InvalidOperationError):
    """Raised when the catalog refuses a batched stock decrement."""

    def __init__(self):
        super().__init__(
            message="Stock could not be reserved: some products no longer have enough stock",
            operation="create",
            code="STOCK_DECREASE_FAILED",
        )


__all__ = [
    'InvalidMoneyError',
    'InvalidQuantityError',
    'InvalidIdentifierError',
    'InvalidCouponCodeError',
    'InvalidShippingAddressError',
    'InvalidOrderItemError',
    'EmptyOrderError',
    'OrderPolicyViolationError',
    'ProductNotFoundError',
    'ProductUnavailableError',
    'InsufficientStockError',
    'InvalidCouponError',
    'OrderNotFoundError',
    'InvalidOrderStateError',
    'DiscountExceedsTotalError',
    'NonPositivePaymentError',
    'OrderOwnershipError',
    'CancellationWindowExpiredError',
    'CustomerNotEligibleError',
    'CouponRedemptionError',
    'StockDecreaseFailedError',
]
