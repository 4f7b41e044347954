"""
Domain exceptions.

Every failure raised by the domain and application layers is a
``DomainException`` and falls into one of these kinds:

* ``ValidationError``        - malformed or out-of-range input (caller-fixable)
* ``InvalidOperationError``  - not allowed in the current state or by this actor
* ``EntityNotFoundError``    - referenced entity does not exist
* ``ExternalServiceError``   - a collaborator could not be reached in time
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code,
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class InsufficientStockError(ValidationError):
    """Raised when stock is insufficient."""

    def __init__(self, product_id: str, requested: int, available: int, product_name: str = ""):
        super().__init__(
            message=(
                f"Insufficient stock for product '{product_name or product_id}': "
                f"requested {requested}, available {available}"
            ),
            field="quantity",
            code="INSUFFICIENT_STOCK",
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        state: Optional[str] = None,
        code: str = "INVALID_OPERATION",
    ):
        super().__init__(message=message, code=code)
        self.operation = operation
        self.state = state


class ExternalServiceError(DomainException):
    """Raised when an external collaborator fails to answer."""

    retryable = True

    def __init__(self, service: str, message: str, code: str = "EXTERNAL_SERVICE_ERROR"):
        super().__init__(message=f"{service} service error: {message}", code=code)
        self.service = service


class ExternalServiceTimeoutError(ExternalServiceError):
    """Raised when an external collaborator does not answer within its timeout."""

    def __init__(self, service: str, timeout: float):
        super().__init__(
            service=service,
            message=f"no response within {timeout} seconds",
            code="EXTERNAL_SERVICE_TIMEOUT",
        )
        self.timeout = timeout
