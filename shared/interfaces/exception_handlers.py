"""
DRF exception handler for the domain error taxonomy.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ExternalServiceError,
    InsufficientStockError,
    InvalidOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases.
ERROR_MAPPINGS = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, {'entity': 'entity_name', 'entity_id': 'entity_id'}),
    (InsufficientStockError, status.HTTP_400_BAD_REQUEST,
     {'product_id': 'product_id', 'requested': 'requested', 'available': 'available'}),
    (ValidationError, status.HTTP_400_BAD_REQUEST, {'field': 'field'}),
    (InvalidOperationError, status.HTTP_409_CONFLICT, {'operation': 'operation', 'state': 'state'}),
    (ExternalServiceError, status.HTTP_503_SERVICE_UNAVAILABLE, {'service': 'service', 'retryable': 'retryable'}),
    (DomainException, status.HTTP_400_BAD_REQUEST, {}),
)


def _error_body(exc: DomainException, fields) -> dict:
    body = {'error': exc.message, 'code': exc.code}
    for key, attribute in fields.items():
        body[key] = getattr(exc, attribute, None)
    return body


def custom_exception_handler(exc, context):
    """Render domain exceptions as ``{error, code, ...}``; defer everything else to DRF."""
    for exc_class, status_code, fields in ERROR_MAPPINGS:
        if isinstance(exc, exc_class):
            if isinstance(exc, ExternalServiceError):
                logger.warning("External service failure: service=%s, code=%s", exc.service, exc.code)
            return Response(_error_body(exc, fields), status=status_code)

    return exception_handler(exc, context)
