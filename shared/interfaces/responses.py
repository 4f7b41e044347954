"""
Success response envelope.
"""
from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data, message: str, status_code: int = http_status.HTTP_200_OK) -> Response:
    """Wrap ``data`` in the ``{status, message, data}`` envelope."""
    return Response(
        {
            'status': status_code,
            'message': message,
            'data': data,
        },
        status=status_code,
    )
