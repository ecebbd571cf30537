"""
Exception classes and the API exception handler for the product service.

Validation and not-found errors are client errors and pass through
DRF's default handling. Store faults become a 503 with a generic body.
"""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ProductNotFound(NotFound):
    """
    Raised when no product matches the requested identifier.

    Also used for identifiers that are not well-formed, since a
    malformed id can never match a stored product.
    """
    default_detail = 'Product not found'
    default_code = 'product_not_found'


def api_exception_handler(exc, context):
    """
    Translate exceptions into JSON error responses.

    - ProductNotFound: 404 {"error": "Product not found"}
    - DatabaseError: 503 {"error": "Product store unavailable"}
    - everything else: DRF's default handler
    """
    if isinstance(exc, ProductNotFound):
        return Response({'error': str(exc.detail)}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception(
            "Product store fault in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'error': 'Product store unavailable'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return exception_handler(exc, context)
