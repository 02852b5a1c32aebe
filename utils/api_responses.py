"""
Translate failed ServiceResults into DRF responses.

Views call ``error_response(result)`` after a service returned ``ok=False``.
Only the error message leaves the process; stack traces stay in the logs.
"""

from rest_framework import status
from rest_framework.response import Response

from .service_base import ErrorCodes, ServiceResult

ERROR_STATUS = {
    # InvalidArgument
    ErrorCodes.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_PRODUCT_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CART_EMPTY: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_RESET_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.ACCOUNT_EXISTS: status.HTTP_409_CONFLICT,
    # NotFound
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.ITEM_NOT_IN_CART: status.HTTP_404_NOT_FOUND,
    ErrorCodes.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.BUYER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SELLER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.ADDRESS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # Credentials
    ErrorCodes.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCodes.SELLER_NOT_APPROVED: status.HTTP_403_FORBIDDEN,
    # Store / collaborators
    ErrorCodes.DATABASE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCodes.IMAGE_UPLOAD_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def error_response(result: ServiceResult, default_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> Response:
    """Build the ``{"detail": ...}`` response for a failed result."""
    http_status = ERROR_STATUS.get(result.error, default_status)
    if http_status >= 500 and result.error == ErrorCodes.INTERNAL_ERROR:
        return Response({"detail": "Internal server error"}, status=http_status)
    return Response({"detail": result.error_detail}, status=http_status)
