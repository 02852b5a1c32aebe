# Marketplace API Serializers

# Import response serializers for API documentation
from .response_serializers import (
    AddToCartRequestSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
    PlaceOrderRequestSerializer,
    ProductFormRequestSerializer,
    SalesBucketSerializer,
    UpdateCartRequestSerializer,
)


__all__ = [
    "AddToCartRequestSerializer",
    "ErrorResponseSerializer",
    "MessageResponseSerializer",
    "PlaceOrderRequestSerializer",
    "ProductFormRequestSerializer",
    "SalesBucketSerializer",
    "UpdateCartRequestSerializer",
]
