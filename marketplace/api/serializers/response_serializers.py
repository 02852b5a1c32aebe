"""
Response Serializers for Marketplace API Documentation

These serializers define the structure of request and response bodies for
OpenAPI schema generation. They are NOT used for data validation, only for
documentation in Swagger.
"""

from rest_framework import serializers

# ===== Common Response Serializers =====


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    detail = serializers.CharField(help_text="Human-readable error message")


class MessageResponseSerializer(serializers.Serializer):
    """Generic success response"""

    message = serializers.CharField(help_text="Success message")


# ===== Cart Request Serializers =====


class AddToCartRequestSerializer(serializers.Serializer):
    buyerId = serializers.CharField(help_text="Buyer UUID")
    productId = serializers.CharField(help_text="Product UUID")
    quantity = serializers.IntegerField(required=False, default=1, help_text="Units to add (default 1)")


class UpdateCartRequestSerializer(serializers.Serializer):
    buyerId = serializers.CharField(help_text="Buyer UUID")
    productId = serializers.CharField(help_text="Product UUID")
    quantity = serializers.IntegerField(help_text="New quantity, must be positive")


# ===== Catalog Request Serializers =====


class ProductFormRequestSerializer(serializers.Serializer):
    sellerId = serializers.CharField(required=False, help_text="Seller UUID (required on create)")
    category = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(required=False)
    cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    image = serializers.ImageField(required=False, help_text="Product image file")


# ===== Order Request/Response Serializers =====


class PlaceOrderRequestSerializer(serializers.Serializer):
    buyerId = serializers.CharField(help_text="Buyer UUID")
    paymentReference = serializers.CharField(help_text="Reference of the settled payment")


class SalesBucketSerializer(serializers.Serializer):
    date = serializers.CharField(required=False, help_text="YYYY-MM-DD (daily period)")
    month = serializers.CharField(required=False, help_text="YYYY-MM (monthly period)")
    orderCount = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)
