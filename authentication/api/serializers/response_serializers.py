"""
Response Serializers for Account API Documentation

Used only for OpenAPI schema generation.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    detail = serializers.CharField(help_text="Human-readable error message")


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField(help_text="Success message")


class SellerDashboardResponseSerializer(serializers.Serializer):
    totalProducts = serializers.IntegerField()
    totalOrders = serializers.IntegerField()
    totalRevenue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)


class AdminDashboardResponseSerializer(SellerDashboardResponseSerializer):
    totalSellers = serializers.IntegerField()
    totalBuyers = serializers.IntegerField()


class BuyerDeletedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    cartLinesRemoved = serializers.IntegerField()
    addressesRemoved = serializers.IntegerField()
