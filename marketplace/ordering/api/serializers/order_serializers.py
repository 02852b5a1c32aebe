from rest_framework import serializers

from marketplace.ordering.domain.models import Order


class OrderSerializer(serializers.ModelSerializer):
    buyerId = serializers.UUIDField(source="buyer_id", read_only=True, allow_null=True)
    sellerId = serializers.UUIDField(source="seller_id", read_only=True, allow_null=True)
    productId = serializers.UUIDField(source="product_id", read_only=True, allow_null=True)
    productName = serializers.CharField(source="product_name", read_only=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True)
    paymentReference = serializers.CharField(source="payment_reference", read_only=True)
    orderDate = serializers.DateTimeField(source="order_date", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "buyerId",
            "sellerId",
            "productId",
            "productName",
            "quantity",
            "amount",
            "paymentReference",
            "orderDate",
        ]
        read_only_fields = fields
