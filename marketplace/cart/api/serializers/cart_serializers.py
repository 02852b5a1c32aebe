from rest_framework import serializers

from marketplace.cart.domain.models import CartLine
from marketplace.catalog.api.serializers.product_serializers import ProductSerializer


class CartLineSerializer(serializers.ModelSerializer):
    """``{id, quantity, product: {id, name, category, description, cost, imageUrl, sellerId}}``"""

    product = ProductSerializer(read_only=True)

    class Meta:
        model = CartLine
        fields = ["id", "quantity", "product"]
        read_only_fields = fields
