from rest_framework import serializers

from marketplace.catalog.domain.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Product as exposed over HTTP; ``imageUrl`` never comes back blank."""

    cost = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    imageUrl = serializers.CharField(source="display_image_url", read_only=True)
    sellerId = serializers.UUIDField(source="seller_id", read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = ["id", "name", "category", "description", "cost", "imageUrl", "sellerId"]
        read_only_fields = fields


class ProductDetailSerializer(ProductSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ["createdAt"]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """Validates multipart/JSON product payloads before they reach CatalogService."""

    category = serializers.CharField(max_length=100)
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    image = serializers.ImageField(required=False, allow_null=True, write_only=True)
