import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from authentication.models import Seller

DEFAULT_IMAGE_PLACEHOLDER = "https://placehold.co/300x200?text=No+Image"


class Product(models.Model):
    # Basic Information
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.CharField(max_length=100, db_index=True)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # Pricing
    cost = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])

    # Image (URL as served, key as stored in the media bucket)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    image_key = models.CharField(max_length=500, blank=True)

    seller = models.ForeignKey(Seller, on_delete=models.CASCADE, null=True, blank=True, related_name="products")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["seller", "-created_at"], name="product_seller_created_idx"),
        ]

    @property
    def display_image_url(self):
        """Image URL to show clients; falls back to the placeholder when unset or blank."""
        if self.image_url and self.image_url.strip():
            return self.image_url
        return getattr(settings, "PRODUCT_IMAGE_PLACEHOLDER_URL", DEFAULT_IMAGE_PLACEHOLDER)

    def __str__(self):
        return self.name
