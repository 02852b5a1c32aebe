import uuid

from django.db import models

from authentication.models import Buyer
from marketplace.catalog.domain.models import Product


class CartLine(models.Model):
    """One (buyer, product, quantity) record. A buyer holds at most one line per product."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey(Buyer, on_delete=models.CASCADE, related_name="cart_lines")
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="cart_lines")
    quantity = models.PositiveIntegerField(default=1)
    added_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        verbose_name = "Cart Line"
        verbose_name_plural = "Cart Lines"
        constraints = [
            models.UniqueConstraint(fields=["buyer", "product"], name="unique_cart_line_per_buyer_product"),
        ]

    def __str__(self):
        return f"{self.quantity}x {self.product_id} in cart of {self.buyer_id}"
