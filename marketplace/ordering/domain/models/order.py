import uuid

from django.db import models

from authentication.models import Buyer, Seller
from marketplace.catalog.domain.models import Product


class OrderImmutableError(Exception):
    """Raised when code tries to rewrite a persisted order."""


class Order(models.Model):
    """
    One purchased cart line.

    Orders are historical records: they are written once at checkout and never
    updated. Buyer, seller and product references survive account or product
    deletion as NULL; ``product_name`` keeps what was bought.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey(Buyer, on_delete=models.SET_NULL, null=True, related_name="orders")
    seller = models.ForeignKey(Seller, on_delete=models.SET_NULL, null=True, blank=True, related_name="orders")
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True, blank=True, related_name="orders")

    # Snapshot at checkout
    product_name = models.CharField(max_length=200)
    quantity = models.PositiveIntegerField()
    amount = models.DecimalField(max_digits=12, decimal_places=2)

    payment_reference = models.CharField(max_length=100, db_index=True)
    order_date = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-order_date"]
        indexes = [
            models.Index(fields=["seller", "-order_date"], name="order_seller_date_idx"),
            models.Index(fields=["buyer", "-order_date"], name="order_buyer_date_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise OrderImmutableError(f"Order {self.id} is immutable")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"Order {self.id} - {self.quantity}x {self.product_name}"
