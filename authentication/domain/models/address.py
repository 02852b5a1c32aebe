import uuid

from django.db import models

from .buyer import Buyer


class Address(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey(Buyer, on_delete=models.CASCADE, related_name="addresses")

    house_number = models.CharField(max_length=50)
    street = models.CharField(max_length=200)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    pincode = models.CharField(max_length=12)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "authentication"
        verbose_name_plural = "Addresses"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.house_number}, {self.street}, {self.city} {self.pincode}"
