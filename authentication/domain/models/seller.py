import uuid

from django.db import models

from .base import CredentialModel


class Seller(CredentialModel):
    """Seller account; can log in only once an admin approved it."""

    STATUS_PENDING = "pending"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending Review"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(unique=True)
    mobile_number = models.CharField(max_length=20, blank=True)
    national_id = models.CharField(max_length=30, blank=True)
    location = models.CharField(max_length=200, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)

    # Password reset
    reset_token = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    reset_token_created_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    @property
    def is_approved(self):
        return self.status == self.STATUS_APPROVED

    def __str__(self):
        return f"{self.username} ({self.status})"
