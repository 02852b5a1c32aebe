import uuid

from django.db import models

from .base import CredentialModel


class Buyer(CredentialModel):
    GENDER_CHOICES = [
        ("male", "Male"),
        ("female", "Female"),
        ("other", "Other"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    email = models.EmailField(unique=True)
    mobile_number = models.CharField(max_length=20, blank=True)
    location = models.CharField(max_length=200, blank=True)

    # Password reset
    reset_token = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    reset_token_created_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    def __str__(self):
        return self.email
