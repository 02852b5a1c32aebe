import uuid

from django.db import models

from .base import CredentialModel


class Admin(CredentialModel):
    """Platform administrator credential record."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=50, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "authentication"
        verbose_name = "Platform Admin"
        verbose_name_plural = "Platform Admins"

    def __str__(self):
        return self.username
