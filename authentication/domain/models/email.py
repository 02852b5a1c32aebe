import uuid

from django.db import models


class EmailDetails(models.Model):
    """Audit row for every email the platform sends."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recipient = models.EmailField()
    subject = models.CharField(max_length=255)
    msg_body = models.TextField()
    sent = models.BooleanField(default=False)
    sent_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "authentication"
        verbose_name = "Email Details"
        verbose_name_plural = "Email Details"
        ordering = ["-sent_at"]

    def __str__(self):
        return f"{self.subject} -> {self.recipient}"
