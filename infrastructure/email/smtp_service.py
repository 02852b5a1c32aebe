"""
SMTP Email Service
==================

EmailServiceInterface backed by Django's configured email backend.
"""

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from utils.logging_utils import mask_value

from .interface import EmailException, EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class SMTPEmailService(EmailServiceInterface):
    """
    Django SMTP email service implementation.

    Configuration (in settings.py):
        EMAIL_BACKEND: Django email backend class
        EMAIL_HOST: SMTP server host
        EMAIL_PORT: SMTP server port
        EMAIL_HOST_USER: SMTP username
        EMAIL_HOST_PASSWORD: SMTP password
        EMAIL_USE_TLS: Use TLS encryption
        DEFAULT_FROM_EMAIL: Default sender address
    """

    def __init__(self):
        self.default_from = getattr(settings, "DEFAULT_FROM_EMAIL", "noreply@llcart.example")

    def send(self, message: EmailMessage) -> bool:
        recipients = [mask_value(address) for address in message.to]
        try:
            msg = EmailMultiAlternatives(
                subject=message.subject,
                body=message.body,
                from_email=message.from_email or self.default_from,
                to=message.to,
                cc=message.cc,
            )
            if message.html_body:
                msg.attach_alternative(message.html_body, "text/html")

            success = msg.send(fail_silently=False) > 0
            if success:
                logger.info(f"Email sent successfully to {recipients}")
            else:
                logger.warning(f"Email failed to send to {recipients}")
            return success

        except Exception as e:
            logger.error(f"Failed to send email to {recipients}: {str(e)}")
            raise EmailException(f"Email send failed: {str(e)}") from e
