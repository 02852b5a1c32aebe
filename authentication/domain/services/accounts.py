"""
Shared logic for password-holding accounts (buyers and sellers).

``AccountService`` implements registration, profile updates and the password
reset flow once; subclasses say which model they manage and which field is
used as the login identifier.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.crypto import get_random_string

from authentication.models import EmailDetails
from infrastructure.email import EmailException, EmailMessage, EmailServiceInterface
from utils.logging_utils import mask_value, safe_account_payload
from utils.service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok
from utils.transaction_utils import retry_on_transient_error

logger = logging.getLogger(__name__)

RESET_TOKEN_LENGTH = 48


@retry_on_transient_error(max_retries=3)
def record_email(recipient: str, subject: str, body: str, sent: bool) -> EmailDetails:
    return EmailDetails.objects.create(recipient=recipient, subject=subject, msg_body=body, sent=sent)


class AccountMailer:
    """Sends platform emails and records each one as an EmailDetails row."""

    def __init__(self, email_service: EmailServiceInterface):
        self.email_service = email_service

    def send(self, recipient: str, subject: str, body: str) -> bool:
        try:
            sent = self.email_service.send(EmailMessage(subject=subject, body=body, to=[recipient]))
        except EmailException as e:
            logger.error(f"Email '{subject}' to {mask_value(recipient)} failed: {e}")
            sent = False

        record_email(recipient, subject, body, sent)
        return sent


class AccountService(BaseService):
    """
    Base service for Buyer and Seller accounts.

    Subclasses set:
        model: the CredentialModel subclass
        not_found_code: ErrorCodes entry for an unknown id
        unique_fields: fields that must not collide with another account
        required_fields: fields needed to register
        profile_fields: fields a profile update may change
    """

    model = None
    label = "account"
    not_found_code = ErrorCodes.VALIDATION_ERROR
    unique_fields: Iterable[str] = ("email",)
    required_fields: Iterable[str] = ("name", "email", "password")
    profile_fields: Iterable[str] = ()

    def __init__(self, email_service: Optional[EmailServiceInterface] = None):
        super().__init__()
        if email_service is None:
            from infrastructure.container import container

            email_service = container.email()
        self.mailer = AccountMailer(email_service)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _get(self, account_id) -> ServiceResult:
        account_uuid = parse_id(account_id)
        if account_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid {self.label} id: {account_id}")

        found = self.call_store(
            lambda: self.model.objects.filter(id=account_uuid).first(), f"loading {self.label} {account_uuid}"
        )
        if found.ok and found.value is None:
            return service_err(self.not_found_code, f"{self.label.capitalize()} {account_uuid} not found")
        return found

    def _all(self, **lookup) -> ServiceResult:
        return self.call_store(lambda: list(self.model.objects.filter(**lookup)), f"listing {self.label}s")

    # ------------------------------------------------------------------
    # Registration / profile
    # ------------------------------------------------------------------

    def _create(self, data: Dict[str, Any], **extra) -> ServiceResult:
        missing = [field for field in self.required_fields if not str(data.get(field) or "").strip()]
        if missing:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Missing required fields: {', '.join(missing)}")

        fields = {field: data[field] for field in self.profile_fields if field in data and field != "password"}
        fields.update(extra)
        account = self.model(**fields)
        account.set_password(data["password"])

        def create():
            clash = self._find_clash(data)
            if clash:
                return service_err(ErrorCodes.ACCOUNT_EXISTS, f"A {self.label} with this {clash} already exists")
            return self._save_unique(account)

        created = self.call_store(create, f"registering {self.label}")
        if created.ok:
            self.logger.info(f"Registered {self.label} {account.id}: {safe_account_payload(data)}")
        return created

    def _update(self, account_id, data: Dict[str, Any]) -> ServiceResult:
        found = self._get(account_id)
        if not found.ok:
            return found
        account = found.value

        changed = []
        for field in self.profile_fields:
            if field not in data or data[field] is None:
                continue
            if field == "password":
                if data[field]:
                    account.set_password(data[field])
                    changed.append(field)
                continue
            setattr(account, field, data[field])
            changed.append(field)

        def apply():
            clash = self._find_clash(data, exclude_id=account.id)
            if clash:
                return service_err(ErrorCodes.ACCOUNT_EXISTS, f"A {self.label} with this {clash} already exists")
            if not changed:
                return account
            return self._save_unique(account)

        updated = self.call_store(apply, f"updating {self.label} {account.id}")
        if updated.ok:
            self.logger.info(f"Updated {self.label} {account.id}: {sorted(changed)}")
        return updated

    def _save_unique(self, account):
        try:
            with transaction.atomic():
                account.save()
        except IntegrityError:
            # Lost a race against a concurrent write of the same identifier
            return service_err(ErrorCodes.ACCOUNT_EXISTS, f"A {self.label} with these details already exists")
        return account

    def _find_clash(self, data: Dict[str, Any], exclude_id=None) -> Optional[str]:
        for field in self.unique_fields:
            value = data.get(field)
            if not value:
                continue
            others = self.model.objects.filter(**{f"{field}__iexact": value})
            if exclude_id is not None:
                others = others.exclude(id=exclude_id)
            if others.exists():
                return field
        return None

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def request_password_reset(self, email: str) -> ServiceResult[bool]:
        """
        Issue a reset token and email the reset link.

        Unknown emails get the same successful result so callers cannot discover
        which addresses hold an account. The value tells whether a mail went out.
        """
        email = email.strip() if isinstance(email, str) else ""
        if not email:
            return service_err(ErrorCodes.INVALID_INPUT, "Email is required")

        def issue_token():
            account = self.model.objects.filter(email__iexact=email).first()
            if account is not None:
                account.reset_token = get_random_string(RESET_TOKEN_LENGTH)
                account.reset_token_created_at = timezone.now()
                account.save(update_fields=["reset_token", "reset_token_created_at", "updated_at"])
            return account

        issued = self.call_store(issue_token, f"issuing {self.label} reset token")
        if not issued.ok:
            return issued
        account = issued.value
        if account is None:
            self.logger.info(f"Password reset requested for unknown {self.label} {mask_value(email)}")
            return service_ok(False)

        link = f"{settings.PASSWORD_RESET_URL}?token={account.reset_token}&role={self.label}"
        body = (
            f"Hello {account.name},\n\n"
            f"Use the link below to reset your LL-CART password:\n{link}\n\n"
            f"The link expires in {settings.PASSWORD_RESET_TOKEN_TTL_MINUTES} minutes."
        )
        sent = self.call_store(
            lambda: self.mailer.send(account.email, "LL-CART password reset", body),
            f"emailing reset link to {self.label} {account.id}",
        )
        if sent.ok:
            self.logger.info(f"Password reset for {self.label} {account.id}: email sent={sent.value}")
        return sent

    @BaseService.log_performance
    def reset_password(self, token: str, new_password: str) -> ServiceResult[bool]:
        """Set a new password using a token from ``request_password_reset``."""
        if not token or not new_password:
            return service_err(ErrorCodes.INVALID_INPUT, "Token and new password are required")

        def consume_token():
            account = self.model.objects.filter(reset_token=token).first()
            if account is None:
                return service_err(ErrorCodes.INVALID_RESET_TOKEN, "Invalid or expired reset token")

            ttl = timedelta(minutes=settings.PASSWORD_RESET_TOKEN_TTL_MINUTES)
            if account.reset_token_created_at is None or account.reset_token_created_at + ttl < timezone.now():
                return service_err(ErrorCodes.INVALID_RESET_TOKEN, "Invalid or expired reset token")

            account.set_password(new_password)
            account.reset_token = None
            account.reset_token_created_at = None
            account.save(update_fields=["password", "reset_token", "reset_token_created_at", "updated_at"])
            return account

        consumed = self.call_store(consume_token, f"resetting {self.label} password")
        if not consumed.ok:
            return consumed

        self.logger.info(f"Password reset completed for {self.label} {consumed.value.id}")
        return service_ok(True)
