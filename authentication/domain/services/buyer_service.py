"""
BuyerService - Buyer Accounts

Registration, login, profile and deletion of buyers.
"""

import logging
from typing import Any, Dict, List

from django.db import transaction

from authentication.models import Address, Buyer
from marketplace.models import CartLine
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .accounts import AccountService

logger = logging.getLogger(__name__)


class BuyerService(AccountService):
    """
    Buyer account service.

    Buyers log in with their email address.
    """

    model = Buyer
    label = "buyer"
    not_found_code = ErrorCodes.BUYER_NOT_FOUND
    unique_fields = ("email",)
    required_fields = ("name", "email", "password")
    profile_fields = ("name", "gender", "date_of_birth", "email", "mobile_number", "location", "password")

    @BaseService.log_performance
    def register(self, data: Dict[str, Any]) -> ServiceResult[Buyer]:
        """
        Register a new buyer.

        Args:
            data: Dict with name, email, password and optionally gender,
                date_of_birth, mobile_number, location

        Returns:
            ServiceResult with the Buyer, ``account_exists`` on a duplicate email
        """
        return self._create(data)

    @BaseService.log_performance
    def login(self, email: str, password: str) -> ServiceResult[Buyer]:
        if not isinstance(email, str) or not isinstance(password, str) or not email.strip() or not password:
            return service_err(ErrorCodes.INVALID_INPUT, "Email and password are required")

        found = self.call_store(
            lambda: Buyer.objects.filter(email__iexact=email.strip()).first(), f"loading buyer {mask_value(email)}"
        )
        if not found.ok:
            return found
        buyer = found.value
        if buyer is None or not buyer.check_password(password):
            self.logger.warning(f"Failed buyer login for {mask_value(email)}")
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid email or password")

        self.logger.info(f"Buyer {buyer.id} logged in")
        return service_ok(buyer)

    @BaseService.log_performance
    def get_buyer(self, buyer_id) -> ServiceResult[Buyer]:
        return self._get(buyer_id)

    @BaseService.log_performance
    def update_profile(self, buyer_id, data: Dict[str, Any]) -> ServiceResult[Buyer]:
        return self._update(buyer_id, data)

    @BaseService.log_performance
    def list_buyers(self) -> ServiceResult[List[Buyer]]:
        return self._all()

    @BaseService.log_performance
    def delete_buyer(self, buyer_id) -> ServiceResult[Dict[str, int]]:
        """
        Delete a buyer together with their cart lines and addresses.

        Dependents are removed explicitly in the same transaction; orders are
        kept with the buyer reference cleared.

        Returns:
            ServiceResult with ``{"cart_lines": n, "addresses": m}``
        """
        found = self._get(buyer_id)
        if not found.ok:
            return found
        buyer_pk = found.value.pk

        def delete():
            with transaction.atomic():
                cart_lines, _ = CartLine.objects.filter(buyer_id=buyer_pk).delete()
                addresses, _ = Address.objects.filter(buyer_id=buyer_pk).delete()
                Buyer.objects.filter(id=buyer_pk).delete()
            return {"cart_lines": cart_lines, "addresses": addresses}

        deleted = self.call_store(delete, f"deleting buyer {buyer_pk}")
        if deleted.ok:
            removed = deleted.value
            self.logger.info(
                f"Deleted buyer {buyer_pk}: {removed['cart_lines']} cart lines, {removed['addresses']} addresses"
            )
        return deleted
