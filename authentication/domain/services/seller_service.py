"""
SellerService - Seller Accounts and Dashboard

Sellers register as ``pending`` and can only log in once an admin approved
them. The dashboard figures are delegated to SalesReportService.
"""

import logging
from typing import Any, Dict, List, Optional

from django.db import transaction

from authentication.models import Seller
from marketplace.models import Product
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .accounts import AccountService

logger = logging.getLogger(__name__)


class SellerService(AccountService):
    """
    Seller account service.

    Handles registration, approval workflow, profile, deletion and the
    per-seller sales dashboard.
    """

    model = Seller
    label = "seller"
    not_found_code = ErrorCodes.SELLER_NOT_FOUND
    unique_fields = ("username", "email")
    required_fields = ("name", "username", "email", "password")
    profile_fields = ("name", "username", "email", "mobile_number", "national_id", "location", "password")

    def __init__(self, email_service=None, sales_service=None):
        """
        Initialize SellerService.

        Args:
            email_service: Email backend for approval and reset notifications
            sales_service: SalesReportService for dashboard figures
        """
        super().__init__(email_service=email_service)
        if sales_service is None:
            from marketplace.services import SalesReportService

            sales_service = SalesReportService()
        self.sales_service = sales_service

    # ------------------------------------------------------------------
    # Account lifecycle
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def register(self, data: Dict[str, Any], status: Optional[str] = None) -> ServiceResult[Seller]:
        """Register a seller; the account stays ``pending`` until approved."""
        return self._create(data, status=status or Seller.STATUS_PENDING)

    @BaseService.log_performance
    def login(self, username: str, password: str) -> ServiceResult[Seller]:
        """
        Authenticate a seller by username.

        Wrong credentials give ``invalid_credentials``; correct credentials on
        an account that is not approved give ``seller_not_approved``.
        """
        if not isinstance(username, str) or not isinstance(password, str) or not username.strip() or not password:
            return service_err(ErrorCodes.INVALID_INPUT, "Username and password are required")

        found = self.call_store(
            lambda: Seller.objects.filter(username=username.strip()).first(), f"loading seller {mask_value(username)}"
        )
        if not found.ok:
            return found
        seller = found.value
        if seller is None or not seller.check_password(password):
            self.logger.warning(f"Failed seller login for {mask_value(username)}")
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid username or password")

        if not seller.is_approved:
            return service_err(ErrorCodes.SELLER_NOT_APPROVED, f"Seller account is {seller.status}")

        self.logger.info(f"Seller {seller.id} logged in")
        return service_ok(seller)

    @BaseService.log_performance
    def get_seller(self, seller_id) -> ServiceResult[Seller]:
        return self._get(seller_id)

    @BaseService.log_performance
    def update_profile(self, seller_id, data: Dict[str, Any]) -> ServiceResult[Seller]:
        return self._update(seller_id, data)

    @BaseService.log_performance
    def list_sellers(self) -> ServiceResult[List[Seller]]:
        return self._all()

    @BaseService.log_performance
    def list_pending(self) -> ServiceResult[List[Seller]]:
        return self._all(status=Seller.STATUS_PENDING)

    @BaseService.log_performance
    def approve(self, seller_id) -> ServiceResult[Seller]:
        return self._set_status(seller_id, Seller.STATUS_APPROVED)

    @BaseService.log_performance
    def reject(self, seller_id) -> ServiceResult[Seller]:
        return self._set_status(seller_id, Seller.STATUS_REJECTED)

    def _set_status(self, seller_id, status: str) -> ServiceResult[Seller]:
        found = self._get(seller_id)
        if not found.ok:
            return found
        seller = found.value

        seller.status = status
        saved = self.call_store(
            lambda: seller.save(update_fields=["status", "updated_at"]), f"setting seller {seller.id} {status}"
        )
        if not saved.ok:
            return saved
        self.logger.info(f"Seller {seller.id} -> {status}")

        mailed = self.call_store(
            lambda: self.mailer.send(
                seller.email,
                f"LL-CART seller account {status}",
                f"Hello {seller.name},\n\nYour LL-CART seller account has been {status}.",
            ),
            f"notifying seller {seller.id}",
        )
        if not mailed.ok:
            return mailed
        return service_ok(seller)

    @BaseService.log_performance
    def delete_seller(self, seller_id) -> ServiceResult[Dict[str, int]]:
        """
        Delete a seller and their products.

        Cart lines holding those products disappear with them; orders keep
        their snapshot with seller and product references cleared.

        Returns:
            ServiceResult with ``{"products": n}``
        """
        found = self._get(seller_id)
        if not found.ok:
            return found
        seller_pk = found.value.pk

        def delete():
            with transaction.atomic():
                products = Product.objects.filter(seller_id=seller_pk).count()
                Seller.objects.filter(id=seller_pk).delete()
            return {"products": products}

        deleted = self.call_store(delete, f"deleting seller {seller_pk}")
        if deleted.ok:
            self.logger.info(f"Deleted seller {seller_pk} with {deleted.value['products']} products")
        return deleted

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def total_products(self, seller_id) -> ServiceResult[int]:
        return self._dashboard(seller_id, self.sales_service.total_products)

    @BaseService.log_performance
    def total_orders(self, seller_id) -> ServiceResult[int]:
        return self._dashboard(seller_id, self.sales_service.total_orders)

    @BaseService.log_performance
    def total_revenue(self, seller_id) -> ServiceResult:
        return self._dashboard(seller_id, self.sales_service.total_revenue)

    @BaseService.log_performance
    def sales_data(self, seller_id, period: str) -> ServiceResult[List[Dict]]:
        found = self._get(seller_id)
        if not found.ok:
            return found
        return self.sales_service.sales_data(period, seller_id=found.value.id)

    def _dashboard(self, seller_id, query) -> ServiceResult:
        found = self._get(seller_id)
        if not found.ok:
            return found
        return query(seller_id=found.value.id)
