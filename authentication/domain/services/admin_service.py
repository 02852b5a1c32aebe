"""
AdminService - Platform Administration

Admin credentials plus the moderation and reporting operations of the admin
dashboard. Seller and buyer management delegates to their own services.
"""

import logging
from typing import Any, Dict, List

from django.db import IntegrityError, transaction

from authentication.models import Admin, Buyer, Seller
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

logger = logging.getLogger(__name__)


class AdminService(BaseService):
    """
    Admin service.

    Dependencies:
    - SalesReportService: platform totals and rollups
    - BuyerService / SellerService: account management
    """

    def __init__(self, sales_service=None, buyer_service=None, seller_service=None):
        super().__init__()
        if sales_service is None or buyer_service is None or seller_service is None:
            from infrastructure.container import container

            sales_service = sales_service or container.sales_service()
            buyer_service = buyer_service or container.buyer_service()
            seller_service = seller_service or container.seller_service()
        self.sales_service = sales_service
        self.buyer_service = buyer_service
        self.seller_service = seller_service

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def register(self, username: str, password: str) -> ServiceResult[Admin]:
        username = username.strip() if isinstance(username, str) else ""
        if not username or not isinstance(password, str) or not password:
            return service_err(ErrorCodes.INVALID_INPUT, "Username and password are required")

        admin = Admin(username=username)
        admin.set_password(password)

        def create():
            try:
                with transaction.atomic():
                    admin.save()
            except IntegrityError:
                return service_err(ErrorCodes.ACCOUNT_EXISTS, f"Admin '{username}' already exists")
            return admin

        created = self.call_store(create, f"registering admin {mask_value(username)}")
        if created.ok:
            self.logger.info(f"Registered admin {admin.id}")
        return created

    @BaseService.log_performance
    def login(self, username: str, password: str) -> ServiceResult[Admin]:
        if not isinstance(username, str) or not isinstance(password, str) or not username.strip() or not password:
            return service_err(ErrorCodes.INVALID_INPUT, "Username and password are required")

        found = self.call_store(
            lambda: Admin.objects.filter(username=username.strip()).first(), f"loading admin {mask_value(username)}"
        )
        if not found.ok:
            return found
        admin = found.value
        if admin is None or not admin.check_password(password):
            self.logger.warning(f"Failed admin login for {mask_value(username)}")
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid username or password")

        return service_ok(admin)

    # ------------------------------------------------------------------
    # Account management
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def add_seller(self, data: Dict[str, Any]) -> ServiceResult[Seller]:
        """Create a seller account that is approved from the start."""
        return self.seller_service.register(data, status=Seller.STATUS_APPROVED)

    def list_sellers(self) -> ServiceResult[List[Seller]]:
        return self.seller_service.list_sellers()

    def list_pending_sellers(self) -> ServiceResult[List[Seller]]:
        return self.seller_service.list_pending()

    def list_buyers(self) -> ServiceResult[List[Buyer]]:
        return self.buyer_service.list_buyers()

    def approve_seller(self, seller_id) -> ServiceResult[Seller]:
        return self.seller_service.approve(seller_id)

    def reject_seller(self, seller_id) -> ServiceResult[Seller]:
        return self.seller_service.reject(seller_id)

    def delete_seller(self, seller_id) -> ServiceResult:
        return self.seller_service.delete_seller(seller_id)

    def delete_buyer(self, buyer_id) -> ServiceResult:
        return self.buyer_service.delete_buyer(buyer_id)

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def total_sellers(self) -> ServiceResult[int]:
        return self.call_store(Seller.objects.count, "counting sellers")

    @BaseService.log_performance
    def total_buyers(self) -> ServiceResult[int]:
        return self.call_store(Buyer.objects.count, "counting buyers")

    def total_products(self) -> ServiceResult[int]:
        return self.sales_service.total_products()

    def total_orders(self) -> ServiceResult[int]:
        return self.sales_service.total_orders()

    def total_revenue(self) -> ServiceResult:
        return self.sales_service.total_revenue()

    def sales_data(self, period: str) -> ServiceResult[List[Dict]]:
        return self.sales_service.sales_data(period)
