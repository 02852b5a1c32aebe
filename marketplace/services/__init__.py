"""
Marketplace Service Layer

This package contains the business logic for the marketplace app, organized
into domain services.

Services:
- CartService: Shopping cart operations
- CatalogService: Product browsing and CRUD
- OrderService: Checkout and order history
- SalesReportService: Sales totals and rollups

Usage:
    from marketplace.services import CartService, service_ok, service_err

    cart_service = container.cart_service()
    result = cart_service.add_to_cart(buyer_id, product_id, quantity=2)

    if result.ok:
        line = result.value
    else:
        error = result.error
"""

from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .cart_service import CartService
from .catalog_service import CatalogService
from .order_service import OrderService
from .sales_service import SalesReportService

__all__ = [
    # Base classes
    "BaseService",
    "ServiceResult",
    # Helper functions
    "service_ok",
    "service_err",
    # Error codes
    "ErrorCodes",
    # Services
    "CartService",
    "CatalogService",
    "OrderService",
    "SalesReportService",
]
