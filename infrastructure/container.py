"""
Dependency Injection Container
================================

Simple service locator for infrastructure and domain services.
Views ask the container for a service; services receive their collaborators
through their constructors.

Usage:
    from infrastructure.container import container

    cart_service = container.cart_service()
    storage = container.storage()
"""

import logging
from typing import Optional

from .email import EmailFactory, EmailServiceInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure and domain dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton: every ``ServiceContainer()`` call returns the same object.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._clear()
            self._initialized = True
            logger.info("Service container initialized")

    def _clear(self):
        self._storage: Optional[StorageInterface] = None
        self._email: Optional[EmailServiceInterface] = None

        # Domain Services
        self._cart_service = None
        self._catalog_service = None
        self._order_service = None
        self._sales_service = None
        self._buyer_service = None
        self._seller_service = None
        self._admin_service = None
        self._address_service = None

    def storage(self) -> StorageInterface:
        """Get the media storage backend (cached)."""
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def email(self) -> EmailServiceInterface:
        """Get the email service (cached)."""
        if self._email is None:
            self._email = EmailFactory.create()
            logger.debug(f"Created email service: {type(self._email).__name__}")
        return self._email

    def cart_service(self):
        """Get CartService instance."""
        if self._cart_service is None:
            from marketplace.services import CartService

            self._cart_service = CartService()
            logger.debug("Created CartService")
        return self._cart_service

    def catalog_service(self):
        """Get CatalogService instance."""
        if self._catalog_service is None:
            from marketplace.services import CatalogService

            self._catalog_service = CatalogService(storage=self.storage())
            logger.debug("Created CatalogService")
        return self._catalog_service

    def order_service(self):
        """Get OrderService instance."""
        if self._order_service is None:
            from marketplace.services import OrderService

            self._order_service = OrderService(cart_service=self.cart_service())
            logger.debug("Created OrderService")
        return self._order_service

    def sales_service(self):
        """Get SalesReportService instance."""
        if self._sales_service is None:
            from marketplace.services import SalesReportService

            self._sales_service = SalesReportService()
            logger.debug("Created SalesReportService")
        return self._sales_service

    def buyer_service(self):
        """Get BuyerService instance."""
        if self._buyer_service is None:
            from authentication.domain.services import BuyerService

            self._buyer_service = BuyerService(email_service=self.email())
            logger.debug("Created BuyerService")
        return self._buyer_service

    def seller_service(self):
        """Get SellerService instance."""
        if self._seller_service is None:
            from authentication.domain.services import SellerService

            self._seller_service = SellerService(email_service=self.email(), sales_service=self.sales_service())
            logger.debug("Created SellerService")
        return self._seller_service

    def admin_service(self):
        """Get AdminService instance."""
        if self._admin_service is None:
            from authentication.domain.services import AdminService

            self._admin_service = AdminService(
                sales_service=self.sales_service(),
                buyer_service=self.buyer_service(),
                seller_service=self.seller_service(),
            )
            logger.debug("Created AdminService")
        return self._admin_service

    def address_service(self):
        """Get AddressService instance."""
        if self._address_service is None:
            from authentication.domain.services import AddressService

            self._address_service = AddressService()
            logger.debug("Created AddressService")
        return self._address_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._clear()
        logger.info("Service container reset")

    def configure_for_testing(self):
        """
        Configure container with mock collaborators for testing.

        Sets up:
            - In-memory storage (instead of S3)
            - Mock email service (instead of SMTP)
        """
        self._clear()
        self._storage = StorageFactory.create("mock")
        self._email = EmailFactory.create("mock")
        logger.info("Service container configured for testing")


# Global singleton instance
container = ServiceContainer()


def get_storage() -> StorageInterface:
    """Get storage service from global container."""
    return container.storage()


def get_email() -> EmailServiceInterface:
    """Get email service from global container."""
    return container.email()
