"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from unittest.mock import MagicMock, patch

from django.test import TestCase, override_settings

from infrastructure.container import ServiceContainer, container, get_email, get_storage
from infrastructure.email import EmailServiceInterface, MockEmailService
from infrastructure.storage import MockStorageAdapter, StorageInterface


class ServiceContainerTest(TestCase):
    """Test ServiceContainer implementation."""

    def setUp(self):
        """Set up test fixtures."""
        # Reset container before each test
        container.reset()

    def tearDown(self):
        container.reset()

    def test_container_is_singleton(self):
        """Test that ServiceContainer is a singleton."""
        container1 = ServiceContainer()
        container2 = ServiceContainer()

        self.assertIs(container1, container2)
        self.assertIs(container1, container)

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "s3", "EMAIL_BACKEND_TYPE": "mock"})
    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_get_storage_returns_s3(self, mock_storage):
        """Test getting storage returns the S3 adapter when configured."""
        from infrastructure.storage.s3_adapter import S3StorageAdapter

        mock_storage.return_value = MagicMock()

        storage = container.storage()

        self.assertIsInstance(storage, StorageInterface)
        self.assertIsInstance(storage, S3StorageAdapter)

        # Second call should return cached instance
        self.assertIs(storage, container.storage())

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "mock", "EMAIL_BACKEND_TYPE": "mock"})
    def test_get_email_service(self):
        """Test getting email service from container."""
        email = container.email()

        self.assertIsInstance(email, EmailServiceInterface)
        self.assertIsInstance(email, MockEmailService)

        # Second call should return cached instance
        self.assertIs(email, container.email())

    def test_configure_for_testing_uses_mocks(self):
        container.configure_for_testing()

        self.assertIsInstance(container.storage(), MockStorageAdapter)
        self.assertIsInstance(container.email(), MockEmailService)

    def test_reset_clears_cached_services(self):
        container.configure_for_testing()
        cart_service = container.cart_service()
        storage = container.storage()

        container.reset()
        container.configure_for_testing()

        self.assertIsNot(cart_service, container.cart_service())
        self.assertIsNot(storage, container.storage())

    def test_domain_services_share_collaborators(self):
        container.configure_for_testing()

        self.assertIs(container.catalog_service().storage, container.storage())
        self.assertIs(container.order_service().cart_service, container.cart_service())
        self.assertIs(container.seller_service().sales_service, container.sales_service())
        self.assertIs(container.admin_service().buyer_service, container.buyer_service())
        self.assertIs(container.buyer_service().mailer.email_service, container.email())

    def test_helper_functions(self):
        container.configure_for_testing()

        self.assertIs(get_storage(), container.storage())
        self.assertIs(get_email(), container.email())
