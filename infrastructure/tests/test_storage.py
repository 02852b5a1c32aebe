"""
Storage Infrastructure Tests
=============================

Unit tests for the product image storage abstraction layer.
"""

from io import BytesIO
from unittest.mock import MagicMock, patch

from django.test import TestCase, override_settings

from infrastructure.storage import MockStorageAdapter, StorageException, StorageFactory, StorageFile, StorageInterface


class StorageInterfaceTest(TestCase):
    """Test StorageInterface contract."""

    def test_interface_is_abstract(self):
        """StorageInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            StorageInterface()


class MockStorageAdapterTest(TestCase):
    def setUp(self):
        self.storage = MockStorageAdapter()

    def test_upload_keeps_content_and_returns_public_url(self):
        result = self.storage.upload(BytesIO(b"png-bytes"), "llcart/products/a.png", "image/png")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "llcart/products/a.png")
        self.assertEqual(result.url, "https://media.llcart.test/llcart/products/a.png")
        self.assertEqual(result.size, len(b"png-bytes"))
        self.assertEqual(result.bucket, "mock-bucket")
        self.assertTrue(self.storage.exists("llcart/products/a.png"))

    def test_delete_reports_whether_something_was_removed(self):
        self.storage.upload(BytesIO(b"x"), "k", "image/png")

        self.assertTrue(self.storage.delete("k"))
        self.assertFalse(self.storage.delete("k"))
        self.assertFalse(self.storage.exists("k"))


@override_settings(
    AWS_STORAGE_BUCKET_NAME="test-bucket",
    AWS_ACCESS_KEY_ID="test-key",
    AWS_SECRET_ACCESS_KEY="test-secret",
)
class S3StorageAdapterTest(TestCase):
    """Test S3StorageAdapter implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_content = b"S3 test content"

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_upload_file_success(self, mock_storage_class):
        """Test successful file upload to S3."""
        from infrastructure.storage.s3_adapter import S3StorageAdapter

        mock_storage = MagicMock()
        mock_storage_class.return_value = mock_storage
        mock_storage.save.return_value = "llcart/products/s3upload.png"
        mock_storage.size.return_value = len(self.test_content)
        mock_storage.url.return_value = "https://s3.amazonaws.com/test-bucket/llcart/products/s3upload.png"

        adapter = S3StorageAdapter()
        result = adapter.upload(BytesIO(self.test_content), "llcart/products/s3upload.png", "image/png")

        self.assertEqual(result.key, "llcart/products/s3upload.png")
        self.assertEqual(result.url, "https://s3.amazonaws.com/test-bucket/llcart/products/s3upload.png")
        self.assertEqual(result.size, len(self.test_content))
        self.assertEqual(result.bucket, "test-bucket")

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_upload_failure_raises_storage_exception(self, mock_storage_class):
        from infrastructure.storage.s3_adapter import S3StorageAdapter

        mock_storage = MagicMock()
        mock_storage_class.return_value = mock_storage
        mock_storage.save.side_effect = Exception("S3 connection error")

        adapter = S3StorageAdapter()
        with self.assertRaises(StorageException):
            adapter.upload(BytesIO(self.test_content), "llcart/products/x.png", "image/png")

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_delete_missing_file_returns_false(self, mock_storage_class):
        from infrastructure.storage.s3_adapter import S3StorageAdapter

        mock_storage = MagicMock()
        mock_storage_class.return_value = mock_storage
        mock_storage.exists.return_value = False

        adapter = S3StorageAdapter()

        self.assertFalse(adapter.delete("missing.png"))
        mock_storage.delete.assert_not_called()


class StorageFactoryTest(TestCase):
    def test_create_mock(self):
        self.assertIsInstance(StorageFactory.create("mock"), MockStorageAdapter)

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "mock"})
    def test_create_from_settings(self):
        self.assertIsInstance(StorageFactory.create(), MockStorageAdapter)

    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("ftp")
