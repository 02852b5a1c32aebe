"""
Storage Factory
===============

Creates the media storage backend selected in settings.
"""

import logging
from typing import Literal

from django.conf import settings

from .interface import StorageInterface
from .mock_adapter import MockStorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["s3", "mock"]


class StorageFactory:
    """
    Factory for creating storage backends.

    Usage:
        # In settings.py
        INFRASTRUCTURE = {"STORAGE_BACKEND": "s3"}  # or 'mock'

        # In your code
        storage = StorageFactory.create()
    """

    @staticmethod
    def create(backend: StorageBackend | None = None) -> StorageInterface:
        """
        Create a storage backend instance.

        Args:
            backend: 's3' or 'mock'. If None, reads INFRASTRUCTURE["STORAGE_BACKEND"]

        Raises:
            ValueError: If backend type is invalid
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("STORAGE_BACKEND", "s3")

        logger.info(f"Creating storage backend: {backend_type}")

        if backend_type == "s3":
            # Imported lazily so the mock backend works without boto3 credentials
            from .s3_adapter import S3StorageAdapter

            return S3StorageAdapter()
        elif backend_type == "mock":
            return MockStorageAdapter()
        else:
            raise ValueError(f"Invalid storage backend: {backend_type}. Must be 's3' or 'mock'")
