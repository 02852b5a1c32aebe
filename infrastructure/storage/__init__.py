"""
Storage Abstraction Layer
==========================

Unified interface for product image hosting (S3 or in-memory).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .mock_adapter import MockStorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "MockStorageAdapter",
    "StorageFactory",
]
