"""
Storage Interface
=================

Contract for the media host that keeps product images.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StorageFile:
    """
    Represents a stored file with its metadata.

    Attributes:
        key: Unique identifier/path for the file
        url: Public URL to access the file
        size: File size in bytes
        content_type: MIME type of the file
        bucket: Storage bucket/container name (optional)
    """

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    """
    Abstract interface for media storage operations.

    Concrete implementations:
        - S3StorageAdapter: AWS S3 / MinIO via django-storages
        - MockStorageAdapter: In-memory storage for tests and local runs
    """

    @abstractmethod
    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        """
        Upload a file to storage.

        Args:
            file: Binary file object to upload
            path: Destination path/key in storage
            content_type: MIME type of the file

        Returns:
            StorageFile object with metadata

        Raises:
            StorageException: If upload fails
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete a file from storage.

        Returns:
            True if a file was deleted, False if nothing was stored under the key

        Raises:
            StorageException: If deletion fails critically
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a file exists in storage."""

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """Storage bucket/container name."""


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
