"""
Mock Storage Adapter
====================

In-memory media host used by tests and by local runs without S3 credentials.
"""

import logging
from typing import BinaryIO, Dict

from .interface import StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class MockStorageAdapter(StorageInterface):
    """
    Keeps uploaded files in a dict and hands out fake public URLs.

    Useful for:
        - Unit and integration tests
        - Development environments without a bucket
    """

    base_url = "https://media.llcart.test"

    def __init__(self):
        self.files: Dict[str, bytes] = {}

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        content = file.read()
        self.files[path] = content

        logger.info(f"[MOCK STORAGE] Stored {len(content)} bytes at {path}")

        return StorageFile(
            key=path,
            url=f"{self.base_url}/{path}",
            size=len(content),
            content_type=content_type,
            bucket=self.bucket_name,
        )

    def delete(self, key: str) -> bool:
        removed = self.files.pop(key, None) is not None
        logger.info(f"[MOCK STORAGE] Delete {key}: {'removed' if removed else 'absent'}")
        return removed

    def exists(self, key: str) -> bool:
        return key in self.files

    @property
    def bucket_name(self) -> str:
        return "mock-bucket"
