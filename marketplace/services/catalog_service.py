"""
CatalogService - Product Catalog Operations

Handles product CRUD and browsing (all products, by seller, by category).
Product images are pushed to the media storage backend under ``llcart/products/``;
the returned public URL and storage key are kept on the product.
"""

import logging
import os
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from django.db import transaction

from authentication.models import Seller
from infrastructure.storage import StorageException, StorageInterface
from marketplace.models import Product
from utils.service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_FOLDER = "llcart/products"
EDITABLE_FIELDS = ("category", "name", "description", "cost")


class CatalogService(BaseService):
    """
    Service for product catalog operations.

    Responsibilities:
    - Create, update and delete products
    - Browse products (all, per seller, per category, single)
    - Upload product images via the storage abstraction

    Dependencies:
    - StorageInterface: media host for product images
    """

    def __init__(self, storage: Optional[StorageInterface] = None):
        """
        Initialize CatalogService.

        Args:
            storage: Storage abstraction (injected via DI container)
        """
        super().__init__()
        if storage is None:
            from infrastructure.container import container

            storage = container.storage()
        self.storage = storage

    # ------------------------------------------------------------------
    # Browsing
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def list_products(self) -> ServiceResult[List[Product]]:
        """All products, newest first."""
        return self._query(Product.objects.all())

    @BaseService.log_performance
    def list_by_seller(self, seller_id) -> ServiceResult[List[Product]]:
        seller_uuid = parse_id(seller_id)
        if seller_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid seller id: {seller_id}")
        return self._query(Product.objects.filter(seller_id=seller_uuid))

    @BaseService.log_performance
    def list_by_category(self, category: str) -> ServiceResult[List[Product]]:
        if not category or not str(category).strip():
            return service_err(ErrorCodes.INVALID_INPUT, "Category is required")
        return self._query(Product.objects.filter(category=str(category).strip()))

    def _query(self, queryset) -> ServiceResult[List[Product]]:
        return self.call_store(lambda: list(queryset.select_related("seller")), "listing products")

    @BaseService.log_performance
    def get_product(self, product_id) -> ServiceResult[Product]:
        """
        Get a single product by id.

        Returns:
            ServiceResult with the Product, or ``product_not_found``
        """
        product_uuid = parse_id(product_id)
        if product_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid product id: {product_id}")

        found = self.call_store(
            lambda: Product.objects.select_related("seller").filter(id=product_uuid).first(),
            f"getting product {product_uuid}",
        )
        if found.ok and found.value is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_uuid} not found")
        return found

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def add_product(self, seller_id, data: Dict[str, Any], image_file=None) -> ServiceResult[Product]:
        """
        Create a new product for a seller.

        Args:
            seller_id: Seller UUID (must exist)
            data: Dict with:
                - category: str
                - name: str
                - description: str (optional)
                - cost: number >= 0
            image_file: Optional uploaded image

        Returns:
            ServiceResult with the created Product

        Example:
            >>> result = catalog_service.add_product(seller_id, {"name": "Lamp", "category": "home", "cost": "12.50"})
            >>> if result.ok:
            ...     product = result.value
        """
        seller_uuid = parse_id(seller_id)
        if seller_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid seller id: {seller_id}")

        cleaned = self._clean(data, partial=False)
        if not cleaned.ok:
            return cleaned

        found = self.call_store(
            lambda: Seller.objects.filter(id=seller_uuid).first(), f"loading seller {seller_uuid}"
        )
        if not found.ok:
            return found
        if found.value is None:
            return service_err(ErrorCodes.SELLER_NOT_FOUND, f"Seller {seller_uuid} not found")

        stored = None
        if image_file is not None:
            upload = self._upload_image(image_file)
            if not upload.ok:
                return upload
            stored = upload.value

        product = Product(seller=found.value, **cleaned.value)
        if stored is not None:
            product.image_url = stored.url
            product.image_key = stored.key

        saved = self.call_store(product.save, f"adding product for seller {seller_uuid}")
        if not saved.ok:
            if stored is not None:
                self._discard_image(stored.key)
            return saved

        self.logger.info(f"Product {product.id} '{product.name}' added by seller {seller_uuid}")
        return service_ok(product)

    @BaseService.log_performance
    def update_product(self, product_id, data: Dict[str, Any], image_file=None) -> ServiceResult[Product]:
        """
        Update an existing product.

        Only the fields present in ``data`` change. A new image replaces the
        old one (the old file is deleted from storage); without one the current
        image is kept.
        """
        product_uuid = parse_id(product_id)
        if product_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid product id: {product_id}")

        cleaned = self._clean(data, partial=True)
        if not cleaned.ok:
            return cleaned

        found = self.call_store(
            lambda: Product.objects.filter(id=product_uuid).first(), f"loading product {product_uuid}"
        )
        if not found.ok:
            return found
        product = found.value
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_uuid} not found")

        old_key, new_key = None, None
        if image_file is not None:
            upload = self._upload_image(image_file)
            if not upload.ok:
                return upload
            old_key, new_key = product.image_key, upload.value.key
            product.image_url = upload.value.url
            product.image_key = new_key

        for field, value in cleaned.value.items():
            setattr(product, field, value)

        saved = self.call_store(product.save, f"updating product {product_uuid}")
        if not saved.ok:
            if new_key:
                self._discard_image(new_key)
            return saved

        if old_key:
            self._discard_image(old_key)

        self.logger.info(f"Product {product.id} updated: {sorted(cleaned.value)}")
        return service_ok(product)

    @BaseService.log_performance
    def delete_product(self, product_id) -> ServiceResult[bool]:
        """
        Delete a product and its stored image.

        Cart lines holding the product go with it; orders keep their snapshot.
        """
        product_uuid = parse_id(product_id)
        if product_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid product id: {product_id}")

        def delete():
            with transaction.atomic():
                product = Product.objects.select_for_update().filter(id=product_uuid).first()
                if product is None:
                    return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_uuid} not found")
                image_key = product.image_key
                product.delete()
            return image_key

        deleted = self.call_store(delete, f"deleting product {product_uuid}")
        if not deleted.ok:
            return deleted

        if deleted.value:
            self._discard_image(deleted.value)

        self.logger.info(f"Product {product_uuid} deleted")
        return service_ok(True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _clean(self, data: Dict[str, Any], partial: bool) -> ServiceResult[Dict[str, Any]]:
        cleaned = {}
        for field in EDITABLE_FIELDS:
            if field in data and data[field] is not None:
                cleaned[field] = data[field]

        for field in ("category", "name"):
            if field in cleaned:
                cleaned[field] = str(cleaned[field]).strip()
                if not cleaned[field]:
                    return service_err(ErrorCodes.INVALID_PRODUCT_DATA, f"Product {field} cannot be blank")
            elif not partial:
                return service_err(ErrorCodes.INVALID_PRODUCT_DATA, f"Product {field} is required")

        if "cost" in cleaned:
            try:
                cost = Decimal(str(cleaned["cost"]))
            except InvalidOperation:
                return service_err(ErrorCodes.INVALID_PRODUCT_DATA, f"Invalid cost: {cleaned['cost']}")
            if not cost.is_finite() or cost < 0:
                return service_err(ErrorCodes.INVALID_PRODUCT_DATA, "Cost must be a non-negative number")
            cleaned["cost"] = cost.quantize(Decimal("0.01"))
        elif not partial:
            return service_err(ErrorCodes.INVALID_PRODUCT_DATA, "Product cost is required")

        if "description" in cleaned:
            cleaned["description"] = str(cleaned["description"])

        return service_ok(cleaned)

    def _upload_image(self, image_file) -> ServiceResult:
        """Upload a product image and return the StorageFile."""
        name = getattr(image_file, "name", "") or ""
        _, ext = os.path.splitext(name)
        key = f"{PRODUCT_IMAGE_FOLDER}/{uuid.uuid4().hex}{ext.lower()}"
        content_type = getattr(image_file, "content_type", None) or "application/octet-stream"

        try:
            stored = self.storage.upload(image_file, key, content_type)
            self.logger.info(f"Uploaded product image to {stored.key} ({stored.size} bytes)")
            return service_ok(stored)
        except StorageException as e:
            self.logger.error(f"Failed to upload product image {name}: {e}")
            return service_err(ErrorCodes.IMAGE_UPLOAD_FAILED, "Failed to upload product image")

    def _discard_image(self, key: str) -> None:
        # Best effort, failures are only logged
        try:
            self.storage.delete(key)
        except StorageException as e:
            self.logger.warning(f"Could not delete product image {key}: {e}")
