"""
CartService - Shopping Cart Operations

Handles shopping cart operations: add, list, count, remove, update and clear.

A buyer's cart is the set of CartLine rows that reference them; there is at most
one line per (buyer, product), enforced by a unique constraint. Quantity changes
are single conditional UPDATE statements, so two concurrent adds of the same
product always end as one line holding the summed quantity.
"""

import logging
from typing import List, Optional

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from authentication.models import Buyer
from marketplace.models import CartLine, Product
from utils.service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok
from utils.transaction_utils import StoreUnavailableError, retry_on_transient_error

logger = logging.getLogger(__name__)

# Upper bound of CartLine.quantity (PositiveIntegerField)
MAX_LINE_QUANTITY = 2147483647
INVALID_QUANTITY_MESSAGE = f"Quantity must be a whole number between 1 and {MAX_LINE_QUANTITY}"


def coerce_quantity(raw) -> Optional[int]:
    """Parse a requested quantity; None when it is not a whole number within MAX_LINE_QUANTITY."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        quantity = raw
    else:
        try:
            quantity = int(str(raw).strip())
        except (TypeError, ValueError):
            return None
    return quantity if quantity <= MAX_LINE_QUANTITY else None


class CartService(BaseService):
    """
    Service for managing shopping cart lines.

    Responsibilities:
    - Add items to cart (merging quantities per product)
    - List and count a buyer's cart lines
    - Update a line's quantity
    - Remove a line / clear a buyer's cart

    Every failure is reported as a ServiceResult; views map the error code to
    an HTTP status.
    """

    def __init__(self):
        super().__init__()

    @BaseService.log_performance
    def add_to_cart(self, buyer_id, product_id, quantity=1) -> ServiceResult[CartLine]:
        """
        Add ``quantity`` units of a product to the buyer's cart.

        If the buyer already holds a line for the product its quantity is
        increased, otherwise a new line is created.

        Args:
            buyer_id: Buyer UUID
            product_id: Product UUID
            quantity: Units to add (default: 1, must be positive)

        Returns:
            ServiceResult with the resulting CartLine (product loaded)

        Example:
            >>> result = cart_service.add_to_cart(buyer_id, product_id, quantity=2)
            >>> if result.ok:
            ...     line = result.value
        """
        quantity = coerce_quantity(quantity)
        if quantity is None or quantity <= 0:
            return service_err(ErrorCodes.INVALID_QUANTITY, INVALID_QUANTITY_MESSAGE)

        buyer_uuid = parse_id(buyer_id)
        product_uuid = parse_id(product_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")
        if product_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid product id: {product_id}")

        try:
            missing = self._missing_reference(buyer_uuid, product_uuid)
            if missing is not None:
                return missing

            line = self._upsert_line(buyer_uuid, product_uuid, quantity)
            if line is None:
                return service_err(
                    ErrorCodes.INVALID_QUANTITY, f"Cart line would exceed {MAX_LINE_QUANTITY} units"
                )

            self.logger.info(f"Cart of buyer {buyer_uuid}: product {product_uuid} now x{line.quantity}")
            return service_ok(line)

        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error adding to cart for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _missing_reference(self, buyer_id, product_id) -> Optional[ServiceResult]:
        if not Buyer.objects.filter(id=buyer_id).exists():
            return service_err(ErrorCodes.BUYER_NOT_FOUND, f"Buyer {buyer_id} not found")
        if not Product.objects.filter(id=product_id).exists():
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")
        return None

    @retry_on_transient_error(max_retries=3)
    def _upsert_line(self, buyer_id, product_id, quantity: int) -> Optional[CartLine]:
        """Merge ``quantity`` into the (buyer, product) line; None when it would pass MAX_LINE_QUANTITY."""
        lines = CartLine.objects.filter(buyer_id=buyer_id, product_id=product_id)
        with transaction.atomic():
            if not self._increment(buyer_id, product_id, quantity):
                try:
                    with transaction.atomic():
                        CartLine.objects.create(buyer_id=buyer_id, product_id=product_id, quantity=quantity)
                except IntegrityError:
                    # Another request inserted the line between our UPDATE and INSERT,
                    # or the existing line has no room left
                    if not self._increment(buyer_id, product_id, quantity):
                        if lines.exists():
                            return None
                        raise
                    self.logger.debug(f"Concurrent insert for ({buyer_id}, {product_id}), merged quantities")

            return lines.select_related("product").get()

    @staticmethod
    def _increment(buyer_id, product_id, quantity: int) -> int:
        return CartLine.objects.filter(
            buyer_id=buyer_id, product_id=product_id, quantity__lte=MAX_LINE_QUANTITY - quantity
        ).update(quantity=F("quantity") + quantity, updated_at=timezone.now())

    @BaseService.log_performance
    def get_cart_items(self, buyer_id) -> ServiceResult[List[CartLine]]:
        """
        Get every cart line of a buyer with its product loaded.

        An unknown buyer simply has an empty cart.
        """
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")

        try:
            lines = self._load_lines(buyer_uuid)
            self.logger.info(f"Retrieved cart for buyer {buyer_uuid}: {len(lines)} lines")
            return service_ok(lines)
        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error getting cart for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _load_lines(self, buyer_id) -> List[CartLine]:
        return list(CartLine.objects.filter(buyer_id=buyer_id).select_related("product"))

    @BaseService.log_performance
    def get_cart_count(self, buyer_id) -> ServiceResult[int]:
        """Number of distinct lines in the buyer's cart (not the sum of quantities)."""
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")

        try:
            return service_ok(self._count_lines(buyer_uuid))
        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error counting cart for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _count_lines(self, buyer_id) -> int:
        return CartLine.objects.filter(buyer_id=buyer_id).count()

    @BaseService.log_performance
    def remove_cart_item(self, cart_line_id) -> ServiceResult[int]:
        """
        Delete a cart line by its id.

        Removing a line that does not exist is a successful no-op.

        Returns:
            ServiceResult with the number of deleted lines (0 or 1)
        """
        line_uuid = parse_id(cart_line_id)
        if line_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid cart line id: {cart_line_id}")

        try:
            deleted = self._delete_lines(id=line_uuid)
            if deleted:
                self.logger.info(f"Removed cart line {line_uuid}")
            else:
                self.logger.debug(f"Cart line {line_uuid} already absent")
            return service_ok(deleted)
        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error removing cart line {line_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @BaseService.log_performance
    def clear_cart(self, buyer_id) -> ServiceResult[int]:
        """
        Clear all items from the buyer's cart.

        Returns:
            ServiceResult with the number of removed lines

        Example:
            >>> result = cart_service.clear_cart(buyer_id)
            >>> if result.ok:
            ...     print(f"{result.value} lines removed")
        """
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")

        try:
            deleted = self._delete_lines(buyer_id=buyer_uuid)
            self.logger.info(f"Cleared cart for buyer {buyer_uuid}: {deleted} lines removed")
            return service_ok(deleted)
        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error clearing cart for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _delete_lines(self, **lookup) -> int:
        with transaction.atomic():
            deleted, _ = CartLine.objects.filter(**lookup).delete()
        return deleted

    @BaseService.log_performance
    def update_quantity(self, buyer_id, product_id, quantity) -> ServiceResult[CartLine]:
        """
        Set the quantity of an existing cart line.

        Args:
            buyer_id: Buyer UUID
            product_id: Product UUID
            quantity: New quantity (must be > 0)

        Returns:
            ServiceResult with the updated CartLine, or ``item_not_in_cart``
            when the buyer holds no line for the product (nothing is written)
        """
        quantity = coerce_quantity(quantity)
        if quantity is None or quantity <= 0:
            return service_err(ErrorCodes.INVALID_QUANTITY, INVALID_QUANTITY_MESSAGE)

        buyer_uuid = parse_id(buyer_id)
        product_uuid = parse_id(product_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")
        if product_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid product id: {product_id}")

        try:
            line = self._set_quantity(buyer_uuid, product_uuid, quantity)
            if line is None:
                return service_err(ErrorCodes.ITEM_NOT_IN_CART, f"Product {product_uuid} not in cart")

            self.logger.info(f"Updated cart quantity for buyer {buyer_uuid}: product {product_uuid} -> {quantity}")
            return service_ok(line)

        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error updating cart quantity for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _set_quantity(self, buyer_id, product_id, quantity: int) -> Optional[CartLine]:
        with transaction.atomic():
            updated = CartLine.objects.filter(buyer_id=buyer_id, product_id=product_id).update(
                quantity=quantity, updated_at=timezone.now()
            )
            if not updated:
                return None
            return CartLine.objects.select_related("product").get(buyer_id=buyer_id, product_id=product_id)
