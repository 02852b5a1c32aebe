"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern (inspired by Rust's Result type)
and BaseService class shared by the marketplace and authentication services.

Guidelines
- Keep services stateless; pass dependencies via the constructor.
- Return structured results instead of raising for expected outcomes.
- Reserve exceptions for truly exceptional/unrecoverable scenarios.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

from .transaction_utils import StoreUnavailableError, retry_on_transient_error

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(cart_line)
        >>> if result.ok:
        ...     return Response(result.value, 200)
        >>> else:
        ...     return Response({"detail": result.error_detail}, 400)

        >>> result = service_err("product_not_found", "Product with ID 123 does not exist")
        >>> print(result.error)  # "product_not_found"
        >>> print(result.error_detail)  # "Product with ID 123 does not exist"
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T = None) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Args:
        value: The success value (may be None for void operations)

    Returns:
        ServiceResult with ok=True and the value
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "product_not_found", "invalid_quantity")
        error_detail: Human-readable error message

    Returns:
        ServiceResult with ok=False and error information

    Example:
        >>> return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


def parse_id(raw: Any) -> Optional[uuid.UUID]:
    """Parse an opaque record id, returning None when it is malformed."""
    if isinstance(raw, uuid.UUID):
        return raw
    if raw is None:
        return None
    try:
        return uuid.UUID(str(raw).strip())
    except (ValueError, AttributeError):
        return None


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class CatalogService(BaseService):
            def __init__(self, storage):
                super().__init__()
                self.storage = storage

            @BaseService.log_performance
            def list_products(self):
                self.logger.info("Listing products")
                # ... implementation
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and the outcome when the method returns a ServiceResult.

        Args:
            func: The service method to wrap

        Returns:
            Wrapped function with performance logging
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper

    def call_store(self, operation: Callable[[], Any], description: str) -> ServiceResult:
        """
        Run a store operation with transient-error retries.

        The operation's return value becomes the success value; a ServiceResult
        it returns (e.g. a not-found) is passed through unchanged. A store that
        stays unreachable gives ``database_unavailable``.

        Keep side effects other than store writes (emails, uploads) out of
        ``operation``: it may run more than once.

        Example:
            >>> found = self.call_store(lambda: Buyer.objects.filter(id=buyer_id).first(), "loading buyer")
        """
        try:
            value = retry_on_transient_error(max_retries=3)(operation)()
        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error {description}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

        if isinstance(value, ServiceResult):
            return value
        return service_ok(value)


# Common error codes for LL-CART services
class ErrorCodes:
    """Standard error codes used across services."""

    # Product errors
    PRODUCT_NOT_FOUND = "product_not_found"
    INVALID_PRODUCT_DATA = "invalid_product_data"
    IMAGE_UPLOAD_FAILED = "image_upload_failed"

    # Cart errors
    CART_EMPTY = "cart_empty"
    INVALID_QUANTITY = "invalid_quantity"
    ITEM_NOT_IN_CART = "item_not_in_cart"

    # Order errors
    ORDER_NOT_FOUND = "order_not_found"

    # Account errors
    BUYER_NOT_FOUND = "buyer_not_found"
    SELLER_NOT_FOUND = "seller_not_found"
    ADDRESS_NOT_FOUND = "address_not_found"
    ACCOUNT_EXISTS = "account_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    SELLER_NOT_APPROVED = "seller_not_approved"
    INVALID_RESET_TOKEN = "invalid_reset_token"

    # Validation errors
    VALIDATION_ERROR = "validation_error"
    INVALID_INPUT = "invalid_input"

    # Internal errors
    INTERNAL_ERROR = "internal_error"
    DATABASE_UNAVAILABLE = "database_unavailable"

