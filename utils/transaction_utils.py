"""
Store Transaction Utilities for LL-CART Backend
===============================================

Retry and transaction helpers shared by every service that talks to the store.

Failures are split in two families:

- transient: the connection dropped, the server went away, a lock could not be
  acquired in time (``OperationalError`` / ``InterfaceError``). These are
  retried with exponential backoff.
- permanent: the data itself is wrong (``IntegrityError`` / ``DataError``).
  These are raised immediately, retrying would only repeat the failure.

Usage Examples:
    # Function decorator
    @retry_on_transient_error(max_retries=3)
    def load_cart(buyer_id):
        return list(CartLine.objects.filter(buyer_id=buyer_id))

    # Context manager
    with rollback_safe_operation("Checkout"):
        create_orders()
        clear_cart()
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps

from django.db import DataError, IntegrityError, InterfaceError, OperationalError, connection

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (OperationalError, InterfaceError)
PERMANENT_ERRORS = (IntegrityError, DataError)


class TransactionError(Exception):
    """Custom exception for transaction-related errors"""

    pass


class StoreUnavailableError(TransactionError):
    """Raised when the store stays unreachable after every retry"""

    pass


def retry_on_transient_error(max_retries=3, delay=0.1, backoff=2.0):
    """
    Decorator to retry store operations on transient failures with exponential backoff.

    Retries are skipped while an outer atomic block is open: the enclosing
    transaction is already broken and only its owner can restart it.

    Args:
        max_retries (int): Maximum number of retry attempts
        delay (float): Initial delay between retries in seconds
        backoff (float): Backoff multiplier for delay

    Raises:
        StoreUnavailableError: once every attempt failed with a transient error
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay
            last_error = None

            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except PERMANENT_ERRORS:
                    raise
                except TRANSIENT_ERRORS as e:
                    last_error = e
                    if connection.in_atomic_block:
                        logger.warning(f"Transient store error inside an open transaction in {func.__name__}: {e}")
                        break
                    if attempt < max_retries:
                        logger.warning(
                            f"Transient store error in {func.__name__}, retrying in {current_delay}s "
                            f"(attempt {attempt + 1}/{max_retries}): {e}"
                        )
                        time.sleep(current_delay)
                        current_delay *= backoff
                        continue

            logger.error(f"Store unavailable for {func.__name__}: {last_error}")
            raise StoreUnavailableError(f"Store unavailable: {last_error}") from last_error

        return wrapper

    return decorator


@contextmanager
def rollback_safe_operation(operation_name="Unknown"):
    """
    Context manager that logs the outcome of a multi-step store operation.

    Args:
        operation_name (str): Name of the operation for logging

    Usage:
        with transaction.atomic(), rollback_safe_operation("Checkout"):
            create_orders()
            clear_cart()
    """
    start_time = time.time()
    logger.info(f"Starting rollback-safe operation: {operation_name}")

    try:
        yield
        elapsed = time.time() - start_time
        logger.info(f"Operation '{operation_name}' completed successfully in {elapsed:.3f}s")
    except Exception as e:
        elapsed = time.time() - start_time
        logger.error(f"Operation '{operation_name}' failed after {elapsed:.3f}s: {e}")
        logger.info(f"Rolling back operation: {operation_name}")
        raise
