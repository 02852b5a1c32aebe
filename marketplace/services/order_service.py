"""
OrderService - Checkout and Order History

Turns a buyer's cart into orders and lists past orders.

One checkout produces one Order per cart line, all sharing the payment
reference of the checkout. Orders are never updated afterwards.
"""

import logging
from typing import List, Optional

from django.db import transaction

from authentication.models import Buyer
from marketplace.models import CartLine, Order
from utils.service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok
from utils.transaction_utils import StoreUnavailableError, retry_on_transient_error, rollback_safe_operation

from .cart_service import CartService

logger = logging.getLogger(__name__)


class OrderService(BaseService):
    """
    Service for checkout and order history.

    Responsibilities:
    - Create orders from the cart (and empty it)
    - Get a single order
    - List orders per buyer, per seller and per payment reference

    Dependencies:
    - CartService: read the cart before checkout
    """

    def __init__(self, cart_service: Optional[CartService] = None):
        """
        Initialize OrderService.

        Args:
            cart_service: Service for cart operations (injected)
        """
        super().__init__()
        self.cart_service = cart_service or CartService()

    @BaseService.log_performance
    def place_order(self, buyer_id, payment_reference: str) -> ServiceResult[List[Order]]:
        """
        Convert the buyer's cart into orders.

        Business Logic:
        1. Validate buyer id and payment reference
        2. Lock the buyer's cart lines
        3. Create one Order per line (amount = cost x quantity, product name snapshot)
        4. Delete the cart lines
        Steps 2-4 run in a single transaction.

        Args:
            buyer_id: Buyer UUID
            payment_reference: Reference of the payment that settled this checkout

        Returns:
            ServiceResult with the created orders, ``cart_empty`` when there is
            nothing to order

        Example:
            >>> result = order_service.place_order(buyer_id, "pay_Nx81")
            >>> if result.ok:
            ...     orders = result.value
        """
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")

        reference = (payment_reference or "").strip() if isinstance(payment_reference, str) else ""
        if not reference:
            return service_err(ErrorCodes.INVALID_INPUT, "Payment reference is required")

        known = self.call_store(lambda: Buyer.objects.filter(id=buyer_uuid).exists(), f"loading buyer {buyer_uuid}")
        if not known.ok:
            return known
        if not known.value:
            return service_err(ErrorCodes.BUYER_NOT_FOUND, f"Buyer {buyer_uuid} not found")

        try:
            orders = self._checkout(buyer_uuid, reference)
            if not orders:
                return service_err(ErrorCodes.CART_EMPTY, "Cart is empty")

            self.logger.info(f"Buyer {buyer_uuid} placed {len(orders)} orders (payment {reference})")
            return service_ok(orders)

        except StoreUnavailableError as e:
            return service_err(ErrorCodes.DATABASE_UNAVAILABLE, str(e))
        except Exception as e:
            self.logger.error(f"Error placing order for buyer {buyer_uuid}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @retry_on_transient_error(max_retries=3)
    def _checkout(self, buyer_id, reference: str) -> List[Order]:
        with transaction.atomic(), rollback_safe_operation(f"Checkout for buyer {buyer_id}"):
            lines = list(
                CartLine.objects.select_for_update()
                .filter(buyer_id=buyer_id)
                .select_related("product")
                .order_by("added_at")
            )
            if not lines:
                return []

            orders = []
            for line in lines:
                product = line.product
                orders.append(
                    Order.objects.create(
                        buyer_id=buyer_id,
                        seller_id=product.seller_id,
                        product=product,
                        product_name=product.name,
                        quantity=line.quantity,
                        amount=product.cost * line.quantity,
                        payment_reference=reference,
                    )
                )

            CartLine.objects.filter(id__in=[line.id for line in lines]).delete()
            return orders

    @BaseService.log_performance
    def get_order(self, order_id) -> ServiceResult[Order]:
        order_uuid = parse_id(order_id)
        if order_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid order id: {order_id}")

        found = self.call_store(lambda: Order.objects.filter(id=order_uuid).first(), f"getting order {order_uuid}")
        if found.ok and found.value is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, f"Order {order_uuid} not found")
        return found

    @BaseService.log_performance
    def list_by_buyer(self, buyer_id) -> ServiceResult[List[Order]]:
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")
        return self._list(buyer_id=buyer_uuid)

    @BaseService.log_performance
    def list_by_seller(self, seller_id) -> ServiceResult[List[Order]]:
        seller_uuid = parse_id(seller_id)
        if seller_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid seller id: {seller_id}")
        return self._list(seller_id=seller_uuid)

    @BaseService.log_performance
    def list_by_payment_reference(self, reference: str) -> ServiceResult[List[Order]]:
        """Every order created by one checkout."""
        reference = (reference or "").strip()
        if not reference:
            return service_err(ErrorCodes.INVALID_INPUT, "Payment reference is required")
        return self._list(payment_reference=reference)

    def _list(self, **lookup) -> ServiceResult[List[Order]]:
        return self.call_store(lambda: list(Order.objects.filter(**lookup)), f"listing orders {lookup}")
