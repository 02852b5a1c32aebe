import uuid
from unittest.mock import MagicMock, patch

import pytest
from django.db import OperationalError

from marketplace.services.cart_service import MAX_LINE_QUANTITY, CartService, coerce_quantity
from utils.service_base import ErrorCodes
from utils.transaction_utils import StoreUnavailableError


@pytest.fixture
def cart_service():
    return CartService()


@pytest.fixture
def ids():
    return str(uuid.uuid4()), str(uuid.uuid4())


@pytest.mark.unit
class TestCoerceQuantity:
    @pytest.mark.parametrize("raw, expected", [(3, 3), ("4", 4), (" 2 ", 2), (0, 0), ("-1", -1)])
    def test_whole_numbers(self, raw, expected):
        assert coerce_quantity(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "2.5", True, [1]])
    def test_rejects_non_integers(self, raw):
        assert coerce_quantity(raw) is None

    def test_column_limit(self):
        assert coerce_quantity(MAX_LINE_QUANTITY) == MAX_LINE_QUANTITY
        assert coerce_quantity(MAX_LINE_QUANTITY + 1) is None
        assert coerce_quantity(str(10**20)) is None


@pytest.mark.unit
class TestCartServiceValidation:
    @pytest.mark.parametrize("quantity", [0, -3, "zero", None])
    def test_add_rejects_non_positive_quantity(self, cart_service, ids, quantity):
        result = cart_service.add_to_cart(*ids, quantity=quantity)

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_QUANTITY

    def test_add_rejects_malformed_buyer_id(self, cart_service):
        result = cart_service.add_to_cart("not-a-uuid", str(uuid.uuid4()), quantity=1)

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_INPUT

    def test_add_rejects_malformed_product_id(self, cart_service):
        result = cart_service.add_to_cart(str(uuid.uuid4()), "42", quantity=1)

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_INPUT

    def test_quantity_checked_before_ids(self, cart_service):
        result = cart_service.add_to_cart("bad", "bad", quantity=0)

        assert result.error == ErrorCodes.INVALID_QUANTITY

    def test_update_rejects_zero_quantity(self, cart_service, ids):
        result = cart_service.update_quantity(*ids, 0)

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_QUANTITY

    @pytest.mark.parametrize(
        "method", ["get_cart_items", "get_cart_count", "remove_cart_item", "clear_cart"]
    )
    def test_single_id_operations_reject_malformed_id(self, cart_service, method):
        result = getattr(cart_service, method)("definitely-not-an-id")

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_INPUT


@pytest.mark.unit
class TestCartServiceOutcomes:
    @patch("marketplace.services.cart_service.Product.objects")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_unknown_buyer(self, mock_buyers, mock_products, cart_service, ids):
        mock_buyers.filter.return_value.exists.return_value = False

        result = cart_service.add_to_cart(*ids, quantity=1)

        assert result.error == ErrorCodes.BUYER_NOT_FOUND
        mock_products.filter.assert_not_called()

    @patch("marketplace.services.cart_service.Product.objects")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_unknown_product(self, mock_buyers, mock_products, cart_service, ids):
        mock_buyers.filter.return_value.exists.return_value = True
        mock_products.filter.return_value.exists.return_value = False

        result = cart_service.add_to_cart(*ids, quantity=1)

        assert result.error == ErrorCodes.PRODUCT_NOT_FOUND

    @patch.object(CartService, "_upsert_line")
    @patch("marketplace.services.cart_service.Product.objects")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_passes_parsed_ids(self, mock_buyers, mock_products, mock_upsert, cart_service, ids):
        mock_buyers.filter.return_value.exists.return_value = True
        mock_products.filter.return_value.exists.return_value = True
        mock_upsert.return_value = MagicMock(quantity=3)

        result = cart_service.add_to_cart(*ids, quantity="3")

        assert result.ok is True
        mock_upsert.assert_called_once_with(uuid.UUID(ids[0]), uuid.UUID(ids[1]), 3)

    @patch.object(CartService, "_upsert_line", return_value=None)
    @patch("marketplace.services.cart_service.Product.objects")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_past_column_limit(self, mock_buyers, mock_products, _upsert, cart_service, ids):
        mock_buyers.filter.return_value.exists.return_value = True
        mock_products.filter.return_value.exists.return_value = True

        result = cart_service.add_to_cart(*ids, quantity=5)

        assert result.error == ErrorCodes.INVALID_QUANTITY

    def test_update_rejects_quantity_past_column_limit(self, cart_service, ids):
        assert cart_service.update_quantity(*ids, MAX_LINE_QUANTITY + 1).error == ErrorCodes.INVALID_QUANTITY

    @patch.object(CartService, "_upsert_line", side_effect=StoreUnavailableError("Store unavailable: gone"))
    @patch("marketplace.services.cart_service.Product.objects")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_reports_unavailable_store(self, mock_buyers, mock_products, _upsert, cart_service, ids):
        mock_buyers.filter.return_value.exists.return_value = True
        mock_products.filter.return_value.exists.return_value = True

        result = cart_service.add_to_cart(*ids, quantity=1)

        assert result.ok is False
        assert result.error == ErrorCodes.DATABASE_UNAVAILABLE

    @patch.object(CartService, "_set_quantity", return_value=None)
    def test_update_absent_line(self, mock_set, cart_service, ids):
        result = cart_service.update_quantity(*ids, 5)

        assert result.ok is False
        assert result.error == ErrorCodes.ITEM_NOT_IN_CART

    @patch.object(CartService, "_delete_lines", return_value=0)
    def test_remove_absent_line_is_ok(self, mock_delete, cart_service):
        line_id = uuid.uuid4()

        result = cart_service.remove_cart_item(str(line_id))

        assert result.ok is True
        assert result.value == 0
        mock_delete.assert_called_once_with(id=line_id)

    @patch.object(CartService, "_load_lines", side_effect=RuntimeError("boom"))
    def test_list_unexpected_error(self, _load, cart_service):
        result = cart_service.get_cart_items(str(uuid.uuid4()))

        assert result.ok is False
        assert result.error == ErrorCodes.INTERNAL_ERROR

    @patch("utils.transaction_utils.time.sleep")
    @patch("utils.transaction_utils.connection")
    @patch("marketplace.services.cart_service.Buyer.objects")
    def test_add_reference_check_outage(self, mock_buyers, mock_connection, _sleep, cart_service, ids):
        mock_connection.in_atomic_block = False
        mock_buyers.filter.side_effect = OperationalError("server closed the connection")

        result = cart_service.add_to_cart(*ids, quantity=1)

        assert result.error == ErrorCodes.DATABASE_UNAVAILABLE
        assert mock_buyers.filter.call_count == 4
