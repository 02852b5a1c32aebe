from unittest.mock import MagicMock, patch

import pytest
from django.db import IntegrityError, OperationalError
from rest_framework import status

from utils.api_responses import error_response
from utils.service_base import BaseService, ErrorCodes, parse_id, service_err
from utils.transaction_utils import StoreUnavailableError, retry_on_transient_error, rollback_safe_operation


def flaky(*outcomes):
    func = MagicMock(side_effect=list(outcomes))
    func.__name__ = "flaky"
    return func


@pytest.fixture
def outside_transaction():
    with patch("utils.transaction_utils.connection") as mock_connection, patch(
        "utils.transaction_utils.time.sleep"
    ) as mock_sleep:
        mock_connection.in_atomic_block = False
        yield mock_sleep


@pytest.mark.unit
class TestRetryOnTransientError:
    def test_recovers_after_transient_failure(self, outside_transaction):
        func = flaky(OperationalError("connection reset"), "loaded")

        assert retry_on_transient_error(max_retries=3)(func)() == "loaded"
        assert func.call_count == 2
        outside_transaction.assert_called_once_with(0.1)

    def test_gives_up_after_max_retries(self, outside_transaction):
        func = flaky(*[OperationalError("down")] * 4)

        with pytest.raises(StoreUnavailableError):
            retry_on_transient_error(max_retries=3)(func)()

        assert func.call_count == 4
        assert [c.args[0] for c in outside_transaction.call_args_list] == [0.1, 0.2, 0.4]

    def test_permanent_errors_are_not_retried(self, outside_transaction):
        func = flaky(IntegrityError("duplicate key"))

        with pytest.raises(IntegrityError):
            retry_on_transient_error(max_retries=3)(func)()

        assert func.call_count == 1

    def test_no_retry_inside_open_transaction(self):
        func = flaky(OperationalError("lock timeout"))

        with patch("utils.transaction_utils.connection") as mock_connection:
            mock_connection.in_atomic_block = True
            with pytest.raises(StoreUnavailableError):
                retry_on_transient_error(max_retries=3)(func)()

        assert func.call_count == 1


@pytest.mark.unit
class TestRollbackSafeOperation:
    def test_reraises(self):
        with pytest.raises(ValueError):
            with rollback_safe_operation("Checkout"):
                raise ValueError("stock mismatch")


@pytest.mark.unit
class TestServiceResultHelpers:
    def test_parse_id(self):
        assert parse_id("8c5a5d0e-8c0a-4f43-9f0b-0c8e9d7f4a11") is not None
        assert parse_id(" 8c5a5d0e8c0a4f439f0b0c8e9d7f4a11 ") is not None
        assert parse_id("12") is None
        assert parse_id(None) is None

    @pytest.mark.parametrize(
        "code, expected",
        [
            (ErrorCodes.INVALID_QUANTITY, status.HTTP_400_BAD_REQUEST),
            (ErrorCodes.ITEM_NOT_IN_CART, status.HTTP_404_NOT_FOUND),
            (ErrorCodes.INVALID_CREDENTIALS, status.HTTP_401_UNAUTHORIZED),
            (ErrorCodes.SELLER_NOT_APPROVED, status.HTTP_403_FORBIDDEN),
            (ErrorCodes.ACCOUNT_EXISTS, status.HTTP_409_CONFLICT),
            (ErrorCodes.DATABASE_UNAVAILABLE, status.HTTP_503_SERVICE_UNAVAILABLE),
            (ErrorCodes.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR),
        ],
    )
    def test_error_response_status(self, code, expected):
        response = error_response(service_err(code, "details"))

        assert response.status_code == expected

    def test_internal_error_detail_is_generic(self):
        response = error_response(service_err(ErrorCodes.INTERNAL_ERROR, "psycopg2 traceback"))

        assert response.data == {"detail": "Internal server error"}


@pytest.mark.unit
class TestCallStore:
    @pytest.fixture
    def service(self):
        return BaseService()

    def test_plain_value_becomes_success(self, service, outside_transaction):
        result = service.call_store(flaky(OperationalError("connection reset"), 7), "counting lines")

        assert result.ok is True
        assert result.value == 7

    def test_service_result_passes_through(self, service):
        result = service.call_store(lambda: service_err(ErrorCodes.BUYER_NOT_FOUND, "gone"), "loading buyer")

        assert result.error == ErrorCodes.BUYER_NOT_FOUND

    def test_outage_maps_to_database_unavailable(self, service, outside_transaction):
        operation = flaky(*[OperationalError("server closed the connection")] * 4)

        result = service.call_store(operation, "loading buyer")

        assert result.error == ErrorCodes.DATABASE_UNAVAILABLE
        assert operation.call_count == 4

    def test_unexpected_error_maps_to_internal_error(self, service):
        result = service.call_store(flaky(IntegrityError("fk violation")), "saving order")

        assert result.error == ErrorCodes.INTERNAL_ERROR
