# Utils package for LL-CART backend

from .service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok
from .transaction_utils import StoreUnavailableError, retry_on_transient_error, rollback_safe_operation

__all__ = [
    "BaseService",
    "ErrorCodes",
    "ServiceResult",
    "parse_id",
    "service_err",
    "service_ok",
    "StoreUnavailableError",
    "retry_on_transient_error",
    "rollback_safe_operation",
]
