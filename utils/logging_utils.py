"""Helpers that keep credentials and contact details out of log lines."""

from typing import Any, Dict

SECRET_FIELDS = {"password", "new_password", "reset_token", "token"}


def mask_value(value: Any) -> Any:
    """Mask an email address or an opaque token for logging."""
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def safe_account_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of an account payload with secrets dropped and contact fields masked."""
    result = {}
    for key, value in payload.items():
        if key in SECRET_FIELDS:
            continue
        if key in ("email", "mobile_number", "national_id"):
            result[key] = mask_value(value)
        else:
            result[key] = value
    return result
