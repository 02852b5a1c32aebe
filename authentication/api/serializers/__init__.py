from .account_serializers import (
    AddressSerializer,
    AdminSerializer,
    BuyerInputSerializer,
    BuyerSerializer,
    CredentialsSerializer,
    PasswordResetConfirmSerializer,
    PasswordResetRequestSerializer,
    SellerInputSerializer,
    SellerSerializer,
)


__all__ = [
    "AddressSerializer",
    "AdminSerializer",
    "BuyerInputSerializer",
    "BuyerSerializer",
    "CredentialsSerializer",
    "PasswordResetConfirmSerializer",
    "PasswordResetRequestSerializer",
    "SellerInputSerializer",
    "SellerSerializer",
]
