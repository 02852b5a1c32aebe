"""
Business logic services for authentication.

Services encapsulate account rules and coordinate between
infrastructure (email) and domain models.
"""

from .accounts import AccountMailer, AccountService
from .address_service import AddressService
from .admin_service import AdminService
from .buyer_service import BuyerService
from .seller_service import SellerService


__all__ = [
    "AccountMailer",
    "AccountService",
    "AddressService",
    "AdminService",
    "BuyerService",
    "SellerService",
]
