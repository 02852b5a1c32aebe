from .address import Address
from .admin import Admin
from .buyer import Buyer
from .email import EmailDetails
from .seller import Seller

__all__ = ["Address", "Admin", "Buyer", "EmailDetails", "Seller"]
