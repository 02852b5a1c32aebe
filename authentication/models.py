from authentication.domain.models import Address, Admin, Buyer, EmailDetails, Seller


__all__ = [
    "Address",
    "Admin",
    "Buyer",
    "EmailDetails",
    "Seller",
]
