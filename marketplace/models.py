from marketplace.cart.domain.models import CartLine
from marketplace.catalog.domain.models import Product
from marketplace.ordering.domain.models import Order, OrderImmutableError


__all__ = [
    "Product",
    "CartLine",
    "Order",
    "OrderImmutableError",
]
