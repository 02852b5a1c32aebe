from .order import Order, OrderImmutableError

__all__ = ["Order", "OrderImmutableError"]
