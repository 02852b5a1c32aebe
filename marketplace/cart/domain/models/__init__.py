from .cart import CartLine

__all__ = ["CartLine"]
