"""識別子モジュール."""
from .cart_id import CartId

__all__ = ["CartId"]
