"""値オブジェクトモジュール."""
from .cart_snapshot import CartLine, CartSnapshot
from .money import Money

__all__ = ["CartLine", "CartSnapshot", "Money"]
