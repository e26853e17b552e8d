"""ドメイン層モジュール."""
from .entities import Cart, CartItem
from .exceptions import CartNotFoundError, InvalidArgumentError
from .identifiers import CartId
from .ports import CartStore
from .value_objects import CartLine, CartSnapshot, Money

__all__ = [
    # Identifiers
    "CartId",
    # Value Objects
    "CartLine",
    "CartSnapshot",
    "Money",
    # Entities
    "Cart",
    "CartItem",
    # Ports
    "CartStore",
    # Exceptions
    "CartNotFoundError",
    "InvalidArgumentError",
]
