"""ドメイン例外."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .identifiers import CartId


class InvalidArgumentError(ValueError):
    """不正な引数（負の価格、0以下の数量など）."""


class CartNotFoundError(LookupError):
    """カートが見つからないエラー."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__(f"Cart not found: {cart_id}")
