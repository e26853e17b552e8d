"""カート内容のスナップショット."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import CartId

from .money import Money


@dataclass(frozen=True)
class CartLine:
    """ある時点のカート明細1行."""

    name: str
    unit_price: Money
    quantity: int
    subtotal: Money


@dataclass(frozen=True)
class CartSnapshot:
    """ある時点のカート内容（読み取り専用）.

    合計は明細と同じ時点で計算されるため、常に小計の和と一致する。
    """

    cart_id: CartId
    lines: tuple[CartLine, ...]
    total_amount: Money

    def get_item_count(self) -> int:
        """明細数を取得する."""
        return len(self.lines)

    def is_empty(self) -> bool:
        """空か判定する."""
        return not self.lines

    def get_line(self, name: str) -> CartLine | None:
        """指定商品名の明細を取得する."""
        for line in self.lines:
            if line.name == name:
                return line
        return None
