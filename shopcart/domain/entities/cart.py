"""カート集約ルート."""
from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field

from ..identifiers import CartId
from ..value_objects import CartLine, CartSnapshot, Money

from .cart_item import CartItem


@dataclass
class Cart:
    """商品名ごとのアイテムを保持するコンテナ（集約ルート）.

    アイテムの参照・更新はすべてカート単位のロック内で行う。
    外部に渡すのは値（合計、スナップショット）のみで、CartItemそのものは渡さない。
    """

    cart_id: CartId
    _items: dict[str, CartItem] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @classmethod
    def create(cls, cart_id: CartId) -> Cart:
        """空のカートを作成する."""
        return cls(cart_id=cart_id)

    def add_item(self, item: CartItem) -> Money:
        """アイテムを追加し、追加後の合計金額を返す.

        同名のアイテムが既にある場合は数量のみ加算し、単価は既存のものを維持する。

        Args:
            item: 追加するアイテム

        Returns:
            追加後の合計金額
        """
        with self._lock:
            existing = self._items.get(item.name)
            if existing is None:
                self._items[item.name] = copy.copy(item)
            else:
                existing.add_quantity(item.quantity)
            return self.get_total_amount()

    def get_total_amount(self) -> Money:
        """合計金額を計算する."""
        with self._lock:
            total = Money.zero()
            for item in self._items.values():
                total = total.add(item.get_subtotal())
            return total

    def get_item_count(self) -> int:
        """アイテム数を取得する."""
        with self._lock:
            return len(self._items)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return self.get_item_count() == 0

    def snapshot(self) -> CartSnapshot:
        """現在の内容を読み取り専用のスナップショットとして取得する."""
        with self._lock:
            lines = tuple(
                CartLine(
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    subtotal=item.get_subtotal(),
                )
                for item in self._items.values()
            )
            return CartSnapshot(
                cart_id=self.cart_id,
                lines=lines,
                total_amount=self.get_total_amount(),
            )
