"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError
from ..value_objects import Money


@dataclass
class CartItem:
    """カート内の1商品行（商品名・単価は不変、数量のみ増加する）."""

    name: str
    unit_price: Money
    quantity: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgumentError("Quantity must be an integer")
        if self.quantity <= 0:
            raise InvalidArgumentError("Quantity must be greater than zero")

    @classmethod
    def create(cls, name: str, unit_price: Money, quantity: int) -> CartItem:
        """新しいカートアイテムを作成する."""
        return cls(name=name, unit_price=unit_price, quantity=quantity)

    def add_quantity(self, amount: int) -> None:
        """数量を加算する（0以下は無視）."""
        if amount > 0:
            self.quantity += amount

    def get_subtotal(self) -> Money:
        """小計（単価×数量）を計算する."""
        return self.unit_price.multiply(self.quantity)
