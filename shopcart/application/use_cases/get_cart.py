"""カート取得ユースケース."""
from dataclasses import dataclass

from shopcart.domain.identifiers import CartId
from shopcart.domain.ports import CartStore
from shopcart.domain.value_objects import Money


@dataclass(frozen=True)
class CartItemDTO:
    """カートアイテムDTO."""

    item_name: str
    unit_price: Money
    quantity: int
    subtotal: Money


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    cart_id: CartId
    items: list[CartItemDTO]
    item_count: int
    total_amount: Money


class GetCartUseCase:
    """カート取得ユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, cart_id: CartId) -> GetCartResult | None:
        """カートの内容を取得する.

        合計は明細と同じスナップショットから計算するため、常に小計の和と一致する。

        Args:
            cart_id: カートID

        Returns:
            カート取得結果（存在しない場合はNone）
        """
        snapshot = self._cart_store.find_by_id(cart_id)
        if snapshot is None:
            return None

        items = [
            CartItemDTO(
                item_name=line.name,
                unit_price=line.unit_price,
                quantity=line.quantity,
                subtotal=line.subtotal,
            )
            for line in snapshot.lines
        ]

        return GetCartResult(
            cart_id=snapshot.cart_id,
            items=items,
            item_count=snapshot.get_item_count(),
            total_amount=snapshot.total_amount,
        )
