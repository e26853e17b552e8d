"""カート合計取得ユースケース."""
from dataclasses import dataclass

from shopcart.domain.identifiers import CartId
from shopcart.domain.ports import CartStore
from shopcart.domain.value_objects import Money


@dataclass(frozen=True)
class GetTotalResult:
    """カート合計取得結果."""

    cart_id: CartId
    total_amount: Money


class GetTotalUseCase:
    """カート合計取得ユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, cart_id: CartId) -> GetTotalResult:
        """カートの合計金額を取得する.

        Raises:
            CartNotFoundError: 一度もアイテムが追加されていないカートIDの場合
        """
        return GetTotalResult(
            cart_id=cart_id,
            total_amount=self._cart_store.get_total(cart_id),
        )
