"""カート追加ユースケース."""
import logging
from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.identifiers import CartId
from shopcart.domain.ports import CartStore
from shopcart.domain.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddItemResult:
    """カート追加結果."""

    cart_id: CartId
    item_name: str
    total_amount: Money


class AddItemUseCase:
    """カートにアイテムを追加するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(
        self,
        cart_id: CartId,
        item_name: str,
        price: Decimal,
        quantity: int,
    ) -> AddItemResult:
        """アイテムをカートに追加する.

        カートが存在しない場合は自動的に作成される。
        同名のアイテムが既にある場合は数量のみ加算される（単価は最初の追加時のもの）。

        Args:
            cart_id: カートID
            item_name: 商品名
            price: 単価
            quantity: 数量

        Returns:
            カート追加結果

        Raises:
            InvalidArgumentError: 価格が負、または数量が0以下の場合
        """
        total = self._cart_store.add_item(cart_id, item_name, price, quantity)
        logger.info("Cart %s total: %s", cart_id, total)

        return AddItemResult(
            cart_id=cart_id,
            item_name=item_name,
            total_amount=total,
        )
