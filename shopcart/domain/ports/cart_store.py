"""カートストアインターフェース."""
from abc import ABC, abstractmethod
from decimal import Decimal

from ..identifiers import CartId
from ..value_objects import CartSnapshot, Money


class CartStore(ABC):
    """カートストアのインターフェース.

    実装はスレッドセーフであること。
    """

    @abstractmethod
    def add_item(
        self, cart_id: CartId, item_name: str, price: Decimal, quantity: int
    ) -> Money:
        """アイテムを追加し、更新後のカート合計を返す.

        Raises:
            InvalidArgumentError: 価格が負、または数量が0以下の場合
        """
        pass

    @abstractmethod
    def get_total(self, cart_id: CartId) -> Money:
        """カート合計を取得する.

        Raises:
            CartNotFoundError: カートが存在しない場合
        """
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> CartSnapshot | None:
        """カートIDで検索し、その時点の内容を読み取り専用で返す."""
        pass
