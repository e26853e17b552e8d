"""カートストアのインメモリ実装."""
import logging
import threading
from decimal import Decimal

from shopcart.domain.entities import Cart, CartItem
from shopcart.domain.exceptions import CartNotFoundError
from shopcart.domain.identifiers import CartId
from shopcart.domain.ports import CartStore
from shopcart.domain.value_objects import CartSnapshot, Money

logger = logging.getLogger(__name__)


class InMemoryCartStore(CartStore):
    """カートストアのインメモリ実装.

    ストア全体のロックは新規カートの登録時のみ取得する。
    アイテムの追加・合計の計算はカート単位のロックで直列化される。
    """

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}
        self._lock = threading.Lock()

    def add_item(
        self, cart_id: CartId, item_name: str, price: Decimal, quantity: int
    ) -> Money:
        """アイテムを追加し、更新後のカート合計を返す."""
        # カート作成前に検証し、不正な引数ではストアを一切変更しない
        item = CartItem.create(
            name=item_name,
            unit_price=Money.of(price),
            quantity=quantity,
        )
        return self._get_or_create(cart_id).add_item(item)

    def get_total(self, cart_id: CartId) -> Money:
        """カート合計を取得する."""
        cart = self._carts.get(cart_id.value)
        if cart is None:
            raise CartNotFoundError(cart_id)
        return cart.get_total_amount()

    def find_by_id(self, cart_id: CartId) -> CartSnapshot | None:
        """カートIDで検索し、その時点の内容を読み取り専用で返す."""
        cart = self._carts.get(cart_id.value)
        return cart.snapshot() if cart is not None else None

    def _get_or_create(self, cart_id: CartId) -> Cart:
        """カートを取得し、存在しなければ作成して登録する."""
        cart = self._carts.get(cart_id.value)
        if cart is not None:
            return cart

        with self._lock:
            cart = self._carts.get(cart_id.value)
            if cart is None:
                cart = Cart.create(cart_id)
                self._carts[cart_id.value] = cart
                logger.info("Cart created: %s", cart_id)
            return cart
