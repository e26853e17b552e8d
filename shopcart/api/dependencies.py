"""依存性注入コンテナ."""
import threading

from shopcart.domain.ports import CartStore
from shopcart.infrastructure import InMemoryCartStore


class Dependencies:
    """依存性を管理するコンテナ.

    カートはプロセス内のメモリにのみ保持する。
    """

    _cart_store: CartStore | None = None
    _lock = threading.Lock()

    @classmethod
    def get_cart_store(cls) -> CartStore:
        """カートストアを取得する."""
        # 同時に届いた最初のリクエストでストアが二重に作られないようにする
        with cls._lock:
            if cls._cart_store is None:
                cls._cart_store = InMemoryCartStore()
            return cls._cart_store

    @classmethod
    def set_cart_store(cls, store: CartStore) -> None:
        """カートストアを設定する（テスト用）."""
        with cls._lock:
            cls._cart_store = store

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        with cls._lock:
            cls._cart_store = None
