"""ショッピングカートAPIエンドポイントのテスト."""
import threading
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from shopcart.api.dependencies import Dependencies
from shopcart.api.main import app, get_allowed_origins
from shopcart.domain.exceptions import InvalidArgumentError
from shopcart.domain.identifiers import CartId
from shopcart.domain.ports import CartStore
from shopcart.domain.value_objects import CartSnapshot, Money
from shopcart.infrastructure.stores import InMemoryCartStore

client = TestClient(app)


class BrokenCartStore(CartStore):
    """常に予期しない例外を送出するストア."""

    def add_item(
        self, cart_id: CartId, item_name: str, price: Decimal, quantity: int
    ) -> Money:
        raise RuntimeError("store is broken")

    def get_total(self, cart_id: CartId) -> Money:
        raise RuntimeError("store is broken")

    def find_by_id(self, cart_id: CartId) -> CartSnapshot | None:
        raise RuntimeError("store is broken")


class RejectingCartStore(BrokenCartStore):
    """検索時に引数エラーを送出するストア."""

    def find_by_id(self, cart_id: CartId) -> CartSnapshot | None:
        raise InvalidArgumentError(f"unsupported cart id: {cart_id}")


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセット."""
    Dependencies.reset()
    yield
    Dependencies.reset()


def _add(cart_id="c1", item_name="Book", price="120.50", quantity="2"):
    return client.post(
        "/shop/addItem",
        params={"cartId": cart_id, "itemName": item_name, "price": price, "quantity": quantity},
    )


class TestHealthEndpoint:
    """GET /health エンドポイントのテスト."""

    def test_ヘルスチェック(self) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestAddItemEndpoint:
    """POST /shop/addItem エンドポイントのテスト."""

    def test_アイテムを追加すると合計が返る(self) -> None:
        """新規カートへの追加で合計とメッセージが返ることを確認."""
        response = _add()

        assert response.status_code == 200
        body = response.json()
        assert body["cart_id"] == "c1"
        assert body["total"] == "241.00"
        assert body["message"] == "Item added successfully. Current total: 241.00"

    def test_同じ商品の再追加は最初の単価で計算される(self) -> None:
        """2回目の価格が無視され数量のみ加算されることを確認."""
        _add(price="120.50", quantity="2")
        response = _add(price="999.99", quantity="3")

        assert response.status_code == 200
        assert response.json()["total"] == "602.50"

    def test_負の価格は400でカートは作成されない(self) -> None:
        response = _add(price="-1.00")

        assert response.status_code == 400
        assert "cannot be negative" in response.json()["detail"]
        assert client.get("/shop/getTotal", params={"cartId": "c1"}).status_code == 404

    @pytest.mark.parametrize("quantity", ["0", "-1"])
    def test_0以下の数量は400(self, quantity: str) -> None:
        response = _add(quantity=quantity)

        assert response.status_code == 400
        assert "greater than zero" in response.json()["detail"]

    @pytest.mark.parametrize("quantity", ["abc", "1.5"])
    def test_整数でない数量は400(self, quantity: str) -> None:
        response = _add(quantity=quantity)

        assert response.status_code == 400
        assert "quantity must be an integer" in response.json()["detail"]

    def test_数値でない価格は400(self) -> None:
        response = _add(price="abc")

        assert response.status_code == 400
        assert "price must be a decimal number" in response.json()["detail"]

    def test_NaNの価格は400(self) -> None:
        response = _add(price="NaN")

        assert response.status_code == 400

    def test_空の商品名は400(self) -> None:
        response = _add(item_name="   ")

        assert response.status_code == 400
        assert response.json()["detail"] == "itemName must be a non-empty string"

    def test_空のカートIDは400(self) -> None:
        response = _add(cart_id="")

        assert response.status_code == 400

    def test_必須パラメータ欠落は422(self) -> None:
        response = client.post("/shop/addItem", params={"cartId": "c1", "itemName": "Book"})

        assert response.status_code == 422

    def test_ストアの予期しない例外は500(self) -> None:
        Dependencies.set_cart_store(BrokenCartStore())

        response = _add()

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestGetTotalEndpoint:
    """GET /shop/getTotal エンドポイントのテスト."""

    def test_カートの合計を取得できる(self) -> None:
        _add(price="120.50", quantity="2")
        _add(price="999.99", quantity="3")

        response = client.get("/shop/getTotal", params={"cartId": "c1"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == "602.50"
        assert body["message"] == "Current total: 602.50"

    def test_存在しないカートは404(self) -> None:
        response = client.get("/shop/getTotal", params={"cartId": "unknown"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Cart not found"

    def test_連続した取得は同じ合計を返す(self) -> None:
        _add()

        first = client.get("/shop/getTotal", params={"cartId": "c1"}).json()
        second = client.get("/shop/getTotal", params={"cartId": "c1"}).json()

        assert first == second

    def test_注入したストアが使われる(self) -> None:
        store = InMemoryCartStore()
        store.add_item(CartId("c9"), "Pen", Decimal("0.10"), 3)
        Dependencies.set_cart_store(store)

        response = client.get("/shop/getTotal", params={"cartId": "c9"})

        assert response.json()["total"] == "0.30"

    def test_ストアの予期しない例外は500(self) -> None:
        Dependencies.set_cart_store(BrokenCartStore())

        response = client.get("/shop/getTotal", params={"cartId": "c1"})

        assert response.status_code == 500


class TestGetCartEndpoint:
    """GET /shop/carts/{cart_id} エンドポイントのテスト."""

    def test_カートの明細を取得できる(self) -> None:
        _add(item_name="Book", price="120.50", quantity="2")
        _add(item_name="Pen", price="0.10", quantity="3")

        response = client.get("/shop/carts/c1")

        assert response.status_code == 200
        body = response.json()
        assert body["cart_id"] == "c1"
        assert body["item_count"] == 2
        assert body["total"] == "241.30"
        items = {item["item_name"]: item for item in body["items"]}
        assert items["Book"] == {
            "item_name": "Book",
            "unit_price": "120.50",
            "quantity": 2,
            "subtotal": "241.00",
        }

    def test_存在しないカートは404(self) -> None:
        response = client.get("/shop/carts/unknown")

        assert response.status_code == 404

    def test_引数エラーは400(self) -> None:
        Dependencies.set_cart_store(RejectingCartStore())

        response = client.get("/shop/carts/c1")

        assert response.status_code == 400
        assert response.json()["detail"] == "unsupported cart id: c1"

    def test_ストアの予期しない例外は500(self) -> None:
        Dependencies.set_cart_store(BrokenCartStore())

        response = client.get("/shop/carts/c1")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestDependencies:
    """Dependenciesのテスト."""

    def test_設定したストアが取得できる(self) -> None:
        store = InMemoryCartStore()
        Dependencies.set_cart_store(store)

        assert Dependencies.get_cart_store() is store

    def test_resetで新しいストアに置き換わる(self) -> None:
        store = InMemoryCartStore()
        Dependencies.set_cart_store(store)

        Dependencies.reset()

        assert Dependencies.get_cart_store() is not store

    def test_同時の初回取得でストアは1つだけ作成される(self) -> None:
        workers = 16
        barrier = threading.Barrier(workers)

        def get_store(_: int) -> CartStore:
            barrier.wait()
            return Dependencies.get_cart_store()

        with ThreadPoolExecutor(max_workers=workers) as executor:
            stores = list(executor.map(get_store, range(workers)))

        assert all(store is stores[0] for store in stores)

    def test_設定と取得が並行しても設定済みのストアのいずれかが返る(self) -> None:
        """set_cart_storeと並行したget_cart_storeが中途半端な状態を観測しないことを確認."""
        candidates = [InMemoryCartStore() for _ in range(8)]
        barrier = threading.Barrier(len(candidates) * 2)

        def set_store(index: int) -> None:
            barrier.wait()
            Dependencies.set_cart_store(candidates[index])

        def get_store(_: int) -> CartStore:
            barrier.wait()
            return Dependencies.get_cart_store()

        Dependencies.set_cart_store(candidates[0])
        with ThreadPoolExecutor(max_workers=len(candidates) * 2) as executor:
            setters = [executor.submit(set_store, i) for i in range(len(candidates))]
            getters = [executor.submit(get_store, i) for i in range(len(candidates))]
            for future in setters:
                future.result()
            observed = [future.result() for future in getters]

        assert all(any(store is c for c in candidates) for store in observed)
        assert any(Dependencies.get_cart_store() is c for c in candidates)


class TestAllowedOrigins:
    """CORS許可オリジンのテスト."""

    def test_環境変数のオリジンを使用する(self, monkeypatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com, https://www.shop.example.com")
        monkeypatch.delenv("ALLOW_DEV_ORIGINS", raising=False)

        assert get_allowed_origins() == [
            "https://shop.example.com",
            "https://www.shop.example.com",
        ]

    def test_開発用オリジンを追加できる(self, monkeypatch) -> None:
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
        monkeypatch.setenv("ALLOW_DEV_ORIGINS", "true")

        origins = get_allowed_origins()

        assert "http://localhost:5173" in origins
        assert "http://127.0.0.1:3000" in origins

    def test_未設定なら空(self, monkeypatch) -> None:
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
        monkeypatch.delenv("ALLOW_DEV_ORIGINS", raising=False)

        assert get_allowed_origins() == []
