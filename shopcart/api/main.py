"""ショッピングカート FastAPI サーバー.

カートはプロセス内のメモリにのみ保持する。
"""
import logging
import os
from decimal import Decimal, InvalidOperation

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from shopcart.api.dependencies import Dependencies
from shopcart.application.use_cases import (
    AddItemUseCase,
    GetCartUseCase,
    GetTotalUseCase,
)
from shopcart.domain.exceptions import CartNotFoundError, InvalidArgumentError
from shopcart.domain.identifiers import CartId

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def get_allowed_origins() -> list[str]:
    """CORSで許可するオリジンを環境変数から組み立てる."""
    raw = os.environ.get("ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if os.environ.get("ALLOW_DEV_ORIGINS") == "true":
        origins.extend(o for o in DEV_ORIGINS if o not in origins)
    return origins


app = FastAPI(
    title="Shopping Cart API",
    description="インメモリのショッピングカートに商品を追加し、合計金額を返す API",
    version="1.0.0",
)

# CORS 設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ========================================
# レスポンスモデル
# ========================================


class HealthResponse(BaseModel):
    """ヘルスチェックレスポンス."""
    status: str


class AddItemResponse(BaseModel):
    """アイテム追加レスポンス."""
    cart_id: str
    total: str
    message: str


class TotalResponse(BaseModel):
    """カート合計レスポンス."""
    cart_id: str
    total: str
    message: str


class CartItemResponse(BaseModel):
    """カートアイテムレスポンス."""
    item_name: str
    unit_price: str
    quantity: int
    subtotal: str


class CartResponse(BaseModel):
    """カート内容レスポンス."""
    cart_id: str
    items: list[CartItemResponse]
    item_count: int
    total: str


# ========================================
# パラメータ変換
# ========================================


def _parse_price(raw: str) -> Decimal:
    """価格文字列をDecimalに変換する（floatを経由しない）."""
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        raise InvalidArgumentError(f"price must be a decimal number: {raw!r}") from None


def _parse_quantity(raw: str) -> int:
    """数量文字列を整数に変換する."""
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"quantity must be an integer: {raw!r}") from None


# ========================================
# エンドポイント
# ========================================


@app.get("/health", response_model=HealthResponse)
def health_check():
    """ヘルスチェック."""
    return HealthResponse(status="ok")


@app.post("/shop/addItem", response_model=AddItemResponse)
def add_item(
    cart_id: str = Query(..., alias="cartId", description="カートID"),
    item_name: str = Query(..., alias="itemName", description="商品名"),
    price: str = Query(..., description="単価（10進数表記）"),
    quantity: str = Query(..., description="追加する数量"),
):
    """カートにアイテムを追加し、更新後の合計を返す.

    カートが存在しない場合は自動的に作成される。
    """
    if not item_name.strip():
        logger.warning("Rejected addItem for cart %s: empty itemName", cart_id)
        raise HTTPException(status_code=400, detail="itemName must be a non-empty string")

    try:
        use_case = AddItemUseCase(Dependencies.get_cart_store())
        result = use_case.execute(
            cart_id=CartId(cart_id),
            item_name=item_name,
            price=_parse_price(price),
            quantity=_parse_quantity(quantity),
        )
    except InvalidArgumentError as e:
        logger.warning("Rejected addItem for cart %s: %s", cart_id, e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to add item to cart %s", cart_id)
        raise HTTPException(status_code=500, detail="Internal server error")

    total = str(result.total_amount)
    return AddItemResponse(
        cart_id=str(result.cart_id),
        total=total,
        message=f"Item added successfully. Current total: {total}",
    )


@app.get("/shop/getTotal", response_model=TotalResponse)
def get_total(
    cart_id: str = Query(..., alias="cartId", description="カートID"),
):
    """カートの合計金額を取得する."""
    try:
        use_case = GetTotalUseCase(Dependencies.get_cart_store())
        result = use_case.execute(CartId(cart_id))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CartNotFoundError:
        raise HTTPException(status_code=404, detail="Cart not found")
    except Exception:
        logger.exception("Failed to get total for cart %s", cart_id)
        raise HTTPException(status_code=500, detail="Internal server error")

    total = str(result.total_amount)
    return TotalResponse(
        cart_id=str(result.cart_id),
        total=total,
        message=f"Current total: {total}",
    )


@app.get("/shop/carts/{cart_id}", response_model=CartResponse)
def get_cart(cart_id: str):
    """カートの内容（明細と合計）を取得する."""
    try:
        use_case = GetCartUseCase(Dependencies.get_cart_store())
        result = use_case.execute(CartId(cart_id))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to get cart %s", cart_id)
        raise HTTPException(status_code=500, detail="Internal server error")

    if result is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    return CartResponse(
        cart_id=str(result.cart_id),
        items=[
            CartItemResponse(
                item_name=item.item_name,
                unit_price=str(item.unit_price),
                quantity=item.quantity,
                subtotal=str(item.subtotal),
            )
            for item in result.items
        ],
        item_count=result.item_count,
        total=str(result.total_amount),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
