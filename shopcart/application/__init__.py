"""アプリケーション層モジュール."""
from .use_cases import (
    AddItemResult,
    AddItemUseCase,
    CartItemDTO,
    GetCartResult,
    GetCartUseCase,
    GetTotalResult,
    GetTotalUseCase,
)

__all__ = [
    # Cart Use Cases
    "AddItemUseCase",
    "AddItemResult",
    "GetTotalUseCase",
    "GetTotalResult",
    "GetCartUseCase",
    "GetCartResult",
    "CartItemDTO",
]
