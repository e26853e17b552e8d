"""ユースケースモジュール."""
from .add_item import AddItemResult, AddItemUseCase
from .get_cart import CartItemDTO, GetCartResult, GetCartUseCase
from .get_total import GetTotalResult, GetTotalUseCase

__all__ = [
    "AddItemResult",
    "AddItemUseCase",
    "CartItemDTO",
    "GetCartResult",
    "GetCartUseCase",
    "GetTotalResult",
    "GetTotalUseCase",
]
