"""カート識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CartId:
    """カートの一意識別子（セッションIDやユーザーIDなど任意の文字列）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise InvalidArgumentError("CartId cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
