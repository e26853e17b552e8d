"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from ..exceptions import InvalidArgumentError


# 加算・乗算で丸めが起きない10進コンテキスト
_EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


@dataclass(frozen=True)
class Money:
    """金額を表現する値オブジェクト（Decimalで精度・スケールを保持）."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, Decimal):
            raise InvalidArgumentError("Money value must be a Decimal")
        if not self.value.is_finite():
            raise InvalidArgumentError("Money value must be finite")
        if self.value < 0:
            raise InvalidArgumentError("Money value cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | str | float) -> Money:
        """指定金額でMoneyを生成する.

        floatは2進数の誤差を持ち込まないよう、文字列表現を経由して変換する。
        """
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid money value: {value!r}")
        if isinstance(value, Decimal):
            return cls(value)
        try:
            amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid money value: {value!r}") from None
        return cls(amount)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal(0))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す（丸めなし）."""
        with localcontext(_EXACT_CONTEXT):
            return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise InvalidArgumentError("Factor cannot be negative")
        with localcontext(_EXACT_CONTEXT):
            return Money(self.value * factor)

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def format(self) -> str:
        """表示用フォーマット（指数表記にしない、例: "602.50"）."""
        return f"{self.value:f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
