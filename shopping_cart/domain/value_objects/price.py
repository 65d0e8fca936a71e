"""価格を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")
MAX_PRICE = Decimal("999999999.99")


@dataclass(frozen=True)
class Price:
    """商品価格を表現する値オブジェクト（0以上、小数点以下2桁まで）."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション.

        値は小数点以下2桁に揃えて保持する。
        """
        if not isinstance(self.value, Decimal):
            raise ValueError("Price value must be a Decimal")
        if not self.value.is_finite():
            raise ValueError("Price value must be finite")
        if self.value < 0:
            raise ValueError("Price value cannot be negative")
        # quantize の前に上限を確認する
        if self.value > MAX_PRICE:
            raise ValueError(f"Price value cannot exceed {MAX_PRICE}")
        quantized = self.value.quantize(CENT)
        if quantized != self.value:
            raise ValueError("Price value cannot have more than 2 decimal places")
        object.__setattr__(self, "value", quantized)

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Price:
        """指定値でPriceを生成する.

        floatは文字列経由で変換し、2進数の誤差を持ち込まない。

        Raises:
            ValueError: 数値として解釈できない場合、負の場合、上限を超える場合、
                小数点以下が2桁を超える場合
        """
        if isinstance(value, bool):
            raise ValueError(f"Invalid price: {value!r}")
        try:
            decimal_value = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Invalid price: {value!r}")
        return cls(decimal_value)

    @classmethod
    def zero(cls) -> Price:
        """ゼロ円を生成する."""
        return cls(Decimal("0"))

    def format(self) -> str:
        """表示用フォーマット（例: "12.00"）."""
        return f"{self.value:.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
