"""リクエストの入力検証.

ハンドラー実行前に検証を済ませ、結果を ValidationState として渡す。
コントローラーは ValidationState の結果だけを参照する。
"""
from decimal import Decimal, InvalidOperation
from typing import Any

from shopping_cart.domain.entities import ShoppingItem
from shopping_cart.domain.value_objects import CENT, MAX_PRICE, Price


class ValidationState:
    """入力検証の結果（フィールドごとのエラー）."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add_error(self, field: str, message: str) -> None:
        """フィールドにエラーを追加する."""
        self._errors.setdefault(field, []).append(message)

    @property
    def is_valid(self) -> bool:
        """エラーがなければTrue."""
        return not self._errors

    @property
    def errors(self) -> dict[str, list[str]]:
        """エラーの一覧（コピー）."""
        return {field: list(messages) for field, messages in self._errors.items()}


def bind_shopping_item(body: dict[str, Any]) -> tuple[ShoppingItem, ValidationState]:
    """リクエストボディから商品をバインドし、検証結果と共に返す.

    不正なフィールドは既定値でバインドし、エラーを ValidationState に記録する。
    クライアントが指定したidは無視し、新しいIDを採番する。

    Args:
        body: パース済みのリクエストボディ

    Returns:
        バインドした商品と検証結果
    """
    state = ValidationState()

    name = body.get("name")
    if name is None or (isinstance(name, str) and not name.strip()):
        state.add_error("name", "Required")
        name = ""
    elif not isinstance(name, str):
        state.add_error("name", "Must be a string")
        name = ""

    manufacturer = body.get("manufacturer")
    if manufacturer is None:
        manufacturer = ""
    elif not isinstance(manufacturer, str):
        state.add_error("manufacturer", "Must be a string")
        manufacturer = ""

    price = _bind_price(body.get("price"), state)

    item = ShoppingItem.create(name=name, manufacturer=manufacturer, price=price)
    return item, state


def _bind_price(raw: Any, state: ValidationState) -> Price:
    if raw is None:
        return Price.zero()
    # boolはintのサブクラス
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str, Decimal)):
        state.add_error("price", "Must be a decimal number")
        return Price.zero()

    try:
        value = Decimal(str(raw))
    except InvalidOperation:
        state.add_error("price", "Must be a decimal number")
        return Price.zero()

    if not value.is_finite():
        state.add_error("price", "Must be a decimal number")
    elif value < 0:
        state.add_error("price", "Must not be negative")
    elif value > MAX_PRICE:
        state.add_error("price", f"Must not exceed {MAX_PRICE}")
    elif value != value.quantize(CENT):
        state.add_error("price", "Must have at most 2 decimal places")
    else:
        return Price(value)
    return Price.zero()
