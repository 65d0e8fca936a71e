"""ショッピングカート商品エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..identifiers import ItemId
from ..value_objects import Price


@dataclass(frozen=True)
class ShoppingItem:
    """カートに保持される商品.

    nameが空でないことは作成時のバリデーションで確認する。
    エンティティ自体はバインド途中の不完全な状態も表現できる。
    """

    id: ItemId
    name: str
    manufacturer: str = ""
    price: Price = field(default_factory=Price.zero)

    @classmethod
    def create(
        cls,
        name: str,
        manufacturer: str = "",
        price: Price | None = None,
    ) -> ShoppingItem:
        """新しいIDを採番して商品を作成する."""
        return cls(
            id=ItemId.generate(),
            name=name,
            manufacturer=manufacturer,
            price=price if price is not None else Price.zero(),
        )

    def to_dict(self) -> dict[str, Any]:
        """レスポンス用の辞書に変換する."""
        return {
            "id": str(self.id),
            "name": self.name,
            "manufacturer": self.manufacturer,
            "price": self.price.format(),
        }
