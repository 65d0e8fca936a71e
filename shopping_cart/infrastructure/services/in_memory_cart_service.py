"""カートサービスのインメモリ実装."""
from __future__ import annotations

from collections.abc import Iterable

from shopping_cart.domain.entities import ShoppingItem
from shopping_cart.domain.identifiers import ItemId
from shopping_cart.domain.ports import CartService
from shopping_cart.domain.value_objects import Price

# ローカル開発用のサンプル商品（IDは固定）
SAMPLE_ITEMS: tuple[ShoppingItem, ...] = (
    ShoppingItem(
        id=ItemId("ab2bd817-98cd-4cf3-a80a-53ea0cd9c200"),
        name="Orange Juice",
        manufacturer="Orange Tree",
        price=Price.of("5.00"),
    ),
    ShoppingItem(
        id=ItemId("815accac-fd5b-478a-a9d6-f171a2f6ae7f"),
        name="Diary Milk",
        manufacturer="Cow",
        price=Price.of("4.00"),
    ),
    ShoppingItem(
        id=ItemId("33704c4a-5b87-464c-bfb6-51971b4d18ad"),
        name="Frozen Pizza",
        manufacturer="Uncle Mickey",
        price=Price.of("12.00"),
    ),
)


class InMemoryCartService(CartService):
    """カートサービスのインメモリ実装.

    挿入順を保持する。スレッドセーフではない。
    """

    def __init__(self, items: Iterable[ShoppingItem] = ()) -> None:
        """初期化.

        Args:
            items: 初期投入する商品
        """
        self._items: dict[str, ShoppingItem] = {}
        for item in items:
            self._items[item.id.value] = item

    @classmethod
    def with_sample_items(cls) -> InMemoryCartService:
        """サンプル商品を投入済みのサービスを生成する."""
        return cls(SAMPLE_ITEMS)

    def get_all_items(self) -> list[ShoppingItem]:
        """全商品を取得する."""
        return list(self._items.values())

    def get_by_id(self, item_id: ItemId) -> ShoppingItem | None:
        """商品IDで検索する."""
        return self._items.get(item_id.value)

    def add(self, item: ShoppingItem) -> ShoppingItem:
        """商品を追加する."""
        self._items[item.id.value] = item
        return item

    def remove(self, item_id: ItemId) -> bool:
        """商品を削除する."""
        return self._items.pop(item_id.value, None) is not None
