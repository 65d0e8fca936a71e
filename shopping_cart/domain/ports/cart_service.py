"""カートサービスインターフェース."""
from abc import ABC, abstractmethod

from ..entities import ShoppingItem
from ..identifiers import ItemId


class CartService(ABC):
    """カート内商品コレクションを所有するサービスのインターフェース."""

    @abstractmethod
    def get_all_items(self) -> list[ShoppingItem]:
        """全商品を取得する."""
        pass

    @abstractmethod
    def get_by_id(self, item_id: ItemId) -> ShoppingItem | None:
        """商品IDで検索する."""
        pass

    @abstractmethod
    def add(self, item: ShoppingItem) -> ShoppingItem:
        """商品を追加し、保存された商品を返す."""
        pass

    @abstractmethod
    def remove(self, item_id: ItemId) -> bool:
        """商品を削除する.

        Returns:
            削除した場合True、存在しなかった場合False
        """
        pass
