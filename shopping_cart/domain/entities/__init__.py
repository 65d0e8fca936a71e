"""エンティティモジュール."""
from .shopping_item import ShoppingItem

__all__ = [
    "ShoppingItem",
]
