"""Lambdaハンドラーモジュール."""
from .shopping_cart import add_item, get_item, list_items, remove_item

__all__ = [
    "list_items",
    "get_item",
    "add_item",
    "remove_item",
]
