"""識別子モジュール."""
from .item_id import ItemId

__all__ = [
    "ItemId",
]
