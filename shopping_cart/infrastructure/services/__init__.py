"""サービス実装モジュール."""
from .in_memory_cart_service import SAMPLE_ITEMS, InMemoryCartService

__all__ = [
    "InMemoryCartService",
    "SAMPLE_ITEMS",
]
