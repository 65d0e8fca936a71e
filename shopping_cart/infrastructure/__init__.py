"""インフラストラクチャ層モジュール."""
from .services import InMemoryCartService

__all__ = [
    "InMemoryCartService",
]
