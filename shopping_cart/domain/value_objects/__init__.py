"""値オブジェクトモジュール."""
from .price import CENT, MAX_PRICE, Price

__all__ = [
    "CENT",
    "MAX_PRICE",
    "Price",
]
