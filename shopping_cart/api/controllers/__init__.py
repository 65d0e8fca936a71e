"""コントローラーモジュール."""
from .shopping_cart_controller import ShoppingCartController

__all__ = [
    "ShoppingCartController",
]
