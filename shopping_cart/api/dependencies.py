"""依存性注入コンテナ."""
import os

from shopping_cart.domain.ports import CartService
from shopping_cart.infrastructure import InMemoryCartService


def _seed_sample_items() -> bool:
    """サンプル商品を投入するか判定する."""
    return os.environ.get("SEED_SAMPLE_ITEMS") == "true"


class Dependencies:
    """Lambdaエントリーポイント用の依存性コンテナ.

    コントローラー自体はこのコンテナを参照せず、生成時にサービスを受け取る。
    """

    _cart_service: CartService | None = None

    @classmethod
    def get_cart_service(cls) -> CartService:
        """カートサービスを取得する."""
        if cls._cart_service is None:
            if _seed_sample_items():
                cls._cart_service = InMemoryCartService.with_sample_items()
            else:
                cls._cart_service = InMemoryCartService()
        return cls._cart_service

    @classmethod
    def set_cart_service(cls, service: CartService) -> None:
        """カートサービスを設定する（テスト用）."""
        cls._cart_service = service

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_service = None
