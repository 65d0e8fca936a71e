"""ショッピングカートコントローラー."""
import logging

from shopping_cart.api.response import (
    empty_response,
    not_found_response,
    success_response,
    validation_error_response,
)
from shopping_cart.api.validation import ValidationState
from shopping_cart.domain.entities import ShoppingItem
from shopping_cart.domain.identifiers import ItemId
from shopping_cart.domain.ports import CartService

logger = logging.getLogger(__name__)

ITEMS_PATH = "/items"


class ShoppingCartController:
    """HTTPリクエストをカートサービス呼び出しに変換し、結果をレスポンスに対応付ける.

    各操作はサービスのメソッドを1回だけ呼ぶ。
    サービスが送出した例外は捕捉しない。
    """

    def __init__(self, cart_service: CartService) -> None:
        """初期化.

        Args:
            cart_service: カートサービス
        """
        self._cart_service = cart_service

    def list_items(self, event: dict | None = None) -> dict:
        """全商品を返す（空でも200）.

        GET /items
        """
        items = self._cart_service.get_all_items()
        return success_response([item.to_dict() for item in items], event=event)

    def get_by_id(self, item_id: ItemId, event: dict | None = None) -> dict:
        """商品を1件返す.

        GET /items/{item_id}

        Returns:
            見つかれば200と商品、なければ404
        """
        item = self._cart_service.get_by_id(item_id)
        if item is None:
            logger.info("ShoppingItem not found: %s", item_id)
            return not_found_response("ShoppingItem", event=event)
        return success_response(item.to_dict(), event=event)

    def add(
        self,
        item: ShoppingItem,
        validation_state: ValidationState,
        event: dict | None = None,
    ) -> dict:
        """商品を追加する.

        POST /items

        Args:
            item: バインド済みの商品
            validation_state: ハンドラー実行前の検証結果
            event: API Gatewayイベント（CORS Origin判定用）

        Returns:
            検証エラーなら400（サービスは呼ばない）、
            成功なら201とLocationヘッダー、保存された商品
        """
        if not validation_state.is_valid:
            errors = validation_state.errors
            logger.warning("Rejected invalid ShoppingItem: fields=%s", sorted(errors))
            return validation_error_response(errors, event=event)

        stored = self._cart_service.add(item)
        logger.info("ShoppingItem created: %s", stored.id)
        return success_response(
            stored.to_dict(),
            status_code=201,
            event=event,
            headers={"Location": f"{ITEMS_PATH}/{stored.id}"},
        )

    def remove(self, item_id: ItemId, event: dict | None = None) -> dict:
        """商品を削除する.

        DELETE /items/{item_id}

        Returns:
            削除できれば200（ボディなし）、なければ404
        """
        if not self._cart_service.remove(item_id):
            logger.info("ShoppingItem not found: %s", item_id)
            return not_found_response("ShoppingItem", event=event)

        logger.info("ShoppingItem removed: %s", item_id)
        return empty_response(event=event)
