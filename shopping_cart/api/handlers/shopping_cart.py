"""ショッピングカートAPI ハンドラー."""
from typing import Any

from shopping_cart.api.controllers import ShoppingCartController
from shopping_cart.api.dependencies import Dependencies
from shopping_cart.api.request import get_body, get_path_parameter
from shopping_cart.api.response import bad_request_response
from shopping_cart.api.validation import bind_shopping_item
from shopping_cart.domain.identifiers import ItemId


def _controller() -> ShoppingCartController:
    return ShoppingCartController(Dependencies.get_cart_service())


def list_items(event: dict, context: Any) -> dict:
    """カート内の全商品を取得する.

    GET /items
    """
    return _controller().list_items(event=event)


def get_item(event: dict, context: Any) -> dict:
    """商品を取得する.

    GET /items/{item_id}

    Path Parameters:
        item_id: 商品ID
    """
    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    return _controller().get_by_id(ItemId(item_id_str), event=event)


def add_item(event: dict, context: Any) -> dict:
    """商品をカートに追加する.

    POST /items

    Request Body:
        name: 商品名（必須）
        manufacturer: メーカー
        price: 価格（0以上、省略時は0）

    Returns:
        作成された商品
    """
    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    item, validation_state = bind_shopping_item(body)
    return _controller().add(item, validation_state, event=event)


def remove_item(event: dict, context: Any) -> dict:
    """商品をカートから削除する.

    DELETE /items/{item_id}

    Path Parameters:
        item_id: 商品ID
    """
    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    return _controller().remove(ItemId(item_id_str), event=event)
