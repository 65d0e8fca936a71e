"""ショッピングカートAPIハンドラーのテスト."""
import json

import pytest

from shopping_cart.api.dependencies import Dependencies
from shopping_cart.api.handlers import add_item, get_item, list_items, remove_item
from shopping_cart.infrastructure import InMemoryCartService

EXISTING_ID = "ab2bd817-98cd-4cf3-a80a-53ea0cd9c200"


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセットし、サンプル商品入りのサービスを設定."""
    Dependencies.reset()
    Dependencies.set_cart_service(InMemoryCartService.with_sample_items())
    yield
    Dependencies.reset()


def _make_event(item_id: str | None = None, body: dict | str | None = None) -> dict:
    """テスト用イベントを作成する."""
    event: dict = {}
    if item_id is not None:
        event["pathParameters"] = {"item_id": item_id}
    if body is not None:
        event["body"] = body if isinstance(body, str) else json.dumps(body)
    return event


class TestListItems:
    """GET /items のテスト."""

    def test_全商品を返す(self):
        response = list_items({}, None)
        assert response["statusCode"] == 200
        assert len(json.loads(response["body"])) == 3


class TestGetItem:
    """GET /items/{item_id} のテスト."""

    def test_存在するIDは200(self):
        response = get_item(_make_event(item_id=EXISTING_ID), None)
        assert response["statusCode"] == 200
        assert json.loads(response["body"])["id"] == EXISTING_ID

    def test_存在しないIDは404(self):
        response = get_item(_make_event(item_id="unknown"), None)
        assert response["statusCode"] == 404

    def test_item_idがない場合400(self):
        response = get_item({}, None)
        assert response["statusCode"] == 400


class TestAddItem:
    """POST /items のテスト."""

    def test_正しい商品は201で保存される(self):
        body = {"name": "Guinness Original 6 Pack", "manufacturer": "Guinness", "price": 12.00}
        response = add_item(_make_event(body=body), None)

        assert response["statusCode"] == 201
        created = json.loads(response["body"])
        assert created["name"] == "Guinness Original 6 Pack"
        assert response["headers"]["Location"] == f"/items/{created['id']}"
        assert len(Dependencies.get_cart_service().get_all_items()) == 4

    def test_nameがない場合400で保存されない(self):
        response = add_item(_make_event(body={"manufacturer": "Guinness", "price": 12.00}), None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"] == {"name": ["Required"]}
        assert len(Dependencies.get_cart_service().get_all_items()) == 3

    def test_巨大な指数の価格は400で保存されず一覧も取得できる(self):
        response = add_item(_make_event(body={"name": "x", "price": "1e999999999999"}), None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error"]["details"] == {"price": ["Must not exceed 999999999.99"]}
        assert len(Dependencies.get_cart_service().get_all_items()) == 3
        assert list_items({}, None)["statusCode"] == 200

    def test_小数点以下3桁の価格は400(self):
        response = add_item(_make_event(body={"name": "x", "price": "0.125"}), None)

        assert response["statusCode"] == 400
        assert len(Dependencies.get_cart_service().get_all_items()) == 3

    def test_作成レスポンスの価格は保存された価格と一致する(self):
        response = add_item(_make_event(body={"name": "x", "price": "0.5"}), None)

        created = json.loads(response["body"])
        assert created["price"] == "0.50"
        stored = Dependencies.get_cart_service().get_all_items()[-1]
        assert stored.price.format() == created["price"]

    def test_不正なJSONは400(self):
        response = add_item(_make_event(body="{broken"), None)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["code"] == "BAD_REQUEST"

    def test_ボディなしは検証エラー(self):
        response = add_item({}, None)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["code"] == "VALIDATION_ERROR"


class TestRemoveItem:
    """DELETE /items/{item_id} のテスト."""

    def test_存在するIDは200で削除される(self):
        response = remove_item(_make_event(item_id=EXISTING_ID), None)
        assert response["statusCode"] == 200
        assert len(Dependencies.get_cart_service().get_all_items()) == 2

    def test_存在しないIDは404(self):
        response = remove_item(_make_event(item_id="unknown"), None)
        assert response["statusCode"] == 404

    def test_item_idがない場合400(self):
        response = remove_item({"pathParameters": None}, None)
        assert response["statusCode"] == 400

    def test_サービスの例外は伝播する(self, monkeypatch):
        def _raise(item_id):
            raise RuntimeError("store unavailable")

        service = Dependencies.get_cart_service()
        monkeypatch.setattr(service, "remove", _raise)

        with pytest.raises(RuntimeError):
            remove_item(_make_event(item_id=EXISTING_ID), None)
