"""API レスポンスユーティリティ."""
import json
import os
from typing import Any

from shopping_cart.api.request import get_header

DEFAULT_ALLOWED_ORIGINS = "https://shop.example.com"

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def get_allowed_origins() -> list[str]:
    """CORS で許可するオリジンの一覧を環境変数から組み立てる."""
    configured = os.environ.get("CORS_ALLOWED_ORIGINS") or DEFAULT_ALLOWED_ORIGINS
    origins = [origin.strip() for origin in configured.split(",") if origin.strip()]
    if not origins:
        origins = [DEFAULT_ALLOWED_ORIGINS]
    if os.environ.get("ALLOW_DEV_ORIGINS") == "true":
        origins.extend(DEV_ORIGINS)
    return origins


def get_cors_origin(event: dict | None = None) -> str:
    """リクエストの Origin ヘッダーから許可するオリジンを返す."""
    allowed = get_allowed_origins()
    if event:
        origin = get_header(event, "Origin") or ""
        if origin in allowed:
            return origin
    return allowed[0]


def _headers(event: dict | None, extra: dict[str, str] | None = None) -> dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_cors_origin(event),
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Allow-Methods": "GET,POST,DELETE,OPTIONS",
    }
    if extra:
        headers.update(extra)
    return headers


def success_response(
    body: Any,
    status_code: int = 200,
    event: dict | None = None,
    headers: dict[str, str] | None = None,
) -> dict:
    """成功レスポンスを生成する.

    Args:
        body: レスポンスボディ
        status_code: HTTPステータスコード
        event: API Gatewayイベント（CORS Origin判定用）
        headers: 追加するヘッダー（Location など）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": status_code,
        "headers": _headers(event, headers),
        "body": json.dumps(body, ensure_ascii=False, default=str),
    }


def empty_response(status_code: int = 200, event: dict | None = None) -> dict:
    """ボディなしのレスポンスを生成する."""
    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": "",
    }


def error_response(
    message: str,
    status_code: int = 400,
    error_code: str | None = None,
    details: dict[str, list[str]] | None = None,
    event: dict | None = None,
) -> dict:
    """エラーレスポンスを生成する.

    Args:
        message: エラーメッセージ
        status_code: HTTPステータスコード
        error_code: エラーコード
        details: フィールドごとのエラー詳細
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    body: dict[str, Any] = {"error": {"message": message}}
    if error_code:
        body["error"]["code"] = error_code
    if details:
        body["error"]["details"] = details

    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False),
    }


def not_found_response(resource: str = "Resource", event: dict | None = None) -> dict:
    """404 Not Foundレスポンスを生成する."""
    return error_response(
        f"{resource} not found", status_code=404, error_code="NOT_FOUND", event=event
    )


def bad_request_response(message: str, event: dict | None = None) -> dict:
    """400 Bad Requestレスポンスを生成する."""
    return error_response(message, status_code=400, error_code="BAD_REQUEST", event=event)


def validation_error_response(errors: dict[str, list[str]], event: dict | None = None) -> dict:
    """入力検証エラーの400レスポンスを生成する."""
    return error_response(
        "Validation failed",
        status_code=400,
        error_code="VALIDATION_ERROR",
        details=errors,
        event=event,
    )
