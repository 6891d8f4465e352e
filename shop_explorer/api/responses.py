"""JSON responses shared by every route, including the error envelope."""

from typing import Any

from fastapi.responses import JSONResponse

from shop_explorer.errors import ProxyError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int, details: Any = None) -> JSONResponse:
    """``{"error": ..., "details"?: ...}`` with CORS headers."""
    envelope: dict[str, Any] = {"error": message}
    if details is not None:
        envelope["details"] = details
    return json_response(envelope, status_code)


def proxy_error_response(error: ProxyError) -> JSONResponse:
    return json_response(error.to_envelope(), error.status_code)
