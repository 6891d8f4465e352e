"""Permissive CORS headers on every response."""

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shop_explorer.api.responses import CORS_HEADERS


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answer preflights directly and stamp CORS headers on everything else.

    Unlike Starlette's CORSMiddleware, headers are added whether or not the
    request carries an ``Origin``, and any ``OPTIONS`` request is acknowledged
    without reaching a route.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=CORS_HEADERS)

        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
