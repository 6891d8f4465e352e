"""Edge-function style endpoint that proxies store data from Shopify."""

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shop_explorer.api.responses import json_response, proxy_error_response
from shop_explorer.database import get_session
from shop_explorer.errors import ProxyError, ProxyResult
from shop_explorer.integrations.shopify import ShopifyClient
from shop_explorer.services.proxy import ClientFactory, fetch_store_data

logger = structlog.get_logger()
router = APIRouter()


def get_client_factory() -> ClientFactory:
    """Shopify client factory (FastAPI dependency, overridden in tests)."""
    return ShopifyClient


async def run_proxy(
    payload,
    session: AsyncSession,
    client_factory: ClientFactory,
) -> ProxyResult:
    """Run the proxy, turning anything unexpected into an Internal error."""
    try:
        return await fetch_store_data(payload, session, client_factory)
    except Exception:
        logger.exception("fetch_store_data_failed")
        return ProxyError.internal()


@router.post("/fetch-shopify-data")
async def fetch_shopify_data(
    request: Request,
    session: AsyncSession = Depends(get_session),
    client_factory: ClientFactory = Depends(get_client_factory),
):
    """
    Fetch the latest orders, products or customers of a store.

    Body: ``{"store_id": 1, "data_type": "orders"}``. Returns the Shopify
    ``data`` object, or ``{"error": ..., "details"?: ...}``.
    """
    try:
        payload = await request.json()
    except ValueError:
        return proxy_error_response(ProxyError.bad_request("Request body must be valid JSON."))

    result = await run_proxy(payload, session, client_factory)
    if isinstance(result, ProxyError):
        return proxy_error_response(result)
    return json_response(result.data)
