"""Store data proxy: validate, resolve credentials, query Shopify, relay."""

from typing import Any, Callable

import structlog
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from shop_explorer.errors import ProxyError, ProxyResult, ProxySuccess
from shop_explorer.integrations.queries import DataType, get_query, parse_data_type
from shop_explorer.integrations.shopify import (
    ShopifyAPIError,
    ShopifyClient,
    ShopifyTransportError,
)
from shop_explorer.services.stores import get_store

logger = structlog.get_logger()

ClientFactory = Callable[[str, str], ShopifyClient]

# stores.id is BIGINT
MAX_STORE_ID = 2**63 - 1


class FetchDataRequest(BaseModel):
    """Validated proxy request."""

    store_id: int = Field(..., gt=0, le=MAX_STORE_ID)
    data_type: DataType


def validate_request(payload: Any) -> FetchDataRequest | ProxyError:
    """Check the raw request body. Never touches the database."""
    if (
        not isinstance(payload, dict)
        or payload.get("store_id") is None
        or payload.get("data_type") is None
    ):
        return ProxyError.bad_request("Missing required fields: store_id and data_type.")

    data_type = parse_data_type(payload["data_type"])
    if data_type is None:
        return ProxyError.bad_request(f"Invalid data_type specified: {payload['data_type']}")

    try:
        return FetchDataRequest.model_validate(
            {"store_id": payload["store_id"], "data_type": data_type}
        )
    except ValidationError as e:
        details = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        return ProxyError.bad_request("Invalid store_id.", details)


async def fetch_store_data(
    payload: Any,
    session: AsyncSession,
    client_factory: ClientFactory = ShopifyClient,
) -> ProxyResult:
    """
    Fetch one page of store data from Shopify.

    Runs validate -> resolve credentials -> call upstream -> check GraphQL
    errors, stopping at the first failure. Makes at most one outbound call
    and never retries.

    Args:
        payload: Decoded request body, expected ``{store_id, data_type}``
        session: Database session for the credential lookup
        client_factory: Builds a client from (domain, access token)

    Returns:
        ProxySuccess with the upstream ``data`` object, or a ProxyError
    """
    request = validate_request(payload)
    if isinstance(request, ProxyError):
        logger.info("fetch_request_rejected", reason=request.message)
        return request

    logger.info(
        "fetch_store_data",
        store_id=request.store_id,
        data_type=request.data_type.value,
    )

    store = await get_store(session, request.store_id)
    if store is None:
        logger.warning("store_not_found", store_id=request.store_id)
        return ProxyError.not_found(f"Store with ID {request.store_id} not found.")

    domain, access_token = store.shopify_domain, store.api_access_token
    # Release the connection before the upstream call, which may be slow
    await session.commit()

    query = get_query(request.data_type)

    async with client_factory(domain, access_token) as client:
        try:
            body = await client.execute(query)
        except ShopifyAPIError as e:
            return ProxyError.upstream(
                f"Shopify API failed with status {e.status_code}",
                status=e.status_code,
                details=e.body,
            )
        except ShopifyTransportError as e:
            return ProxyError.upstream(str(e))

    if body.get("errors") is not None:
        logger.error(
            "shopify_graphql_errors",
            store_id=request.store_id,
            data_type=request.data_type.value,
            errors=body["errors"],
        )
        return ProxyError.graphql(body["errors"])

    return ProxySuccess(body.get("data") or {})
