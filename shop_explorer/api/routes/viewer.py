"""Data viewer endpoint: proxied store data shaped into table rows."""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shop_explorer.api.responses import proxy_error_response
from shop_explorer.api.routes.functions import get_client_factory, run_proxy
from shop_explorer.api.schemas import DataViewResponse
from shop_explorer.database import get_session
from shop_explorer.errors import ProxyError
from shop_explorer.integrations.queries import DataType
from shop_explorer.services.proxy import ClientFactory
from shop_explorer.services.normalize import extract_nodes, normalize_nodes
from shop_explorer.services.table import build_table

logger = structlog.get_logger()
router = APIRouter()


@router.get(
    "/stores/{store_id}/data/{data_type}",
    response_model=DataViewResponse,
    responses={400: {}, 404: {}, 500: {}, 502: {}},
)
async def view_store_data(
    store_id: int,
    data_type: DataType,
    session: AsyncSession = Depends(get_session),
    client_factory: ClientFactory = Depends(get_client_factory),
):
    """
    Latest page of orders, products or customers for a store.

    Failures come back as the proxy's error envelope and status; nothing
    is retried.
    """
    result = await run_proxy({"store_id": store_id, "data_type": data_type.value}, session, client_factory)
    if isinstance(result, ProxyError):
        return proxy_error_response(result)

    rows = normalize_nodes(extract_nodes(result.data, data_type), data_type)
    table = build_table(rows, data_type)

    if not rows:
        logger.info("no_data_found", store_id=store_id, data_type=data_type.value)

    return DataViewResponse(
        store_id=store_id,
        data_type=data_type,
        count=len(rows),
        columns=table["columns"],
        rows=rows,
        table=table["rows"],
    )
