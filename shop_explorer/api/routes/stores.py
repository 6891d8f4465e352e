"""Store management endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from shop_explorer.api.schemas import StoreCreate, StoreResponse
from shop_explorer.database import get_session
from shop_explorer.services.stores import DuplicateStoreError, create_store, list_stores

router = APIRouter()


@router.get("/stores", response_model=List[StoreResponse])
async def get_stores(session: AsyncSession = Depends(get_session)):
    """List connected stores, newest first."""
    return await list_stores(session)


@router.post("/stores", response_model=StoreResponse, status_code=201)
async def add_store(
    request: StoreCreate,
    session: AsyncSession = Depends(get_session),
):
    """Connect a new store. The domain is normalized to ``*.myshopify.com``."""
    try:
        return await create_store(
            session,
            store_name=request.store_name,
            shopify_domain=request.shopify_domain,
            api_access_token=request.api_access_token,
        )
    except DuplicateStoreError as e:
        raise HTTPException(status_code=409, detail=str(e))
