"""Store credential management."""

import re

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shop_explorer.models.store import Store

logger = structlog.get_logger()

SHOPIFY_DOMAIN_SUFFIX = ".myshopify.com"

_PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)


class DuplicateStoreError(Exception):
    """A store with the same Shopify domain already exists."""

    def __init__(self, domain: str):
        super().__init__(f"A store with domain {domain} already exists.")
        self.domain = domain


def normalize_shop_domain(value: str) -> str:
    """
    Normalize user input to a bare ``*.myshopify.com`` hostname.

    "https://foo.myshopify.com/" -> "foo.myshopify.com"
    "foo"                        -> "foo.myshopify.com"
    "Foo.MyShopify.com"           -> "foo.myshopify.com"

    Raises:
        ValueError: if nothing is left after stripping
    """
    domain = _PROTOCOL_RE.sub("", value.strip()).rstrip("/").lower()
    if not domain:
        raise ValueError("Shopify domain must not be empty")
    if not domain.endswith(SHOPIFY_DOMAIN_SUFFIX):
        domain = f"{domain}{SHOPIFY_DOMAIN_SUFFIX}"
    return domain


async def create_store(
    session: AsyncSession,
    store_name: str,
    shopify_domain: str,
    api_access_token: str,
) -> Store:
    """
    Register a store's credentials.

    Args:
        session: Database session
        store_name: Display name
        shopify_domain: Domain as typed by the operator; normalized here
        api_access_token: Admin API access token

    Returns:
        The persisted store

    Raises:
        DuplicateStoreError: if the normalized domain is already registered
    """
    domain = normalize_shop_domain(shopify_domain)
    store = Store(
        store_name=store_name,
        shopify_domain=domain,
        api_access_token=api_access_token,
    )
    session.add(store)

    try:
        await session.flush()
    except IntegrityError as e:
        await session.rollback()
        logger.warning("store_domain_conflict", domain=domain)
        raise DuplicateStoreError(domain) from e

    await session.refresh(store)
    logger.info("store_created", store_id=store.id, domain=domain)
    return store


async def list_stores(session: AsyncSession) -> list[Store]:
    """All stores, newest first."""
    result = await session.execute(select(Store).order_by(Store.created_at.desc()))
    return list(result.scalars().all())


async def get_store(session: AsyncSession, store_id: int) -> Store | None:
    """Look up a store by id."""
    result = await session.execute(select(Store).where(Store.id == store_id))
    return result.scalar_one_or_none()
