"""Shopify Admin GraphQL API integration."""

from typing import Any, Optional

import httpx
import structlog

from shop_explorer.config import settings

logger = structlog.get_logger()


class ShopifyError(Exception):
    """Base class for Shopify client failures."""


class ShopifyAPIError(ShopifyError):
    """Shopify answered, but not with a usable success response."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Shopify API failed with status {status_code}")
        self.status_code = status_code
        self.body = body


class ShopifyTransportError(ShopifyError):
    """The request never got an HTTP response (DNS, connect, timeout)."""


class ShopifyClient:
    """Client for the Shopify Admin GraphQL API."""

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Shopify client.

        Args:
            shop: Shop domain (e.g., "mystore.myshopify.com")
            access_token: Shopify Admin API access token
            api_version: Admin API version, defaults to settings
            timeout: Request timeout in seconds, defaults to settings
            transport: Optional httpx transport (used by tests)
        """
        self.shop = shop
        self.api_version = api_version or settings.shopify_api_version
        self.graphql_url = f"https://{shop}/admin/api/{self.api_version}/graphql.json"
        self.headers = {
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        }
        self.timeout = timeout if timeout is not None else settings.shopify_request_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ShopifyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def execute(self, query: str) -> dict[str, Any]:
        """
        Run a GraphQL query and return the decoded response body.

        The body is returned as-is, including any top-level ``errors``;
        interpreting GraphQL-level failures is left to the caller.

        Raises:
            ShopifyAPIError: non-2xx status, or a body that is not a JSON object
            ShopifyTransportError: no HTTP response was received
        """
        try:
            response = await self.client.post(self.graphql_url, json={"query": query})
        except httpx.RequestError as e:
            logger.error("shopify_request_error", shop=self.shop, error=str(e))
            raise ShopifyTransportError(f"Could not reach Shopify store {self.shop}: {e}") from e

        if not response.is_success:
            logger.error(
                "shopify_api_error",
                shop=self.shop,
                status_code=response.status_code,
                response=response.text[:500],
            )
            raise ShopifyAPIError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            logger.error(
                "shopify_invalid_response",
                shop=self.shop,
                response=response.text[:500],
            )
            raise ShopifyAPIError(502, response.text)

        return payload
