"""External service integrations."""

from shop_explorer.integrations.queries import PAGE_SIZE, DataType, get_query, parse_data_type
from shop_explorer.integrations.shopify import (
    ShopifyAPIError,
    ShopifyClient,
    ShopifyError,
    ShopifyTransportError,
)

__all__ = [
    "PAGE_SIZE",
    "DataType",
    "get_query",
    "parse_data_type",
    "ShopifyClient",
    "ShopifyError",
    "ShopifyAPIError",
    "ShopifyTransportError",
]
