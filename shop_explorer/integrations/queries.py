"""Canned Shopify Admin GraphQL queries, one per data type.

Each query returns a single page of ``PAGE_SIZE`` records ordered newest
first by a type-specific sort key. Adding a data type means adding an enum
member and a ``case`` below.
"""

from enum import Enum
from typing import Any, assert_never

PAGE_SIZE = 20


class DataType(str, Enum):
    """Kinds of store data the dashboard can fetch."""

    ORDERS = "orders"
    PRODUCTS = "products"
    CUSTOMERS = "customers"


ORDERS_QUERY = f"""
query getOrders {{
  orders(first: {PAGE_SIZE}, sortKey: PROCESSED_AT, reverse: true) {{
    edges {{
      node {{
        id
        name
        processedAt
        displayFinancialStatus
        displayFulfillmentStatus
        totalPriceSet {{ shopMoney {{ amount currencyCode }} }}
      }}
    }}
  }}
}}
"""

PRODUCTS_QUERY = f"""
query getProducts {{
  products(first: {PAGE_SIZE}, sortKey: UPDATED_AT, reverse: true) {{
    edges {{
      node {{
        id
        title
        handle
        status
        totalInventory
        updatedAt
        featuredImage {{ url }}
        priceRangeV2 {{ minVariantPrice {{ amount currencyCode }} }}
      }}
    }}
  }}
}}
"""

# Protected customer data (name, email) is left out so the query works
# without the extra access scopes.
CUSTOMERS_QUERY = f"""
query getCustomers {{
  customers(first: {PAGE_SIZE}, sortKey: UPDATED_AT, reverse: true) {{
    edges {{
      node {{
        id
        numberOfOrders
        amountSpent {{ amount currencyCode }}
      }}
    }}
  }}
}}
"""


def get_query(data_type: DataType) -> str:
    """Return the canned query for a data type."""
    match data_type:
        case DataType.ORDERS:
            return ORDERS_QUERY
        case DataType.PRODUCTS:
            return PRODUCTS_QUERY
        case DataType.CUSTOMERS:
            return CUSTOMERS_QUERY
        case _:
            assert_never(data_type)


def parse_data_type(value: Any) -> DataType | None:
    """Map a raw selector to a ``DataType``, or None if unrecognized."""
    if not isinstance(value, str):
        return None
    try:
        return DataType(value)
    except ValueError:
        return None
