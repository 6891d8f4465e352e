"""Turn Shopify GraphQL nodes into display-ready rows.

Everything here is pure: the same nodes always give the same rows, input
nodes are never mutated, and a missing or malformed field degrades to a
fallback string instead of raising.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, TypedDict, assert_never

from shop_explorer.integrations.queries import DataType

NOT_AVAILABLE = "N/A"
GUEST = "Guest"

_CENTS = Decimal("0.01")


class Money(TypedDict, total=False):
    amount: str
    currencyCode: str


class MoneyBag(TypedDict, total=False):
    shopMoney: Money


class PriceRange(TypedDict, total=False):
    minVariantPrice: Money


class OrderCustomer(TypedDict, total=False):
    firstName: str | None
    lastName: str | None
    email: str | None


class OrderNode(TypedDict, total=False):
    """Order as returned by the orders query."""

    id: str
    name: str
    processedAt: str | None
    displayFinancialStatus: str | None
    displayFulfillmentStatus: str | None
    totalPriceSet: MoneyBag | None
    customer: OrderCustomer | None


class ProductNode(TypedDict, total=False):
    """Product as returned by the products query."""

    id: str
    title: str
    handle: str
    status: str
    totalInventory: int | None
    updatedAt: str | None
    featuredImage: dict[str, Any] | None
    priceRangeV2: PriceRange | None


class CustomerNode(TypedDict, total=False):
    """Customer as returned by the customers query."""

    id: str
    displayName: str | None
    email: str | None
    numberOfOrders: str | int | None
    amountSpent: Money | None


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def format_money(money: Any) -> str:
    """'USD 49.90' from ``{amount, currencyCode}``, else 'N/A'."""
    amount = _get(money, "amount")
    currency = _get(money, "currencyCode")
    if amount is None or not currency:
        return NOT_AVAILABLE

    try:
        value = Decimal(str(amount))
        if not value.is_finite():
            return NOT_AVAILABLE
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return NOT_AVAILABLE

    return f"{currency} {value}"


def format_date(value: Any) -> str:
    """Short US-style date (M/D/YYYY) from an ISO-8601 timestamp, else 'N/A'."""
    if not value or not isinstance(value, str):
        return NOT_AVAILABLE
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return NOT_AVAILABLE
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def customer_display_name(customer: Any) -> str:
    """Full name, falling back to email, then 'Guest'."""
    if not isinstance(customer, dict):
        return GUEST
    first = customer.get("firstName") or ""
    last = customer.get("lastName") or ""
    name = f"{first} {last}".strip()
    return name or customer.get("email") or GUEST


def _order_row(node: OrderNode) -> dict[str, Any]:
    return {
        **node,
        "totalPrice": format_money(_get(node.get("totalPriceSet"), "shopMoney")),
        "customerName": customer_display_name(node.get("customer")),
        "processedAt": format_date(node.get("processedAt")),
    }


def _product_row(node: ProductNode) -> dict[str, Any]:
    return {
        **node,
        "price": format_money(_get(node.get("priceRangeV2"), "minVariantPrice")),
        "updatedAt": format_date(node.get("updatedAt")),
    }


def _customer_row(node: CustomerNode) -> dict[str, Any]:
    return {
        **node,
        "amountSpent": format_money(node.get("amountSpent")),
    }


def normalize_node(node: Any, data_type: DataType) -> dict[str, Any]:
    """Build the display row for one node."""
    if not isinstance(node, dict):
        node = {}

    match data_type:
        case DataType.ORDERS:
            return _order_row(node)
        case DataType.PRODUCTS:
            return _product_row(node)
        case DataType.CUSTOMERS:
            return _customer_row(node)
        case _:
            assert_never(data_type)


def normalize_nodes(nodes: Iterable[Any], data_type: DataType) -> list[dict[str, Any]]:
    """Build display rows for a list of nodes."""
    return [normalize_node(node, data_type) for node in nodes]


def extract_nodes(payload: Any, data_type: DataType) -> list[dict[str, Any]]:
    """
    Pull ``<data_type>.edges[*].node`` out of a response payload.

    Accepts either the bare ``data`` object or a full ``{"data": ...}``
    GraphQL response. Any missing level yields an empty list.
    """
    if isinstance(payload, dict) and data_type.value not in payload and "data" in payload:
        payload = payload["data"]

    edges = _get(_get(payload, data_type.value), "edges")
    if not isinstance(edges, list):
        return []

    return [edge["node"] for edge in edges if isinstance(_get(edge, "node"), dict)]
