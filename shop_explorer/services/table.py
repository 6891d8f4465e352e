"""Column layout and cell formatting for the data viewer table."""

from dataclasses import dataclass
from typing import Any, Iterable, TypedDict, assert_never

from shop_explorer.integrations.queries import DataType

EMPTY_CELL = "-"
MAX_CELL_LENGTH = 50


@dataclass(frozen=True)
class Column:
    key: str
    label: str


ORDER_COLUMNS = (
    Column("name", "Order"),
    Column("displayFinancialStatus", "Payment Status"),
    Column("displayFulfillmentStatus", "Fulfillment Status"),
    Column("totalPrice", "Total"),
    Column("customerName", "Customer"),
    Column("processedAt", "Date"),
)

PRODUCT_COLUMNS = (
    Column("title", "Product"),
    Column("status", "Status"),
    Column("totalInventory", "Inventory"),
    Column("price", "Price"),
    Column("updatedAt", "Updated"),
)

CUSTOMER_COLUMNS = (
    Column("displayName", "Name"),
    Column("email", "Email"),
    Column("numberOfOrders", "Orders"),
    Column("amountSpent", "Total Spent"),
)


class Cell(TypedDict, total=False):
    value: str
    variant: str


class DataTable(TypedDict):
    columns: list[dict[str, str]]
    rows: list[dict[str, Cell]]


def columns_for(data_type: DataType) -> tuple[Column, ...]:
    match data_type:
        case DataType.ORDERS:
            return ORDER_COLUMNS
        case DataType.PRODUCTS:
            return PRODUCT_COLUMNS
        case DataType.CUSTOMERS:
            return CUSTOMER_COLUMNS
        case _:
            assert_never(data_type)


def is_status_column(key: str) -> bool:
    return "Status" in key or key == "status"


def status_variant(status: str) -> str:
    """Badge variant for a status string."""
    status = status.lower()
    # "unfulfilled" contains "fulfilled", so test it first
    if "unfulfilled" in status:
        return "secondary"
    if "paid" in status or "fulfilled" in status or status == "active":
        return "default"
    if "pending" in status:
        return "secondary"
    if "cancelled" in status or "archived" in status:
        return "destructive"
    return "outline"


def format_cell(value: Any) -> str:
    """Render a row value as table text."""
    if value is None:
        return EMPTY_CELL
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    if isinstance(value, str):
        if len(value) > MAX_CELL_LENGTH:
            return value[: MAX_CELL_LENGTH - 3] + "..."
        return value
    return str(value)


def build_cell(value: Any, key: str) -> Cell:
    cell: Cell = {"value": format_cell(value)}
    if value is not None and is_status_column(key):
        cell["variant"] = status_variant(str(value))
    return cell


def build_table(rows: Iterable[dict[str, Any]], data_type: DataType) -> DataTable:
    """Lay out normalized rows as formatted cells under the type's columns."""
    columns = columns_for(data_type)
    return {
        "columns": [{"key": c.key, "label": c.label} for c in columns],
        "rows": [{c.key: build_cell(row.get(c.key), c.key) for c in columns} for row in rows],
    }
