#!/usr/bin/env python3
"""Print a store's latest orders, products or customers as a table."""

import argparse
import sys

import httpx

sys.path.insert(0, ".")

from shop_explorer.integrations.queries import DataType


def render_table(columns: list[dict], rows: list[dict]) -> str:
    """Align formatted cells under their column labels."""
    labels = [c["label"] for c in columns]
    lines = [[row[c["key"]]["value"] for c in columns] for row in rows]
    widths = [
        max([len(label)] + [len(line[i]) for line in lines])
        for i, label in enumerate(labels)
    ]

    def fmt(values):
        return "  ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    out = [fmt(labels), fmt(["-" * w for w in widths])]
    out.extend(fmt(line) for line in lines)
    return "\n".join(out)


def view_store(
    base_url: str,
    store_id: int,
    data_type: DataType,
    client: httpx.Client | None = None,
) -> int:
    url = f"{base_url.rstrip('/')}/api/v1/stores/{store_id}/data/{data_type.value}"

    print(f"\n⏳ Loading {data_type.value} for store {store_id}...\n")
    try:
        with client or httpx.Client(timeout=60.0) as http:
            response = http.get(url)
    except httpx.RequestError as e:
        print(f"❌ Could not reach {base_url}: {e}")
        return 1

    try:
        body = response.json()
    except ValueError:
        body = {}

    if response.status_code != 200:
        print(f"❌ Error loading data: {body.get('error', response.text)}")
        if body.get("details") is not None:
            print(f"   Details: {body['details']}")
        print("\n   Run the command again to try again.\n")
        return 1

    if body["count"] == 0:
        print(f"No {data_type.value} found. This store doesn't have any {data_type.value} yet.\n")
        return 0

    print(render_table(body["columns"], body["table"]))
    print(f"\n{body['count']} {data_type.value}\n")
    return 0


def main():
    parser = argparse.ArgumentParser(description="View store data")
    parser.add_argument("--store-id", type=int, required=True, help="Store ID")
    parser.add_argument(
        "--data-type",
        choices=[t.value for t in DataType],
        default=DataType.ORDERS.value,
        help="What to show",
    )
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")

    args = parser.parse_args()
    sys.exit(view_store(args.base_url, args.store_id, DataType(args.data_type)))


if __name__ == "__main__":
    main()
