#!/usr/bin/env python3
"""Register a Shopify store's credentials."""

import argparse
import asyncio
import sys

sys.path.insert(0, ".")

from shop_explorer.database import dispose_engine, get_session_context
from shop_explorer.services.stores import DuplicateStoreError, create_store


async def add_store(name: str, domain: str, token: str) -> dict:
    """Create the store record and return its public fields."""
    try:
        async with get_session_context() as session:
            store = await create_store(
                session,
                store_name=name,
                shopify_domain=domain,
                api_access_token=token,
            )
            return {
                "store_id": store.id,
                "store_name": store.store_name,
                "shopify_domain": store.shopify_domain,
            }
    finally:
        await dispose_engine()


def main():
    parser = argparse.ArgumentParser(description="Connect a Shopify store")
    parser.add_argument("--name", required=True, help="Store display name")
    parser.add_argument("--domain", required=True, help="Shopify domain, e.g. my-shop or my-shop.myshopify.com")
    parser.add_argument("--token", required=True, help="Admin API access token (shpat_...)")

    args = parser.parse_args()

    try:
        result = asyncio.run(add_store(args.name, args.domain, args.token))
    except (DuplicateStoreError, ValueError) as e:
        print(f"\n❌ {e}\n")
        sys.exit(1)

    print(f"\n✅ Store added successfully!\n")
    print(f"Store ID:   {result['store_id']}")
    print(f"Name:       {result['store_name']}")
    print(f"Domain:     {result['shopify_domain']}\n")


if __name__ == "__main__":
    main()
