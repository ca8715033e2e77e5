#!/usr/bin/env python
import os
from rich import print

from sdk.product_client import ProductClient, ProductApiError


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "default-secret-key-fallback"),
    )

    # -----------------------------
    # Browse the seeded catalog
    # -----------------------------
    print("\nListing electronics, one per page...")
    print(c.list_products(category="electronics", limit=1, page=1))
    print(c.list_products(category="electronics", limit=1, page=2))

    print("\nSearching for 'coffee'...")
    print(c.search_products("coffee"))

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("Electric Kettle", 35, "kitchen", description="1.7L stainless steel")
    print(kettle)

    print("\nMarking it out of stock (full record required)...")
    print(c.update_product(kettle["id"], name=kettle["name"], price=kettle["price"],
                           category=kettle["category"], inStock=False))

    print("\nStatistics...")
    print(c.stats())

    print("\nDeleting it twice...")
    c.delete_product(kettle["id"])
    try:
        c.delete_product(kettle["id"])
    except ProductApiError as e:
        print(f"[yellow]{e}[/yellow]")

    # -----------------------------
    # Validation errors carry details
    # -----------------------------
    print("\nCreating an invalid product...")
    try:
        c.create_product("ab", -1, "")
    except ProductApiError as e:
        print(f"[red]{e.message}[/red]", e.details)


if __name__ == "__main__":
    main()
