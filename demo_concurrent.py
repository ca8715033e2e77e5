import asyncio
import os

from sdk.product_client import ProductClient, ProductApiError


async def create(client, i):
    try:
        p = await client.create_product_async(f"Gadget {i}", 10 + i, "gadgets")
        print(f"✅ created {p['name']} -> {p['id']}")
        return p
    except ProductApiError as e:
        print(f"❌ Gadget {i} failed: {e}")
        return None


async def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "default-secret-key-fallback"),
    )

    print("\n⚡ Creating products concurrently...")
    created = await asyncio.gather(*(create(c, i) for i in range(10)))
    ids = [p["id"] for p in created if p]
    print(f"\n{len(ids)} created, {len(set(ids))} distinct ids")

    print("\n📊 Final stats:", c.stats())


if __name__ == "__main__":
    asyncio.run(main())
