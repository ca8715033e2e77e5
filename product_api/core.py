import math
import uuid
from typing import Optional, Dict, Any, List, Sequence

from .errors import ValidationError
from .models import Product, PRODUCT_FIELDS

# Query helpers and record builders used by the route handlers.
# All of them work on snapshots and never touch the store.

def _product_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    return {k: body[k] for k in PRODUCT_FIELDS if k in body}

def make_product(body: Dict[str, Any]) -> Product:
    data = _product_fields(body)
    data["id"] = uuid.uuid4().hex
    if data.get("inStock") is None:
        data["inStock"] = True
    return Product.model_validate(data)

def merge_product(existing: Product, body: Dict[str, Any]) -> Product:
    # shallow merge over the stored record; the id is never taken from the body
    data = existing.model_dump(by_alias=True)
    data.update(_product_fields(body))
    data["id"] = existing.id
    return Product.model_validate(data)

# ---------------------------
# Query engine
# ---------------------------
def filter_by_category(products: Sequence[Product], category: Optional[str] = None) -> List[Product]:
    if not category:
        return list(products)
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]

def search_products(products: Sequence[Product], q: Optional[str]) -> List[Product]:
    if not q:
        raise ValidationError("Search query (q) parameter is required.")
    term = q.lower()
    return [
        p for p in products
        if term in p.name.lower() or (p.description is not None and term in p.description.lower())
    ]

def paginate(items: Sequence[Any], page: int = 1, limit: int = 10) -> Dict[str, Any]:
    """Slice one page out of items.

    currentPage echoes the requested page; a page past the end (or below 1)
    yields an empty window rather than an error. Unlike a raw slice, pages
    below 1 never wrap around to the end of the list, and a limit below 1 is
    rejected instead of producing an unbounded page count.
    """
    if limit < 1:
        raise ValidationError("Pagination limit must be a positive integer.")
    start = max((page - 1) * limit, 0)
    end = max(page * limit, 0)
    return {
        "totalItems": len(items),
        "totalPages": math.ceil(len(items) / limit),
        "currentPage": page,
        "products": list(items[start:end]),
    }

def category_stats(products: Sequence[Product]) -> Dict[str, Any]:
    count_by_category: Dict[str, int] = {}
    for p in products:
        count_by_category[p.category] = count_by_category.get(p.category, 0) + 1
    return {
        "totalProducts": len(products),
        "inStockCount": sum(1 for p in products if p.in_stock),
        "countByCategory": count_by_category,
    }
