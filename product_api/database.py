import threading
from typing import Dict, Any, List, Optional, Iterable

from .errors import NotFoundError
from .models import Product

# This file holds the in-memory product collection and its lock.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Insertion-ordered product collection.

    Every operation is a single step under one lock, so concurrent writers
    interleave at whole-operation granularity (last write wins).
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._lock = threading.Lock()
        rows = SEED_PRODUCTS if seed is None else seed
        self._products: List[Product] = [Product.model_validate(r) for r in rows]

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def list_all(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            i = self._index_of(product_id)
            return self._products[i].model_copy() if i >= 0 else None

    def insert(self, product: Product) -> Product:
        with self._lock:
            if self._index_of(product.id) >= 0:
                raise ValueError(f"duplicate product id {product.id}")
            self._products.append(product.model_copy())
            return product

    def replace(self, product_id: str, product: Product) -> Product:
        with self._lock:
            i = self._index_of(product_id)
            if i < 0:
                raise NotFoundError.for_product(product_id, "update")
            self._products[i] = product.model_copy()
            return product

    def remove_by_id(self, product_id: str) -> None:
        with self._lock:
            i = self._index_of(product_id)
            if i < 0:
                raise NotFoundError.for_product(product_id, "deletion")
            del self._products[i]

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
