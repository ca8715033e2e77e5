from .product_client import ProductClient, ProductApiError

__all__ = ["ProductClient", "ProductApiError"]
