# sdk/product_client.py
import requests
import httpx
from typing import Optional, Dict, Any, List


class ProductApiError(Exception):
    """Non-2xx reply from the product API, decoded from its error body."""

    def __init__(self, status_code: int, message: str, details: Optional[List[str]] = None):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.details = details or []


def _check(r) -> Any:
    if r.status_code >= 400:
        try:
            body = r.json()
        except ValueError:
            body = {"message": r.text}
        raise ProductApiError(r.status_code, body.get("message", ""), body.get("details"))
    if r.status_code == 204:
        return None
    return r.json()


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        # session may be any requests-compatible client (a Starlette TestClient works too)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/products{path}"

    # Read
    def list_products(self, category: Optional[str] = None, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if category:
            params["category"] = category
        r = self.session.get(self._url(""), params=params, timeout=self.timeout)
        return _check(r)

    def search_products(self, q: str) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/search"), params={"q": q}, timeout=self.timeout)
        return _check(r)

    def stats(self) -> Dict[str, Any]:
        r = self.session.get(self._url("/stats"), timeout=self.timeout)
        return _check(r)

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/{product_id}"), timeout=self.timeout)
        return _check(r)

    # Write (need the api key)
    def create_product(self, name: str, price: float, category: str,
                       description: Optional[str] = None, in_stock: Optional[bool] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(self._url(""), json=payload, timeout=self.timeout)
        return _check(r)

    def update_product(self, product_id: str, **fields: Any) -> Dict[str, Any]:
        # in_stock is accepted as a convenience spelling of inStock
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(self._url(f"/{product_id}"), json=fields, timeout=self.timeout)
        return _check(r)

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(self._url(f"/{product_id}"), timeout=self.timeout)
        _check(r)

    # Async create (used for concurrent demos)
    async def create_product_async(self, name: str, price: float, category: str,
                                   description: Optional[str] = None, in_stock: Optional[bool] = None,
                                   transport: Optional[httpx.AsyncBaseTransport] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport) as client:
            r = await client.post(self._url(""), json=payload, headers=headers)
            return _check(r)
