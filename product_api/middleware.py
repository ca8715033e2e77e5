"""
Request pipeline pieces shared by the routes.

Order for every request: request logging, then (for routes that take a body)
JSON body parsing, then for create/update the API key check followed by
product validation. Each step either lets the request through or raises an
ApiError that goes straight to the error translator.
"""
import json
import time
from typing import Any, Optional

from fastapi import Depends, Header, Request

from .auth import authenticate
from .database import ProductStore
from .errors import ValidationError
from .logger import get_logger
from .validation import validate_product

logger = get_logger("http")


async def log_requests(request: Request, call_next):
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    logger.info("%s %s", request.method, url)
    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "%s %s -> %s (%.1f ms)",
        request.method, url, response.status_code, (time.perf_counter() - started) * 1000,
    )
    return response


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


async def parse_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    # malformed JSON is left to propagate as an unclassified failure
    return json.loads(raw)


async def require_api_key(request: Request, x_api_key: Optional[str] = Header(None)) -> None:
    authenticate(x_api_key, request.app.state.settings.api_key)


async def validated_product(
    body: Any = Depends(parse_json_body),
    _: None = Depends(require_api_key),
) -> dict:
    errors = validate_product(body)
    if errors:
        raise ValidationError("Product data validation failed.", errors)
    return body
