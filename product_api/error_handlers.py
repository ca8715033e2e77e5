"""Error Handlers: the single place that turns failures into responses.

Invariants:
    - ApiError → its kind's status with {status: "error", message[, details]}
    - RequestValidationError (bad query parameter types) → 400 with details
    - Unmatched route or method → 404 "Route <path> not found."
    - Anything else → 500 with a generic message; internals never leak
    - Every failure is logged before the response is built
"""

from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import ApiError, ErrorKind
from .logger import get_logger

logger = get_logger("errors")


def translate_error(exc: Exception) -> Tuple[int, Dict[str, Any]]:
    """Map a raised failure to (status_code, body)."""
    if isinstance(exc, ApiError):
        body: Dict[str, Any] = {"status": "error", "message": exc.message}
        if exc.kind is ErrorKind.VALIDATION and exc.details:
            body["details"] = exc.details
        return exc.kind.status_code, body

    if isinstance(exc, RequestValidationError):
        details = [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ]
        return ErrorKind.VALIDATION.status_code, {
            "status": "error",
            "message": "Request validation failed.",
            "details": details,
        }

    return 500, {"status": "error", "message": "Internal Server Error"}


def _route_not_found(request: Request) -> JSONResponse:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return JSONResponse(
        status_code=404,
        content={"status": "error", "message": f"Route {url} not found."},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning("[%s] - %s (%s)", type(exc).__name__, exc.message, request.url.path)
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("[RequestValidationError] - %s (%s)", exc.errors(), request.url.path)
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("[HTTPException] - %s %s (%s)", exc.status_code, exc.detail, request.url.path)
        if exc.status_code in (404, 405):
            return _route_not_found(request)
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "[%s] - %s (%s)", type(exc).__name__, exc, request.url.path,
            exc_info=exc,
        )
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)
