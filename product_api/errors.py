# product_api/errors.py
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    """Failure kinds the error translator knows; the value is the HTTP status."""
    VALIDATION = 400
    AUTHENTICATION = 401
    NOT_FOUND = 404

    @property
    def status_code(self) -> int:
        return self.value


class ApiError(Exception):
    """Base for every typed failure raised by middleware and handlers."""
    kind: ErrorKind

    def __init__(self, message: str, details: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.details = list(details or [])


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND

    @classmethod
    def for_product(cls, product_id: str, action: Optional[str] = None) -> "NotFoundError":
        if action:
            return cls(f"Product with id {product_id} not found for {action}.")
        return cls(f"Product with id {product_id} not found.")


class ValidationError(ApiError):
    kind = ErrorKind.VALIDATION


class AuthenticationError(ApiError):
    kind = ErrorKind.AUTHENTICATION
