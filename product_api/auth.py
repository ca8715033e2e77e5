# product_api/auth.py
from typing import Optional

from .errors import AuthenticationError


def authenticate(presented_key: Optional[str], secret: str) -> None:
    """Raise AuthenticationError unless presented_key equals the shared secret."""
    if not presented_key or presented_key != secret:
        raise AuthenticationError("Authentication failed. Invalid or missing API key.")
