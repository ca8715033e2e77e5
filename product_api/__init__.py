"""In-memory product catalog API."""

__version__ = "1.0.0"
