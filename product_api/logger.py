"""
Logging configuration for the product API.

One "product_api" logger writes to stdout; modules take children of it
through get_logger().
"""
import logging
import sys
from typing import Optional

logger = logging.getLogger("product_api")

# Prevent propagation to root logger (avoid duplicate logs under uvicorn)
logger.propagate = False


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach the console handler (once) and apply the level.

    Args:
        level: Log level name, e.g. "INFO" or "debug"

    Returns:
        The package logger
    """
    level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child "product_api.<name>"."""
    if name:
        return logging.getLogger(f"product_api.{name}")
    return logger
