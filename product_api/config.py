"""Service configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The shared API key and the listening port come from the environment
      (or a .env file); defaults make the service runnable out of the box.
    - get_settings() is cached (one instance per process).
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from PORT, HOST, API_KEY, LOG_LEVEL and CORS_ORIGINS."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    host: str = "0.0.0.0"
    port: int = 3000

    # Single shared secret expected in the x-api-key header
    api_key: str = "default-secret-key-fallback"

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
