"""
Configuration and settings for the todos service.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings, read from ``TODOS_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="TODOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")

    # Upstream posts API
    posts_url: str = Field(default="http://jsonplaceholder.typicode.com/posts")
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # Request bodies larger than this are rejected before parsing.
    max_body_bytes: int = Field(default=16 * 1024, gt=0)

    store_lock_timeout_seconds: float = Field(default=5.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
