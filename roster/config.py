"""
Roster — Configuration
=======================

What:  Centralized settings loaded with Pydantic Settings.
How:   Values come from environment variables (or a .env file), are validated
       on load and exposed through the `settings` singleton.
Who:   Read by the directory client (base URL, timeout), the local store
       (bind address, collection path) and logging setup.
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Roster settings loaded from environment variables.

    The remote collection URL is the only value that matters for the client.
    The store_* values only affect the local in-memory store.
    """

    # ── Remote store ──────────────────────────────────────────────────────
    # Full URL of the REST collection resource (no trailing slash).
    roster_api_url: str = Field(
        default="https://retoolapi.dev/Vv50y8/recuperacion",
        description="Base URL of the remote employee collection resource",
    )

    # Seconds; None leaves the request unbounded.
    request_timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("roster_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Requires an absolute http(s) URL and strips any trailing slash."""
        parts = urlsplit(v.strip())
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"Invalid roster_api_url '{v}'. Must be an absolute http(s) URL")
        return v.strip().rstrip("/")

    # ── Local store ───────────────────────────────────────────────────────
    store_host: str = Field(default="127.0.0.1")
    store_port: int = Field(default=8000, ge=1024, le=65535)
    store_collection_path: str = Field(default="/employees")

    @field_validator("store_collection_path")
    @classmethod
    def validate_collection_path(cls, v: str) -> str:
        path = v.rstrip("/")
        if not path.startswith("/"):
            raise ValueError(
                f"Invalid store_collection_path '{v}'. Must be a non-root path starting with '/'"
            )
        return path

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
