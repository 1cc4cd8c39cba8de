"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Render cache defaults (expiration, device partitioning,
block template root) are read-only from the render cache's perspective.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from viewcache.core.constants import CACHE_KEY_SEP, DEFAULT_CACHE_KEY_PREFIX

_PACKAGE_DIR = Path(__file__).resolve().parent.parent

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_cache_settings rejects values that
    would produce ambiguous cache keys or invalid template roots.
    """

    # App
    app_name: str = "viewcache"
    app_version: str = "1.0.0"
    debug: bool = False
    # Overrides the debug-derived level when set (e.g. "WARNING")
    log_level: LogLevel | None = None

    # Templates
    templates_dir: str = str(_PACKAGE_DIR / "templates")
    template_extension: str = ".html"
    block_templates_path: str = "blocks"

    # Render cache
    cache_expiration_time: int = Field(default=3600, ge=0)
    cache_use_device: bool = False
    # Sort tags before key derivation so {a, b} and {b, a} share one entry
    cache_sort_tags: bool = False
    cache_key_prefix: str = DEFAULT_CACHE_KEY_PREFIX

    # Redis Cache
    redis_enabled: bool = False
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept LOG_LEVEL case-insensitively; empty means unset."""
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @model_validator(mode="after")
    def validate_cache_settings(self) -> "Settings":
        """Validate cache key prefix and block template root.

        - CACHE_KEY_PREFIX must be non-empty and free of the key separator.
        - BLOCK_TEMPLATES_PATH must be non-empty.
        """
        if not self.cache_key_prefix or CACHE_KEY_SEP in self.cache_key_prefix:
            raise ValueError(
                f"CACHE_KEY_PREFIX must be non-empty and must not contain {CACHE_KEY_SEP!r}, "
                f"got: {self.cache_key_prefix!r}"
            )
        self.block_templates_path = self.block_templates_path.rstrip("/")
        if not self.block_templates_path:
            raise ValueError("BLOCK_TEMPLATES_PATH must not be empty.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
