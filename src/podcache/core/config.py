"""podcache configuration.

Application settings loaded from environment variables with PODCACHE_ prefix.

Example:
    >>> from podcache.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.base_url
    'http://localhost:8080/'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from podcache import __version__


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with PODCACHE_ prefix.

    Example:
        >>> from podcache.core.config import Settings
        >>> s = Settings(base_url="http://feeds.local:9000")
        >>> s.base_url
        'http://feeds.local:9000/'
        >>> s.request_timeout
        30.0
    """

    model_config = SettingsConfigDict(
        env_prefix="PODCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    base_url: str = Field(
        default="http://localhost:8080/",
        min_length=1,
        description="Root URL of the podcache server",
    )
    content_path: str = Field(default="content", description="Path under which feed content is served")

    # HTTP
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default=f"podcache/{__version__}", description="User-Agent header")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        # Relative paths ("feed") must resolve below the base, not beside it.
        return value if value.endswith("/") else value + "/"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from podcache.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)
