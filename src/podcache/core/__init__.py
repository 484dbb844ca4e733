"""Core settings and exceptions."""

from podcache.core.config import Settings, get_settings
from podcache.core.exceptions import (
    ConfigurationError,
    NotFoundError,
    PodcacheError,
    TransportError,
    ValidationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "PodcacheError",
    "ValidationError",
    "TransportError",
    "ConfigurationError",
    "NotFoundError",
]
