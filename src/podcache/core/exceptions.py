"""Custom exceptions.

podcache uses a small hierarchy of exceptions so callers can tell a rejected
request apart from a failed one:

Example:
    >>> from podcache.core.exceptions import PodcacheError, TransportError, ValidationError
    >>> isinstance(ValidationError("name already exists"), PodcacheError)
    True
    >>> try:
    ...     raise TransportError("connection refused")
    ... except PodcacheError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: TransportError
"""

from __future__ import annotations


class PodcacheError(Exception):
    """Base exception for podcache.

    Example:
        >>> from podcache.core.exceptions import PodcacheError
        >>> e = PodcacheError("something went wrong")
        >>> str(e)
        'something went wrong'
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(PodcacheError):
    """The server rejected the request.

    The message comes from the response body and is meant to be shown
    to the operator verbatim.

    Example:
        >>> from podcache.core.exceptions import ValidationError
        >>> e = ValidationError("name already exists", status_code=409)
        >>> e.message, e.status_code
        ('name already exists', 409)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TransportError(PodcacheError):
    """Network failure, server error, or an unusable response.

    Example:
        >>> from podcache.core.exceptions import TransportError
        >>> TransportError("HTTP 503", status_code=503).status_code
        503
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(PodcacheError):
    """Configuration is invalid.

    Example:
        >>> from podcache.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("missing base url")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: missing base url
    """


class NotFoundError(PodcacheError):
    """Requested feed is not part of the loaded collection.

    Example:
        >>> from podcache.core.exceptions import NotFoundError
        >>> raise NotFoundError("feed 'news'")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        NotFoundError: feed 'news'
    """
