"""Async JSON HTTP client for the podcache REST API.

Wraps an ``httpx.AsyncClient`` and turns every failure into one of the two
podcache error kinds:

- :class:`~podcache.core.exceptions.ValidationError` for non-2xx responses
  whose JSON body carries a ``message``, whatever the status
- :class:`~podcache.core.exceptions.TransportError` for everything else
  (connection errors, timeouts, bodies without a message, unreadable bodies)

Requests are never retried.

Example:
    >>> from podcache.http import HttpClient
    >>>
    >>> async with HttpClient("http://localhost:8080/") as client:
    ...     feeds = await client.get_json("feed")
    ...     await client.put_json("feed/news", {"name": "news", "url": "http://x"})
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from podcache import __version__
from podcache.core.exceptions import ConfigurationError, TransportError, ValidationError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str | None:
    """Pull the ``message`` field out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class HttpClient:
    """Async HTTP client speaking JSON to a single server.

    Example:
        >>> client = HttpClient("http://localhost:8080", timeout=5.0)
        >>> client.base_url
        'http://localhost:8080/'
        >>> client.headers["Accept"]
        'application/json'

    Attributes:
        base_url: Root URL that relative paths resolve against
        user_agent: User-Agent header value
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str = f"podcache/{__version__}",
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Root URL of the server
            user_agent: User-Agent header
            timeout: Request timeout
            headers: Additional default headers
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``)

        Raises:
            ConfigurationError: If base_url is empty
        """
        if not base_url:
            raise ConfigurationError("HttpClient requires a base URL")

        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._user_agent = user_agent
        self._timeout = timeout
        self._extra_headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Root URL, always ending in a slash."""
        return self._base_url

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
            **self._extra_headers,
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request and map failures.

        Args:
            method: HTTP method
            path: Path relative to base_url
            **kwargs: Additional arguments for httpx

        Returns:
            A 2xx response

        Raises:
            ValidationError: Non-2xx with a message in the body
            TransportError: Any other failure
        """
        client = self._ensure_client()
        logger.debug("%s %s", method, path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"timeout: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if response.is_success:
            return response

        status = response.status_code
        message = _error_message(response)
        logger.debug("%s %s -> HTTP %d (%s)", method, path, status, message)
        # The server reports rejected input as 400 or 500 with a message body.
        if message is not None:
            raise ValidationError(message, status_code=status)
        raise TransportError(f"HTTP {status}", status_code=status)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON in response: {e}", status_code=response.status_code
            ) from e

    async def get_json(self, path: str, **kwargs: Any) -> Any:
        """GET ``path`` and return the parsed JSON body."""
        response = await self._request("GET", path, **kwargs)
        return self._decode(response)

    async def post_json(self, path: str, body: Any, **kwargs: Any) -> Any:
        """POST a JSON body and return the parsed JSON response."""
        response = await self._request("POST", path, json=body, **kwargs)
        return self._decode(response)

    async def put_json(self, path: str, body: Any, **kwargs: Any) -> httpx.Response:
        """PUT a JSON body.

        The response body is returned untouched; callers only rely on the
        status having been 2xx.
        """
        return await self._request("PUT", path, json=body, **kwargs)


@asynccontextmanager
async def http_client(base_url: str, **kwargs: Any) -> AsyncIterator[HttpClient]:
    """Context manager for HTTP client.

    Example:
        >>> async with http_client("http://localhost:8080/") as client:
        ...     feeds = await client.get_json("feed")
    """
    client = HttpClient(base_url, **kwargs)
    async with client:
        yield client
