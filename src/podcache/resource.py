"""Typed binding to the remote feed collection.

The server exposes feeds as a REST collection under ``feed``:

- ``GET feed`` lists all feeds
- ``POST feed`` creates one from ``{name, url}``
- ``PUT feed/<name>`` replaces the mutable fields of one feed

:class:`FeedResource` performs those three calls and nothing else; it never
touches UI state.

Example:
    >>> from podcache.http import HttpClient
    >>> from podcache.models.feed import FeedDraft
    >>> from podcache.resource import FeedResource
    >>>
    >>> async with HttpClient("http://localhost:8080/") as client:
    ...     resource = FeedResource(client)
    ...     feeds = await resource.list()
    ...     created = await resource.create(FeedDraft(name="news", url="http://x/rss"))
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from urllib.parse import quote, urljoin

from pydantic import ValidationError as PydanticValidationError

from podcache.core.exceptions import TransportError
from podcache.http.client import HttpClient
from podcache.models.feed import Feed, FeedDraft

logger = logging.getLogger(__name__)

COLLECTION_PATH = "feed"
CONTENT_PATH = "content"


class FeedResource:
    """Client for the ``feed`` collection.

    Args:
        client: HTTP client bound to the server's base URL.
        content_path: Path under which the server publishes cached feeds.

    Example:
        >>> from podcache.http import HttpClient
        >>> from podcache.resource import FeedResource
        >>> resource = FeedResource(HttpClient("http://localhost:8080/"))
        >>> resource.content_url("my news")
        'http://localhost:8080/content/my%20news'
    """

    def __init__(self, client: HttpClient, content_path: str = CONTENT_PATH) -> None:
        self._client = client
        self._content_path = content_path.strip("/")

    @staticmethod
    def _item_path(name: str) -> str:
        return f"{COLLECTION_PATH}/{quote(name, safe='')}"

    @staticmethod
    def _parse(data: object) -> Feed:
        try:
            return Feed.model_validate(data)
        except PydanticValidationError as e:
            raise TransportError(f"Malformed feed in response: {e}") from e

    async def list(self) -> list[Feed]:
        """Fetch every feed.

        Raises:
            TransportError: Network/HTTP failure or malformed body.
        """
        data = await self._client.get_json(COLLECTION_PATH)
        if not isinstance(data, Sequence) or isinstance(data, str):
            raise TransportError(f"Expected a list of feeds, got {type(data).__name__}")
        feeds = [self._parse(item) for item in data]
        logger.debug("Fetched %d feeds", len(feeds))
        return feeds

    async def create(self, draft: FeedDraft) -> Feed:
        """Create a feed and return the record the server stored.

        The returned feed may differ from the draft; the server fills in
        the content type and may normalize the other fields.

        Raises:
            ValidationError: The server rejected the input (duplicate name,
                malformed URL, ...).
            TransportError: Any other failure.
        """
        data = await self._client.post_json(COLLECTION_PATH, draft.to_wire())
        feed = self._parse(data)
        logger.info("Created feed '%s'", feed.name)
        return feed

    async def update(self, name: str, patch: Feed) -> None:
        """Replace the mutable fields of the feed called ``name``.

        Raises:
            ValidationError: The server rejected the new values.
            TransportError: Any other failure.
        """
        body = patch.to_wire()
        body["name"] = name
        await self._client.put_json(self._item_path(name), body)
        logger.info("Updated feed '%s'", name)

    def content_url(self, name: str) -> str:
        """Absolute URL where the server serves the cached copy of a feed."""
        return urljoin(self._client.base_url, f"{self._content_path}/{quote(name, safe='')}")
