"""Shared feed list state.

:class:`FeedListState` owns the loaded feed collection, the current
selection and the form mode. The list view and both form workflows read
from the same instance, and every change goes through one of its methods:

- ``load`` fills the collection once at startup
- ``begin_add`` / ``begin_edit`` switch the open form
- ``commit_created`` / ``commit_updated`` apply server-confirmed changes

The collection is never replaced after loading, so Feed objects handed out
earlier stay valid.

Example:
    >>> from podcache.state import FeedListState, Mode
    >>> state = FeedListState(resource)
    >>> await state.load()
    True
    >>> state.begin_add()
    >>> state.mode
    <Mode.ADDING: 'adding'>
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any

from podcache.core.exceptions import NotFoundError, PodcacheError
from podcache.models.feed import MUTABLE_FIELDS, Feed
from podcache.resource import FeedResource

logger = logging.getLogger(__name__)

SelectionListener = Callable[[Feed | None], None]


class Mode(str, Enum):
    """Which form, if any, is open.

    Example:
        >>> from podcache.state import Mode
        >>> Mode.IDLE.value
        'idle'
    """

    IDLE = "idle"
    ADDING = "adding"
    EDITING = "editing"


class FeedListState:
    """Single source of truth for the feed list and the open form.

    Args:
        resource: Binding to the remote feed collection.
    """

    def __init__(self, resource: FeedResource) -> None:
        self._resource = resource
        self._feeds: list[Feed] = []
        self._selected: Feed | None = None
        self._mode = Mode.IDLE
        self._listeners: list[SelectionListener] = []
        self.load_error: PodcacheError | None = None

    # --- Read access ---

    @property
    def feeds(self) -> tuple[Feed, ...]:
        """Snapshot of the collection in display order."""
        return tuple(self._feeds)

    @property
    def selected(self) -> Feed | None:
        """Feed open in the edit form, if any."""
        return self._selected

    @property
    def mode(self) -> Mode:
        return self._mode

    def __len__(self) -> int:
        return len(self._feeds)

    def __iter__(self) -> Iterator[Feed]:
        return iter(tuple(self._feeds))

    def __contains__(self, feed: object) -> bool:
        return any(member is feed for member in self._feeds)

    def get(self, name: str) -> Feed | None:
        """Find a member by name."""
        for feed in self._feeds:
            if feed.name == name:
                return feed
        return None

    # --- Loading ---

    async def load(self) -> bool:
        """Fetch the collection from the server.

        On failure the collection keeps its previous contents and the error
        is kept in ``load_error`` for the list view. Nothing is retried.

        Returns:
            True if the collection was loaded.
        """
        try:
            feeds = await self._resource.list()
        except PodcacheError as e:
            logger.warning("Loading feeds failed: %s", e)
            self.load_error = e
            return False

        # Swap contents in place; the list object itself is kept.
        self._feeds[:] = feeds
        self.load_error = None
        logger.info("Loaded %d feeds", len(feeds))
        return True

    # --- Selection ---

    def on_selection_change(self, listener: SelectionListener) -> Callable[[], None]:
        """Register a listener called with the new selection.

        Listeners run synchronously inside ``begin_add`` and ``begin_edit``
        whenever the selected feed actually changes.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _select(self, feed: Feed | None, mode: Mode) -> None:
        changed = feed is not self._selected
        self._selected = feed
        self._mode = mode
        if changed:
            for listener in list(self._listeners):
                listener(feed)

    def begin_add(self) -> None:
        """Open the add form; clears any selection."""
        self._select(None, Mode.ADDING)

    def begin_edit(self, feed: Feed) -> None:
        """Open the edit form for ``feed``.

        Raises:
            NotFoundError: ``feed`` is not a member of the collection.
        """
        if feed not in self:
            raise NotFoundError(f"Feed '{feed.name}' is not in the loaded collection")
        self._select(feed, Mode.EDITING)

    # --- Commits ---

    def commit_created(self, feed: Feed) -> None:
        """Append a feed the server has just created."""
        self._feeds.append(feed)
        logger.debug("Appended feed '%s'", feed.name)

    def commit_updated(self, name: str, fields: dict[str, Any]) -> None:
        """Merge server-confirmed values into the member called ``name``.

        Only ``url``, ``content_type`` and ``marked_for_deletion`` are merged.
        A missing member is logged and ignored.
        """
        feed = self.get(name)
        if feed is None:
            logger.error("Inconsistent state: updated feed '%s' is not in the collection", name)
            return

        for key in MUTABLE_FIELDS:
            if key in fields:
                setattr(feed, key, fields[key])
        logger.debug("Merged update into feed '%s'", name)
