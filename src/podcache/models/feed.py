"""Feed models.

A :class:`Feed` is one named subscription as the server stores it. The two
draft models hold what an operator types into the add and edit forms.

Example:
    >>> from podcache.models.feed import Feed, EditDraft
    >>> feed = Feed.model_validate(
    ...     {"name": "news", "url": "http://x/rss", "contentType": "rss", "markedForDeletion": False}
    ... )
    >>> draft = EditDraft.from_feed(feed)
    >>> draft.url = "http://y/rss"
    >>> feed.url
    'http://x/rss'
    >>> draft.apply_to(feed).url
    'http://y/rss'
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from podcache.models.base import PodcacheModel

# Fields an operator may change after creation.
MUTABLE_FIELDS: tuple[str, ...] = ("url", "content_type", "marked_for_deletion")


class Feed(PodcacheModel):
    """A single named feed.

    ``name`` is the resource key on the server and cannot be reassigned.

    Example:
        >>> from podcache.models.feed import Feed
        >>> feed = Feed(name="news", url="http://x/rss", content_type="rss")
        >>> feed.marked_for_deletion
        False
        >>> feed.to_wire()["contentType"]
        'rss'
    """

    # Keep server values as sent; name is the join key.
    model_config = ConfigDict(str_strip_whitespace=False)

    name: str = Field(..., min_length=1, frozen=True, description="Unique feed name")
    url: str = Field(..., min_length=1, description="Source location of the feed")
    content_type: str = Field(
        default="application/xml",
        alias="contentType",
        description="Content type of the feed's file",
    )
    marked_for_deletion: bool = Field(
        default=False,
        alias="markedForDeletion",
        description="Scheduled for removal by the server",
    )

    # Maintained by the server; never edited here.
    last_modified: datetime | None = Field(default=None, alias="lastModified")
    all_files_updated: bool = Field(default=False, alias="allFilesUpdated")

    def mutable_fields(self) -> dict[str, Any]:
        """Return a copy of the operator-editable fields."""
        return {key: getattr(self, key) for key in MUTABLE_FIELDS}

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the server's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)

    def __str__(self) -> str:
        return self.name


class FeedDraft(PodcacheModel):
    """Body of a create request.

    Example:
        >>> from podcache.models.feed import FeedDraft
        >>> FeedDraft(name=" news ", url="http://x/rss").name
        'news'
    """

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class EditDraft(PodcacheModel):
    """Editable copy of a feed's mutable fields.

    Changing a draft never touches the feed it was taken from. Assignments
    are not validated; call :meth:`validated` before sending.
    """

    model_config = ConfigDict(validate_assignment=False)

    url: str = Field(..., min_length=1)
    content_type: str = Field(..., alias="contentType")
    marked_for_deletion: bool = Field(default=False, alias="markedForDeletion")

    @classmethod
    def from_feed(cls, feed: Feed) -> EditDraft:
        """Snapshot the mutable fields of ``feed``."""
        return cls(**feed.mutable_fields())

    def fields(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in MUTABLE_FIELDS}

    def validated(self) -> EditDraft:
        """Return a checked copy of this draft.

        Raises:
            pydantic.ValidationError: A field holds an invalid value.
        """
        return type(self).model_validate(self.fields())

    def apply_to(self, feed: Feed) -> Feed:
        """Return a new feed with this draft's values; ``feed`` is unchanged."""
        return feed.model_copy(update=self.fields())
