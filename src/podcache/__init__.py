"""
podcache - client for a podcache feed registry.

podcache keeps a local view of the server's feed collection in step with the
REST API while an operator adds and edits feeds.

Key Features:
- Typed binding to the ``feed`` REST collection
- One shared list state with selection and form mode
- Add and edit workflows that only touch the list after the server confirms
- Server validation messages surfaced verbatim

Quick Start:
    >>> from podcache import FeedListState, FeedResource, HttpClient, NewFeedWorkflow
    >>> async with HttpClient("http://localhost:8080/") as client:
    ...     resource = FeedResource(client)
    ...     state = FeedListState(resource)
    ...     await state.load()
    ...     form = NewFeedWorkflow(resource, state)
    ...     form.name, form.url = "news", "http://example.com/rss"
    ...     await form.submit()
"""

__version__ = "0.1.0"

from podcache.core.config import Settings, get_settings
from podcache.core.exceptions import (
    ConfigurationError,
    NotFoundError,
    PodcacheError,
    TransportError,
    ValidationError,
)
from podcache.http import HttpClient
from podcache.models.feed import EditDraft, Feed, FeedDraft
from podcache.models.form import FormStatus
from podcache.resource import FeedResource
from podcache.state import FeedListState, Mode
from podcache.workflow import EditFeedWorkflow, NewFeedWorkflow

__all__ = [
    # Models
    "Feed",
    "FeedDraft",
    "EditDraft",
    "FormStatus",
    # Remote collection
    "HttpClient",
    "FeedResource",
    # State and workflows
    "FeedListState",
    "Mode",
    "NewFeedWorkflow",
    "EditFeedWorkflow",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "PodcacheError",
    "ValidationError",
    "TransportError",
    "ConfigurationError",
    "NotFoundError",
    # Version
    "__version__",
]
