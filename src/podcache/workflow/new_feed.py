"""Add-feed form workflow.

Captures a name and URL, asks the server to create the feed and appends
the stored record to the shared list once the server has confirmed it.
Nothing is shown before confirmation, so a rejected feed never appears.

Example:
    >>> from podcache.workflow import NewFeedWorkflow
    >>> form = NewFeedWorkflow(resource, state)
    >>> form.name, form.url = "news", "http://example.com/rss"
    >>> feed = await form.submit()
    >>> form.success, form.name
    (True, '')
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from podcache.core.exceptions import PodcacheError
from podcache.models.feed import Feed, FeedDraft
from podcache.resource import FeedResource
from podcache.state.list_state import FeedListState
from podcache.workflow.base import FormWorkflow, describe_input_error

logger = logging.getLogger(__name__)


class NewFeedWorkflow(FormWorkflow):
    """Lifecycle of the add-feed form.

    Attributes:
        name: Name typed by the operator.
        url: Source URL typed by the operator.
        status: Outcome of the last submission.
    """

    def __init__(self, resource: FeedResource, state: FeedListState) -> None:
        super().__init__(resource, state)
        self.name = ""
        self.url = ""

    async def submit(self) -> Feed | None:
        """Create a feed from the current input.

        Does nothing while a previous submission is still pending. On
        failure the input is left as typed so it can be corrected.

        Returns:
            The stored feed, or None if nothing was created.
        """
        if self.status.in_flight:
            logger.debug("Ignoring submit of '%s': request already pending", self.name)
            return None

        self.status.begin()
        try:
            draft = FeedDraft(name=self.name, url=self.url)
        except PydanticValidationError as e:
            self.status.fail(describe_input_error(e))
            return None

        try:
            feed = await self._resource.create(draft)
        except PodcacheError as e:
            self._report(e)
            return None

        self._state.commit_created(feed)
        self.name = ""
        self.url = ""
        self.status.succeed()
        return feed
