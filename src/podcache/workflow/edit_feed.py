"""Edit-feed form workflow.

Follows the list's selection: every time a different feed is selected its
editable fields are copied into a fresh :class:`EditDraft` and the form
status is reset. Submitting sends the draft to the server and, only after
the server accepts it, merges the values into the shared list entry.

Example:
    >>> from podcache.workflow import EditFeedWorkflow
    >>> form = EditFeedWorkflow(resource, state)
    >>> state.begin_edit(state.get("news"))
    >>> form.draft.url = "http://example.com/new.rss"
    >>> await form.update()
    True
    >>> state.get("news").url
    'http://example.com/new.rss'
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from podcache.core.exceptions import PodcacheError
from podcache.models.feed import EditDraft, Feed
from podcache.resource import FeedResource
from podcache.state.list_state import FeedListState
from podcache.workflow.base import FormWorkflow, describe_input_error

logger = logging.getLogger(__name__)


class EditFeedWorkflow(FormWorkflow):
    """Lifecycle of the edit-feed form.

    Attributes:
        draft: Editable copy of the selected feed, or None when nothing
            is selected.
        status: Outcome of the last submission for the current selection.
    """

    def __init__(self, resource: FeedResource, state: FeedListState) -> None:
        super().__init__(resource, state)
        self.draft: EditDraft | None = None
        self._target: Feed | None = None
        # Bumped on every selection change; stale completions check it.
        self._generation = 0
        self._unsubscribe = state.on_selection_change(self._on_selection)
        self._on_selection(state.selected)

    @property
    def target(self) -> Feed | None:
        """Feed the form edits."""
        return self._target

    @property
    def active(self) -> bool:
        return self._target is not None

    def _on_selection(self, feed: Feed | None) -> None:
        self._generation += 1
        self._target = feed
        self.draft = EditDraft.from_feed(feed) if feed is not None else None
        self.status.reset()

    def close(self) -> None:
        """Stop following the list's selection."""
        self._unsubscribe()

    async def update(self) -> bool:
        """Send the draft to the server.

        Does nothing without a selection or while a previous update is
        pending. Invalid draft values are reported as a form error without
        a request. On failure the draft is kept for another attempt and the
        list entry is left untouched.

        Returns:
            True if the server accepted the change.
        """
        target, draft = self._target, self.draft
        if target is None or draft is None:
            logger.debug("Ignoring update: no feed selected")
            return False
        if self.status.in_flight:
            logger.debug("Ignoring update of '%s': request already pending", target.name)
            return False

        generation = self._generation
        self.status.begin()
        try:
            checked = draft.validated()
        except PydanticValidationError as e:
            self.status.fail(describe_input_error(e))
            return False
        fields = checked.fields()
        patch = checked.apply_to(target)

        try:
            await self._resource.update(target.name, patch)
        except PodcacheError as e:
            if generation == self._generation:
                self._report(e)
            return False

        # Commit even if the operator moved on; the server has the change.
        self._state.commit_updated(target.name, fields)
        if generation == self._generation:
            self.status.succeed()
        return True
