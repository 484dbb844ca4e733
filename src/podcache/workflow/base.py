"""Shared plumbing for the add and edit form workflows."""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from podcache.core.exceptions import PodcacheError, ValidationError
from podcache.models.form import GENERIC_FAILURE, FormStatus
from podcache.resource import FeedResource
from podcache.state.list_state import FeedListState

logger = logging.getLogger(__name__)


def describe_input_error(error: PydanticValidationError) -> str:
    """Turn a pydantic error into one line an operator can act on."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "input"
    return f"{field}: {first['msg']}"


class FormWorkflow:
    """Base for a form that submits to the server and reports back.

    Subclasses set ``status.in_flight`` before their first ``await`` so a
    second submission issued meanwhile is dropped.
    """

    def __init__(self, resource: FeedResource, state: FeedListState) -> None:
        self._resource = resource
        self._state = state
        self.status = FormStatus()

    @property
    def in_flight(self) -> bool:
        return self.status.in_flight

    @property
    def success(self) -> bool:
        return self.status.success

    @property
    def error_message(self) -> str:
        return self.status.error_message

    def _report(self, error: PodcacheError) -> None:
        # Server text is shown as is; anything else gets the generic prefix.
        if isinstance(error, ValidationError):
            self.status.fail(error.message)
        else:
            self.status.fail(f"{GENERIC_FAILURE}: {error.message}")
        logger.info("%s failed: %s", type(self).__name__, self.status.error_message)
