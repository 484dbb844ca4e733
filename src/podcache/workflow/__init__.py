"""Form workflows for adding and editing feeds."""

from podcache.workflow.base import FormWorkflow
from podcache.workflow.edit_feed import EditFeedWorkflow
from podcache.workflow.new_feed import NewFeedWorkflow

__all__ = [
    "FormWorkflow",
    "NewFeedWorkflow",
    "EditFeedWorkflow",
]
