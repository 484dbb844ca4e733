"""podcache data models."""

from podcache.models.base import PodcacheModel
from podcache.models.feed import MUTABLE_FIELDS, EditDraft, Feed, FeedDraft
from podcache.models.form import GENERIC_FAILURE, FormStatus

__all__ = [
    "PodcacheModel",
    "Feed",
    "FeedDraft",
    "EditDraft",
    "MUTABLE_FIELDS",
    "FormStatus",
    "GENERIC_FAILURE",
]
