"""Shared list and selection state."""

from podcache.state.list_state import FeedListState, Mode, SelectionListener

__all__ = [
    "FeedListState",
    "Mode",
    "SelectionListener",
]
