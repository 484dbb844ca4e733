#!/usr/bin/env python3
"""
podcache Quickstart Example

Shows the basic flow: load the feed list, add a feed, then edit it.

Usage:
    PODCACHE_BASE_URL=http://localhost:8080/ python examples/01_quickstart.py
"""

import asyncio

from podcache import EditFeedWorkflow, FeedListState, FeedResource, HttpClient, NewFeedWorkflow
from podcache.core.config import get_settings


async def main() -> None:
    """Add a feed and mark it for deletion again."""
    settings = get_settings()

    async with HttpClient(settings.base_url, timeout=settings.request_timeout) as client:
        resource = FeedResource(client)
        state = FeedListState(resource)

        if not await state.load():
            print(f"✗ Could not load feeds: {state.load_error}")
            return
        print(f"✓ Loaded {len(state)} feeds")

        # Add
        state.begin_add()
        new_form = NewFeedWorkflow(resource, state)
        new_form.name = "hacker-news"
        new_form.url = "https://news.ycombinator.com/rss"
        feed = await new_form.submit()
        if feed is None:
            print(f"✗ Add failed: {new_form.error_message}")
            return
        print(f"✓ Added {feed.name} ({feed.content_type})")

        # Edit
        edit_form = EditFeedWorkflow(resource, state)
        state.begin_edit(feed)
        edit_form.draft.marked_for_deletion = True
        if await edit_form.update():
            print(f"✓ {feed.name} marked for deletion: {feed.marked_for_deletion}")
        else:
            print(f"✗ Update failed: {edit_form.error_message}")


if __name__ == "__main__":
    asyncio.run(main())
