"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from podcache.core.config import Settings, get_settings
from podcache.http import HttpClient
from podcache.resource import FeedResource
from podcache.state import FeedListState
from podcache.workflow import EditFeedWorkflow, NewFeedWorkflow

app = typer.Typer(
    name="podcache",
    help="Manage the feeds of a podcache server",
    no_args_is_help=True,
)
console = Console()

T = TypeVar("T")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run(ctx: typer.Context, action: Callable[[FeedResource, FeedListState], Awaitable[T]]) -> T:
    """Connect, load the feed list and run ``action`` against it."""
    settings: Settings = ctx.obj

    async def session() -> T:
        async with HttpClient(
            settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        ) as client:
            resource = FeedResource(client, content_path=settings.content_path)
            state = FeedListState(resource)
            if not await state.load():
                console.print(f"[red]Could not load feeds:[/red] {state.load_error}")
                raise typer.Exit(code=1)
            return await action(resource, state)

    return asyncio.run(session())


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Server URL (default: $PODCACHE_BASE_URL)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """podcache feed registry client."""
    overrides: dict[str, str] = {}
    if base_url:
        overrides["base_url"] = base_url
    if log_level:
        overrides["log_level"] = log_level
    settings = get_settings(**overrides)
    _setup_logging(settings.log_level)
    ctx.obj = settings


@app.command("list")
def list_feeds(ctx: typer.Context) -> None:
    """List all feeds."""

    async def show(resource: FeedResource, state: FeedListState) -> None:
        table = Table(title=f"Feeds ({len(state)})")
        table.add_column("Name", style="bold")
        table.add_column("URL")
        table.add_column("Content type")
        table.add_column("Delete")
        table.add_column("Subscribe at", style="cyan")
        for feed in state:
            table.add_row(
                feed.name,
                feed.url,
                feed.content_type,
                "yes" if feed.marked_for_deletion else "",
                resource.content_url(feed.name),
            )
        console.print(table)

    _run(ctx, show)


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Unique feed name"),
    url: str = typer.Argument(..., help="Source URL of the feed"),
) -> None:
    """Add a feed."""

    async def submit(resource: FeedResource, state: FeedListState) -> bool:
        state.begin_add()
        form = NewFeedWorkflow(resource, state)
        form.name, form.url = name, url
        feed = await form.submit()
        if feed is None:
            console.print(f"[red]Adding '{name}' failed:[/red] {form.error_message}")
            return False
        console.print(f"[green]Added[/green] {feed.name} ({feed.content_type})")
        return True

    if not _run(ctx, submit):
        raise typer.Exit(code=1)


@app.command()
def edit(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the feed to change"),
    url: Optional[str] = typer.Option(None, "--url", help="New source URL"),
    content_type: Optional[str] = typer.Option(None, "--content-type", help="New content type"),
    delete: Optional[bool] = typer.Option(None, "--delete/--keep", help="Mark or unmark for deletion"),
) -> None:
    """Change a feed's URL, content type or deletion flag."""

    async def update(resource: FeedResource, state: FeedListState) -> bool:
        feed = state.get(name)
        if feed is None:
            console.print(f"[red]No feed named '{name}'[/red]")
            return False

        form = EditFeedWorkflow(resource, state)
        state.begin_edit(feed)
        if url is not None:
            form.draft.url = url
        if content_type is not None:
            form.draft.content_type = content_type
        if delete is not None:
            form.draft.marked_for_deletion = delete

        if not await form.update():
            console.print(f"[red]Updating '{name}' failed:[/red] {form.error_message}")
            return False
        console.print(f"[green]Updated[/green] {feed.name}: {feed.url} ({feed.content_type})")
        return True

    if not _run(ctx, update):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version."""
    from podcache import __version__

    console.print(f"podcache {__version__}")


if __name__ == "__main__":
    app()
