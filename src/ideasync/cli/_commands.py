# pyright: reportUnusedFunction=false
# ruff: noqa: D415, FBT002
"""Idea management commands.

Each command opens the stores against the configured API, performs one
store operation, and renders the result. Store failures are reported on
stderr with a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - cyclopts resolves it at runtime
from typing import TYPE_CHECKING, Annotated, Never

import anyio
from cyclopts import App, Parameter
from rich.markup import escape

from ideasync.cli._context import CLIContext
from ideasync.cli._shared import (
    ExitCode,
    exit_with_error,
    idea_panel,
    ideas_table,
    open_stores,
)
from ideasync.idea import IdeaInput, IdeaUpdate

if TYPE_CHECKING:
    from ideasync.store import BaseIdeaStore

__all__ = ["register_commands"]


def _fail(ctx: CLIContext, store: BaseIdeaStore) -> Never:
    exit_with_error(store.error or "Operation failed", console=ctx.error_console)


def _list() -> None:
    """List active ideas, most recent first"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.active.refresh():
                _fail(ctx, stores.active)
            ideas = stores.active.ideas

        if not ideas:
            ctx.console.print("[dim]No ideas found.[/dim]")
            return
        ctx.console.print(ideas_table(ideas, title="Ideas"))

    anyio.run(run)


def _archived() -> None:
    """List archived ideas"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.archived.refresh():
                _fail(ctx, stores.archived)
            ideas = stores.archived.ideas

        if not ideas:
            ctx.console.print("[dim]No archived ideas.[/dim]")
            return
        ctx.console.print(ideas_table(ideas, title="Archived ideas"))

    anyio.run(run)


def _show(idea_id: str, /) -> None:
    """Show the full details of one idea"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            idea = await stores.active.get_details(idea_id)
            if idea is None:
                _fail(ctx, stores.active)
        ctx.console.print(idea_panel(idea))

    anyio.run(run)


def _search(query: str, /) -> None:
    """Search active ideas by text or title"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.active.refresh():
                _fail(ctx, stores.active)
            matches = stores.active.search(query)

        if not matches:
            ctx.console.print("[dim]No ideas match the query.[/dim]")
            return
        title = f"Ideas matching {escape(repr(query))}"
        ctx.console.print(ideas_table(matches, title=title))

    anyio.run(run)


def _create(
    text: str,
    /,
    duration: Annotated[
        float,
        Parameter(name=["--duration", "-d"], help="Recording length in seconds"),
    ] = 0,
) -> None:
    """Capture a new idea from text"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            idea = await stores.active.create(IdeaInput(text, duration))
            if idea is None:
                _fail(ctx, stores.active)
        ctx.console.print(f"[green]Created idea:[/green] {escape(idea.id)}")

    anyio.run(run)


def _upload(
    path: Path,
    /,
    duration: Annotated[
        float,
        Parameter(name=["--duration", "-d"], help="Recording length in seconds"),
    ] = 0,
) -> None:
    """Capture a new idea from an audio recording"""
    ctx = CLIContext.get_current()

    try:
        audio = path.read_bytes()
    except OSError as e:
        exit_with_error(
            f"Cannot read {path}: {e.strerror or e}",
            ExitCode.IO_ERROR,
            console=ctx.error_console,
        )

    async def run() -> None:
        async with open_stores(ctx) as stores:
            idea = await stores.active.create_with_audio(audio, duration)
            if idea is None:
                _fail(ctx, stores.active)
        ctx.console.print(f"[green]Created idea:[/green] {escape(idea.id)}")

    anyio.run(run)


def _update(
    idea_id: str,
    /,
    transcription: Annotated[
        str | None, Parameter(name=["--transcription"], help="New text")
    ] = None,
    category: Annotated[
        str | None, Parameter(name=["--category", "-c"], help="New category")
    ] = None,
    title: Annotated[str | None, Parameter(name=["--title"], help="New title")] = None,
) -> None:
    """Edit an idea"""
    ctx = CLIContext.get_current()

    updates: IdeaUpdate = {}
    if transcription is not None:
        updates["transcription"] = transcription
    if category is not None:
        updates["category"] = category
    if title is not None:
        updates["title"] = title

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.active.update(idea_id, updates):
                _fail(ctx, stores.active)
        ctx.console.print(f"[green]Updated idea:[/green] {escape(idea_id)}")

    anyio.run(run)


def _delete(
    idea_id: str,
    /,
    archived: Annotated[
        bool, Parameter(name=["--archived"], help="Delete from the archive")
    ] = False,
) -> None:
    """Delete an idea permanently"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            store = stores.archived if archived else stores.active
            if not await store.delete(idea_id):
                _fail(ctx, store)
        ctx.console.print(f"[green]Deleted idea:[/green] {escape(idea_id)}")

    anyio.run(run)


def _archive(idea_id: str, /) -> None:
    """Move an idea to the archive"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.active.archive(idea_id):
                _fail(ctx, stores.active)
        ctx.console.print(f"[green]Archived idea:[/green] {escape(idea_id)}")

    anyio.run(run)


def _unarchive(idea_id: str, /) -> None:
    """Restore an idea from the archive"""
    ctx = CLIContext.get_current()

    async def run() -> None:
        async with open_stores(ctx) as stores:
            if not await stores.archived.unarchive(idea_id):
                _fail(ctx, stores.archived)
        ctx.console.print(f"[green]Restored idea:[/green] {escape(idea_id)}")

    anyio.run(run)


def register_commands(app: App) -> None:
    """Register every idea command on the given app."""
    app.command(_list, name="list")
    app.command(_archived, name="archived")
    app.command(_show, name="show")
    app.command(_search, name="search")
    app.command(_create, name="create")
    app.command(_upload, name="upload")
    app.command(_update, name="update")
    app.command(_delete, name="delete")
    app.command(_archive, name="archive")
    app.command(_unarchive, name="unarchive")
