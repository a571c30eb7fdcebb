"""Shared CLI utilities.

This module provides what every command needs: standard exit codes, error
exits, opening the stores against the configured API, and rendering ideas.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Never

import pendulum
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ideasync.auth import token_provider_from_config
from ideasync.gateway import IdeaService
from ideasync.store import ArchivedIdeaStore, IdeaStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterable

    from rich.console import Console

    from ideasync.cli._context import CLIContext
    from ideasync.idea import Idea

__all__ = [
    "ExitCode",
    "Stores",
    "exit_with_error",
    "idea_panel",
    "ideas_table",
    "open_stores",
]

_PREVIEW_LENGTH = 60


class ExitCode(IntEnum):
    """Standard exit codes for ideasync CLI commands."""

    SUCCESS = 0
    OPERATION_FAILED = 1
    CONFIG_ERROR = 2
    IO_ERROR = 4


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.OPERATION_FAILED,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        from rich.console import Console  # noqa: PLC0415

        console = Console(stderr=True)

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)


@dataclass(frozen=True, slots=True)
class Stores:
    """Active and archived stores sharing one service."""

    active: IdeaStore
    archived: ArchivedIdeaStore


@asynccontextmanager
async def open_stores(ctx: CLIContext) -> AsyncIterator[Stores]:
    """Open a service against the configured API and wrap it in stores.

    The HTTP client is closed when the block exits.
    """
    async with IdeaService.from_config(
        ctx.config, logger=ctx.logger, transport=ctx.transport
    ) as service:
        provider = token_provider_from_config(ctx.config)
        page_size = ctx.config.api.page_size
        yield Stores(
            active=IdeaStore(
                service, provider, page_size=page_size, logger=ctx.logger
            ),
            archived=ArchivedIdeaStore(
                service, provider, page_size=page_size, logger=ctx.logger
            ),
        )


def _preview(idea: Idea) -> str:
    text = idea.title or idea.transcription
    text = " ".join(text.split())
    if len(text) > _PREVIEW_LENGTH:
        return text[: _PREVIEW_LENGTH - 3] + "..."
    return text


def _created_display(idea: Idea) -> str:
    created = idea.created
    if created is None:
        return idea.created_at or "-"
    return pendulum.instance(created).format("YYYY-MM-DD HH:mm")


def ideas_table(ideas: Iterable[Idea], *, title: str | None = None) -> Table:
    """Build a table listing ideas, one row each."""
    table = Table(title=title)
    table.add_column("ID", no_wrap=True)
    table.add_column("Idea")
    table.add_column("Category")
    table.add_column("AI", justify="center")
    table.add_column("Created", no_wrap=True)

    for idea in ideas:
        table.add_row(
            escape(idea.id),  # Full ID, never truncated
            escape(_preview(idea)),
            escape(idea.category),
            "✓" if idea.ai_processed else "",
            _created_display(idea),
        )
    return table


def idea_panel(idea: Idea) -> Panel:
    """Build a panel with the full details of one idea."""
    lines = [
        f"[bold]ID:[/bold] {escape(idea.id)}",
        f"[bold]Category:[/bold] {escape(idea.category)}",
        f"[bold]Created:[/bold] {_created_display(idea)}",
    ]
    if idea.audio_duration is not None:
        lines.append(f"[bold]Duration:[/bold] {idea.audio_duration:g}s")
    if idea.is_archived:
        lines.append("[bold]Archived:[/bold] yes")
    lines.extend(["", escape(idea.transcription)])
    if idea.ai_markdown:
        lines.extend(["", "[bold]AI notes[/bold]", escape(idea.ai_markdown)])

    title = escape(idea.title) if idea.title else "Idea"
    return Panel("\n".join(lines), title=title, expand=False)
