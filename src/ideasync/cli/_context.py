# pyright: reportUnusedCallResult=false
"""CLI context for global state management.

The CLIContext is set once at CLI startup and made available to all
commands via contextvars.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    import httpx
    from structlog.typing import FilteringBoundLogger

    from ideasync.config import Config

# Context variable for CLIContext
_current_cli_context: contextvars.ContextVar[CLIContext | None] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Enable verbose output with additional details.
        logger: Structured logger for commands (writes to file only).
        console: Console for regular output.
        error_console: Console for error output.
        transport: HTTP transport override, used by tests.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    logger: FilteringBoundLogger | None = field(default=None, repr=False)
    console: Console = field(default_factory=Console, repr=False)
    error_console: Console = field(
        default_factory=lambda: Console(stderr=True), repr=False
    )
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> CLIContext:
        """Get current active CLIContext, or create a default if not set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx

        from ideasync.config import Config  # noqa: PLC0415

        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: CLIContext) -> None:
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context. Primarily useful in tests."""
        _current_cli_context.set(None)
