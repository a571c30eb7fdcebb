"""The command-line interface for ideasync."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ideasync.config import Config
from ideasync.exceptions import ConfigError
from ideasync.utils import create_logger, get_cli_log_file

from ._commands import register_commands
from ._context import CLIContext
from ._shared import ExitCode, exit_with_error

if TYPE_CHECKING:
    import httpx

_HELP = "Capture, browse and organize ideas stored on a remote API."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
    transport: "httpx.AsyncBaseTransport | None" = None,  # noqa: UP037
) -> App:
    """Build the CLI application.

    Args:
        console: Console for regular output.
        error_console: Console for error output.
        exit_on_error: Exit the process on argument parsing errors.
        transport: HTTP transport handed to every command's client.

    Returns:
        A cyclopts App with global options and every command registered.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="ideasync",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch the ideasync CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Log at debug level.
            config: Explicit path to config file.
        """
        try:
            loaded_config = Config.load(config_path=config)
        except ConfigError as e:
            exit_with_error(str(e), ExitCode.CONFIG_ERROR, console=error_console)

        logging_config = loaded_config.logging
        cli_logger = create_logger(
            level="debug" if verbose else logging_config.level.value,
            log_format=logging_config.format.value,
            log_file=logging_config.file or str(get_cli_log_file()),
        )

        CLIContext.set_current(
            CLIContext(
                config=loaded_config,
                verbose=verbose,
                logger=cli_logger,
                console=console,
                error_console=error_console,
                transport=transport,
            )
        )
        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `ideasync` CLI."""
    app = create_app()
    app.meta()
