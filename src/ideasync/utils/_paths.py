from pathlib import Path

import platformdirs


def get_log_dir() -> Path:
    """Get the platform-specific directory for ideasync log files."""
    return platformdirs.user_log_path("ideasync")


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file inside the log directory."""
    return get_log_dir() / "cli.log"
