"""Config file discovery."""

import os
from pathlib import Path
from typing import Final

import platformdirs

CONFIG_PATH_ENV: Final = "IDEASYNC_CONFIG"


def get_user_config_path() -> Path:
    r"""Get the platform-specific user config file path.

    - Linux: ``~/.config/ideasync/config.toml``
    - macOS: ``~/Library/Application Support/ideasync/config.toml``
    - Windows: ``%APPDATA%\ideasync\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path("ideasync") / "config.toml"


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file to load.

    Precedence is the explicit path, then $IDEASYNC_CONFIG, then the user
    config file if it exists.

    Args:
        explicit: Path given on the command line, if any.

    Returns:
        The path to load, or None when no file applies. Explicit and
        environment paths are returned even if missing so the caller can
        report them.
    """
    if explicit is not None:
        return explicit

    from_env = os.environ.get(CONFIG_PATH_ENV)
    if from_env:
        return Path(from_env)

    user_path = get_user_config_path()
    return user_path if user_path.is_file() else None
