"""ideasync configuration.

This module provides the public API for configuration management: loading,
merging and typed access to configuration values.

Example:
    >>> from ideasync.config import Config
    >>> config = Config.load()
    >>> config.api.page_size
    10
"""

from ideasync.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import DEFAULT_CONFIG
from ._discovery import CONFIG_PATH_ENV, get_user_config_path, resolve_config_path
from ._loader import (
    ENV_PREFIX,
    copy_value,
    deep_merge,
    parse_env_value,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from ._models import ApiConfig, AuthConfig, Config, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "ApiConfig",
    "AuthConfig",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "copy_value",
    "deep_merge",
    "get_user_config_path",
    "parse_env_value",
    "parse_env_vars",
    "read_toml_file",
    "resolve_config_path",
    "set_nested_key",
]
