# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the frozen Pydantic models for each configuration
section and the Config container that loads and merges them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Never, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ideasync.config._defaults import DEFAULT_CONFIG
from ideasync.config._discovery import resolve_config_path
from ideasync.config._loader import deep_merge, parse_env_vars, read_toml_file
from ideasync.exceptions import ConfigLoadError, ConfigValidationError

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(StrEnum):
    """Log level threshold values, most verbose first."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ApiConfig(BaseModel):
    """Remote API section.

    Attributes:
        base_url: Root URL of the entries API.
        timeout: Per-request timeout in seconds.
        page_size: Number of entries fetched per refresh.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    base_url: str = "http://localhost:8000"
    timeout: float = Field(default=30.0, gt=0)
    page_size: int = Field(default=10, ge=1)


class AuthConfig(BaseModel):
    """Authentication section.

    Attributes:
        token: Static bearer token. Empty means no token is available.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    token: str = Field(default="", repr=False)


class LoggingConfig(BaseModel):
    """Logging section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


def _raise_validation_error(error: ValidationError) -> Never:
    """Raise ConfigValidationError for the first Pydantic error."""
    details = error.errors()[0]
    key = ".".join(str(part) for part in details.get("loc", ()))
    msg = f"Invalid configuration value for '{key}'"
    raise ConfigValidationError(
        msg,
        key=key,
        value=details.get("input"),
        expected=str(details.get("msg", "valid value")),
    ) from error


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor so defaults are
    merged and errors are reported as ConfigError subclasses.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    api: ApiConfig = Field(default_factory=ApiConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If a value has the wrong type or range.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            _raise_validation_error(e)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create configuration from a single TOML file.

        Raises:
            ConfigLoadError: If the file is missing or cannot be parsed.
            ConfigValidationError: If a value is invalid.
        """
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigLoadError(msg, path=path)
        return cls.from_dict(read_toml_file(path))

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in increasing precedence: defaults, the config
        file (explicit path, $IDEASYNC_CONFIG, or the user config file), then
        IDEASYNC_* environment variables.

        Args:
            config_path: Explicit config file. Must exist if given.
            include_env: Include environment variables as a source.

        Raises:
            ConfigLoadError: If a named config file is missing or unparseable.
            ConfigValidationError: If the merged config is invalid.
        """
        merged: dict[str, Any] = {}

        path = resolve_config_path(config_path)
        if path is not None:
            if not path.is_file():
                msg = f"Config file not found: {path}"
                raise ConfigLoadError(msg, path=path)
            merged = deep_merge(merged, read_toml_file(path))

        if include_env:
            merged = deep_merge(merged, parse_env_vars())

        return cls.from_dict(merged)
