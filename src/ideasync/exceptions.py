"""ideasync exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class IdeaSyncError(Exception):
    """Base exception for ideasync errors."""


# =============================================================================
# Validation Exceptions
# =============================================================================


class IdeaValidationError(IdeaSyncError, ValueError):
    """Raised when user-supplied idea input is rejected locally.

    Attributes:
        field: The input field that failed validation (if applicable).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        """Initialize with error message and field context.

        Args:
            message: Human-readable error message.
            field: The input field that failed validation.
        """
        super().__init__(message)
        self.field: str | None = field


# =============================================================================
# Gateway Exceptions
# =============================================================================


class GatewayError(IdeaSyncError):
    """Base exception for remote idea service failures."""


class NoTokenError(GatewayError):
    """Raised when no bearer token is available for a request."""


class IdeaNotFoundError(GatewayError, KeyError):
    """Raised when the server reports a missing entry.

    Attributes:
        entry_id: The ID of the entry that was not found.
    """

    def __init__(self, message: str, *, entry_id: str | None = None) -> None:
        """Initialize with error message and entry context.

        Args:
            message: Human-readable error message.
            entry_id: The ID of the entry that was not found.
        """
        super().__init__(message)
        self.entry_id: str | None = entry_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class NoEntryReturnedError(GatewayError):
    """Raised when a successful response is missing the expected entry."""


class NoEntryIdError(GatewayError):
    """Raised when an archive toggle response lacks its confirmation."""


class NetworkOrServerError(GatewayError):
    """Raised on transport failure or a non-success HTTP response.

    Attributes:
        status_code: HTTP status code, or None for transport failures.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialize with error message and status context."""
        super().__init__(message)
        self.status_code: int | None = status_code


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(IdeaSyncError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
