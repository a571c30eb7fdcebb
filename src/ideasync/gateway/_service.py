# pyright: reportAny=false, reportExplicitAny=false
"""Remote idea service.

This module provides the IdeaService class, which owns every call the client
makes against the entries API: request shaping (JSON or multipart), bearer
authentication, and response unwrapping. Failures of any kind surface as a
GatewayError subclass; nothing is retried.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, Self

import httpx
import structlog
from pydantic import ValidationError

from ideasync.exceptions import (
    IdeaNotFoundError,
    NetworkOrServerError,
    NoEntryIdError,
    NoEntryReturnedError,
    NoTokenError,
)
from ideasync.gateway._models import ApiResponse, ArchiveResult, RawEntry

if TYPE_CHECKING:
    from types import TracebackType

    from structlog.typing import FilteringBoundLogger

    from ideasync.config import Config
    from ideasync.idea import IdeaInput

__all__ = ["DEFAULT_AUDIO_FILENAME", "DEFAULT_PAGE_SIZE", "IdeaService"]

DEFAULT_PAGE_SIZE: Final = 10
DEFAULT_AUDIO_FILENAME: Final = "recording.webm"

_ENTRIES_PATH: Final = "/entries"
_HTTP_NOT_FOUND: Final = 404
_ERROR_MESSAGE_KEYS: Final = ("detail", "message", "error")


def _error_message(response: httpx.Response) -> str:
    """Build a readable message for a non-success response.

    Prefers the server's own explanation when the body carries one.
    """
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in _ERROR_MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Request failed with status {response.status_code}"


class IdeaService:
    """Client for the entries API.

    Each method maps to one remote capability and takes the bearer token as
    an argument; the service never stores or refreshes credentials.

    Attributes:
        _client: HTTP client bound to the API base URL.
        _owns_client: Whether close() should close the client.
        _logger: Structured logger for request tracing.
    """

    __slots__: Final = ("_client", "_logger", "_owns_client")

    _client: httpx.AsyncClient
    _owns_client: bool
    _logger: FilteringBoundLogger

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        logger: FilteringBoundLogger | None = None,
        owns_client: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            client: HTTP client with the API base URL configured.
            logger: Logger for request tracing. Defaults to structlog's.
            owns_client: Close the client when the service is closed.
        """
        self._client = client
        self._owns_client = owns_client
        self._logger = logger if logger is not None else structlog.get_logger()

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        logger: FilteringBoundLogger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Self:
        """Create a service with its own HTTP client.

        Args:
            config: Loaded configuration providing base URL and timeout.
            logger: Logger for request tracing.
            transport: Optional transport override, mainly for tests.

        Returns:
            A service that closes its client on close().
        """
        client = httpx.AsyncClient(
            base_url=config.api.base_url,
            timeout=config.api.timeout,
            transport=transport,
        )
        return cls(client, logger=logger, owns_client=True)

    async def close(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Internal Methods - Transport
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        token: str | None,
        **kwargs: Any,
    ) -> ApiResponse:
        """Send an authenticated request and parse the response envelope.

        Args:
            method: HTTP method.
            path: Path relative to the API base URL.
            token: Bearer token. Must be non-empty.
            **kwargs: Passed through to httpx (params, json, data, files).

        Returns:
            The parsed response envelope. Empty bodies parse as an empty
            envelope.

        Raises:
            NoTokenError: If no token was supplied. Nothing is sent.
            IdeaNotFoundError: If the server answers 404.
            NetworkOrServerError: On transport failure, any other non-success
                status, or a body that is not a valid envelope.
        """
        if not token:
            msg = "No token available"
            raise NoTokenError(msg)

        log = self._logger.bind(method=method, path=path)
        log.debug("api_call", params=kwargs.get("params"))

        try:
            response = await self._client.request(
                method,
                path,
                headers={"Authorization": f"Bearer {token}"},
                **kwargs,
            )
        except httpx.HTTPError as e:
            log.warning("api_call_failed", error=str(e))
            msg = f"Network error: {e}"
            raise NetworkOrServerError(msg) from e

        if response.status_code == _HTTP_NOT_FOUND:
            log.warning("api_call_not_found")
            raise IdeaNotFoundError(_error_message(response))

        if not response.is_success:
            log.warning("api_call_rejected", status_code=response.status_code)
            raise NetworkOrServerError(
                _error_message(response), status_code=response.status_code
            )

        if not response.content:
            return ApiResponse()

        try:
            payload = response.json()
        except ValueError as e:
            msg = "Invalid JSON in server response"
            raise NetworkOrServerError(msg, status_code=response.status_code) from e

        if not isinstance(payload, Mapping):
            # Some deployments answer DELETE with a bare value
            return ApiResponse()

        try:
            return ApiResponse.model_validate(payload)
        except ValidationError as e:
            log.warning("api_response_malformed", error=str(e))
            msg = "Malformed server response"
            raise NetworkOrServerError(msg, status_code=response.status_code) from e

    @staticmethod
    def _created_entry(data: ApiResponse) -> RawEntry:
        """Unwrap a creation response, which may use either envelope key."""
        entry = data.data if data.data is not None else data.entry
        if entry is None:
            msg = "No entry returned from API"
            raise NoEntryReturnedError(msg)
        return entry

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    async def list(
        self,
        token: str | None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[RawEntry]:
        """Fetch a page of entries.

        Args:
            token: Bearer token.
            limit: Page size.
            offset: Number of entries to skip.

        Returns:
            The raw entries, empty on an empty page.
        """
        data = await self._request(
            "GET",
            _ENTRIES_PATH,
            token,
            params={"limit": limit, "offset": offset},
        )
        return list(data.entries or [])

    async def list_archived(
        self,
        token: str | None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[RawEntry]:
        """Fetch a page of archived entries.

        The endpoint includes archived entries alongside active ones, so the
        result is filtered here.

        Args:
            token: Bearer token.
            limit: Page size.
            offset: Number of entries to skip.

        Returns:
            Only the entries flagged as archived.
        """
        data = await self._request(
            "GET",
            _ENTRIES_PATH,
            token,
            params={"include_archived": "true", "limit": limit, "offset": offset},
        )
        return [entry for entry in data.entries or [] if entry.is_archived]

    async def get_by_id(self, entry_id: str, token: str | None) -> RawEntry:
        """Fetch one entry.

        Raises:
            IdeaNotFoundError: If the response carries no entry.
        """
        data = await self._request("GET", f"{_ENTRIES_PATH}/{entry_id}", token)
        if data.entry is None:
            msg = "Entry not found"
            raise IdeaNotFoundError(msg, entry_id=entry_id)
        return data.entry

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    async def create_by_text(
        self,
        transcription: str,
        duration: float,
        token: str | None,
    ) -> RawEntry:
        """Create an entry from text.

        Raises:
            NoEntryReturnedError: If the response carries no entry.
        """
        data = await self._request(
            "POST",
            _ENTRIES_PATH,
            token,
            json={"transcription": transcription, "duration": duration},
        )
        return self._created_entry(data)

    async def create(self, idea_input: IdeaInput, token: str | None) -> RawEntry:
        """Create an entry from an IdeaInput. Same as create_by_text."""
        return await self.create_by_text(
            idea_input.transcription, idea_input.duration, token
        )

    async def create_by_audio(
        self,
        audio: bytes,
        duration: float,
        token: str | None,
        *,
        filename: str = DEFAULT_AUDIO_FILENAME,
        content_type: str = "audio/webm",
    ) -> RawEntry:
        """Create an entry from a recording, sent as multipart form data.

        Args:
            audio: Raw recording bytes.
            duration: Recording length in seconds.
            token: Bearer token.
            filename: File name reported for the upload.
            content_type: MIME type reported for the upload.

        Raises:
            NoEntryReturnedError: If the response carries no entry.
        """
        data = await self._request(
            "POST",
            _ENTRIES_PATH,
            token,
            data={"duration": str(duration)},
            files={"audio_file": (filename, audio, content_type)},
        )
        return self._created_entry(data)

    async def update(
        self,
        entry_id: str,
        updates: Mapping[str, Any],
        token: str | None,
    ) -> RawEntry:
        """Apply a partial update.

        Raises:
            NoEntryReturnedError: If the server omits the updated entry.
        """
        data = await self._request(
            "PATCH",
            f"{_ENTRIES_PATH}/{entry_id}",
            token,
            json=dict(updates),
        )
        if data.entry is None:
            msg = "No entry returned from API"
            raise NoEntryReturnedError(msg)
        return data.entry

    async def delete(self, entry_id: str, token: str | None) -> None:
        """Delete an entry."""
        _ = await self._request("DELETE", f"{_ENTRIES_PATH}/{entry_id}", token)

    async def set_archived(
        self,
        entry_id: str,
        is_archived: bool,  # noqa: FBT001
        token: str | None,
    ) -> ArchiveResult:
        """Archive or unarchive an entry.

        Returns:
            The confirmed entry id and the flag that was applied. The server
            does not echo the entry.

        Raises:
            NoEntryIdError: If the response lacks a success flag or an id.
        """
        data = await self._request(
            "PATCH",
            f"{_ENTRIES_PATH}/{entry_id}/archive",
            token,
            json={"is_archived": is_archived},
        )
        if not data.success or not data.entry_id:
            msg = "No entry_id returned from API"
            raise NoEntryIdError(msg)
        return ArchiveResult(entry_id=data.entry_id, is_archived=is_archived)
