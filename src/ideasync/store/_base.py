"""Shared state container for idea collections.

Both the active and the archived stores hold an in-memory copy of a remote
collection and expose async operations that talk to the IdeaService. This
module provides the state record and the machinery they share: token
acquisition, single-flight refresh, and reducing failures to an error
message at the operation boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

import structlog

from ideasync.exceptions import IdeaSyncError, NoTokenError
from ideasync.gateway._service import DEFAULT_PAGE_SIZE
from ideasync.idea._mapper import normalize_list

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ideasync.auth import TokenProvider
    from ideasync.gateway import IdeaService, RawEntry
    from ideasync.idea import Idea

__all__ = ["BaseIdeaStore", "StoreState"]

_UNKNOWN_ERROR: Final = "Unknown error"


@dataclass(frozen=True, slots=True)
class StoreState:
    """Snapshot of a store.

    Loading, error and collection are independent flags rather than
    exclusive states: a failed refresh keeps the previous collection
    alongside the error.

    Attributes:
        ideas: The cached collection, in display order.
        loading: Whether a refresh is in flight.
        error: Message from the most recent failed operation.
    """

    ideas: tuple[Idea, ...] = field(default_factory=tuple)
    loading: bool = True
    error: str | None = None


def error_message(error: BaseException) -> str:
    """Reduce an error to a message fit for display."""
    return str(error) or _UNKNOWN_ERROR


class BaseIdeaStore(ABC):
    """Base class for stores that cache a remote idea collection.

    Subclasses decide which slice of the collection they fetch. All state
    changes go through `_set_state` so callers only ever observe complete
    snapshots.

    Attributes:
        _service: Gateway used for every remote call.
        _token_provider: Source of a bearer token, awaited per operation.
        _page_size: Number of entries fetched by refresh().
        _logger: Structured logger.
        _state: Current snapshot.
        _fetching: In-flight latch for refresh().
    """

    __slots__: Final = (
        "_fetching",
        "_logger",
        "_page_size",
        "_service",
        "_state",
        "_token_provider",
    )

    _service: IdeaService
    _token_provider: TokenProvider
    _page_size: int
    _logger: FilteringBoundLogger
    _state: StoreState
    _fetching: bool

    def __init__(
        self,
        service: IdeaService,
        token_provider: TokenProvider,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize the store in the loading state with no ideas.

        Args:
            service: Gateway for the entries API.
            token_provider: Async callable returning a bearer token.
            page_size: Number of entries fetched by refresh().
            logger: Structured logger. Defaults to structlog's.
        """
        self._service = service
        self._token_provider = token_provider
        self._page_size = page_size
        self._logger = logger if logger is not None else structlog.get_logger()
        self._state = StoreState()
        self._fetching = False

    # -------------------------------------------------------------------------
    # State Access
    # -------------------------------------------------------------------------

    @property
    def state(self) -> StoreState:
        """Current snapshot."""
        return self._state

    @property
    def ideas(self) -> tuple[Idea, ...]:
        """Cached collection, in display order."""
        return self._state.ideas

    @property
    def loading(self) -> bool:
        """Whether a refresh is in flight."""
        return self._state.loading

    @property
    def error(self) -> str | None:
        """Message from the most recent failed operation."""
        return self._state.error

    def _set_state(self, **changes: object) -> None:
        self._state = replace(self._state, **changes)  # pyright: ignore[reportArgumentType]

    def _update_ideas(
        self,
        transform: Callable[[tuple[Idea, ...]], tuple[Idea, ...]],
    ) -> None:
        """Apply a transform to the current collection and clear the error."""
        self._set_state(ideas=transform(self._state.ideas), error=None)

    def _remove(self, idea_id: str) -> None:
        self._update_ideas(
            lambda ideas: tuple(idea for idea in ideas if idea.id != idea_id)
        )

    def _fail(self, operation: str, error: IdeaSyncError) -> None:
        """Record a failed operation in the shared error slot."""
        message = error_message(error)
        self._logger.warning(
            "idea_store_operation_failed",
            store=type(self).__name__,
            operation=operation,
            error_type=type(error).__name__,
            error=message,
        )
        self._set_state(error=message)

    # -------------------------------------------------------------------------
    # Remote Access
    # -------------------------------------------------------------------------

    async def _token(self) -> str:
        """Fetch a fresh token for one operation.

        Raises:
            NoTokenError: If the provider returns nothing or fails.
        """
        try:
            token = await self._token_provider()
        except Exception as e:
            msg = f"Token provider failed: {e}"
            raise NoTokenError(msg) from e
        if not token:
            msg = "No token available"
            raise NoTokenError(msg)
        return token

    @abstractmethod
    async def _fetch(self, token: str) -> list[RawEntry]:
        """Fetch the raw entries this store mirrors."""

    async def refresh(self) -> bool:
        """Replace the collection with the server's current view.

        At most one refresh runs at a time. A call made while another is
        pending returns immediately without touching the network; it is not
        queued.

        Returns:
            True if this call fetched and applied a fresh collection. False
            if it was dropped or failed; on failure the previous collection
            is kept and the error is set.
        """
        if self._fetching:
            self._logger.debug("idea_store_refresh_skipped", store=type(self).__name__)
            return False

        self._fetching = True
        self._set_state(loading=True, error=None)
        try:
            token = await self._token()
            entries = await self._fetch(token)
        except IdeaSyncError as e:
            self._fail("refresh", e)
            self._set_state(loading=False)
            return False
        finally:
            self._fetching = False

        self._state = StoreState(
            ideas=tuple(normalize_list(entries)),
            loading=False,
            error=None,
        )
        self._logger.debug(
            "idea_store_refreshed",
            store=type(self).__name__,
            count=len(self._state.ideas),
        )
        return True

    async def _delete(self, idea_id: str) -> bool:
        try:
            token = await self._token()
            await self._service.delete(idea_id, token)
        except IdeaSyncError as e:
            self._fail("delete", e)
            return False

        self._remove(idea_id)
        return True

    async def _set_archived(self, idea_id: str, is_archived: bool) -> bool:  # noqa: FBT001
        operation = "archive" if is_archived else "unarchive"
        try:
            token = await self._token()
            _ = await self._service.set_archived(idea_id, is_archived, token)
        except IdeaSyncError as e:
            self._fail(operation, e)
            return False

        # Leaving this view; the sibling store picks it up on its own refresh
        self._remove(idea_id)
        return True
