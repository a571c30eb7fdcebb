"""Store for the active idea collection."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Final

from ideasync.exceptions import IdeaSyncError
from ideasync.idea._mapper import normalize
from ideasync.idea._search import search_ideas
from ideasync.idea._validator import validate_create_input, validate_update
from ideasync.store._base import BaseIdeaStore

if TYPE_CHECKING:
    from ideasync.gateway import RawEntry
    from ideasync.idea import Idea, IdeaInput, IdeaUpdate

__all__ = ["IdeaStore"]


class IdeaStore(BaseIdeaStore):
    """Active ideas, most recent first.

    Mutations are applied to the local collection once the server confirms
    them, without re-fetching. Every operation reports success to its caller
    through its return value and records failures in `error`; none of them
    raise.

    Concurrent operations are not serialized against each other or against
    refresh(). A refresh that completes after a create can briefly show the
    new idea twice, or miss it, until the next refresh.
    """

    __slots__: Final = ()

    async def _fetch(self, token: str) -> list[RawEntry]:
        return await self._service.list(token, limit=self._page_size)

    def _prepend(self, idea: Idea) -> None:
        self._update_ideas(lambda ideas: (idea, *ideas))

    async def create(self, idea_input: IdeaInput) -> Idea | None:
        """Create an idea from text and put it at the head of the collection.

        Input is validated before anything is sent.

        Args:
            idea_input: Transcription and duration.

        Returns:
            The new idea, or None on failure.
        """
        try:
            validate_create_input(idea_input.transcription, idea_input.duration)
            self._set_state(error=None)
            token = await self._token()
            entry = await self._service.create_by_text(
                idea_input.transcription, idea_input.duration, token
            )
        except IdeaSyncError as e:
            self._fail("create", e)
            return None

        idea = normalize(entry)
        self._prepend(idea)
        return idea

    async def create_with_audio(self, audio: bytes, duration: float) -> Idea | None:
        """Create an idea from a recording and put it at the head of the collection.

        Unlike create(), nothing is validated locally; the server is the only
        judge of the recording.

        Args:
            audio: Raw recording bytes.
            duration: Recording length in seconds.

        Returns:
            The new idea, or None on failure.
        """
        try:
            self._set_state(error=None)
            token = await self._token()
            entry = await self._service.create_by_audio(audio, duration, token)
        except IdeaSyncError as e:
            self._fail("create_with_audio", e)
            return None

        idea = normalize(entry)
        self._logger.debug("idea_created_from_audio", idea_id=idea.id)
        self._prepend(idea)
        return idea

    async def update(self, idea_id: str, updates: IdeaUpdate) -> bool:
        """Apply a partial update.

        On success the given fields are merged into the local record; fields
        not mentioned are kept. Whatever entry the server echoes back is
        ignored.

        Args:
            idea_id: The idea to update.
            updates: Fields to change.

        Returns:
            True on success. On failure the collection is unchanged.
        """
        try:
            validate_update(updates)
            token = await self._token()
            _ = await self._service.update(idea_id, updates, token)
        except IdeaSyncError as e:
            self._fail("update", e)
            return False

        changes = dict(updates)
        for key in ("tags", "ai_suggestions"):
            if key in changes:
                changes[key] = tuple(changes[key])  # pyright: ignore[reportArgumentType]

        self._update_ideas(
            lambda ideas: tuple(
                replace(idea, **changes) if idea.id == idea_id else idea  # pyright: ignore[reportArgumentType]
                for idea in ideas
            )
        )
        return True

    async def delete(self, idea_id: str) -> bool:
        """Delete an idea and drop it from the collection.

        Deleting an id that is not cached still calls the server and leaves
        the collection as it was.

        Returns:
            True on success.
        """
        return await self._delete(idea_id)

    async def archive(self, idea_id: str, is_archived: bool = True) -> bool:  # noqa: FBT001, FBT002
        """Set the archive flag and drop the idea from the active collection.

        The idea is not added to any archived cache; the archived store
        fetches its own view.

        Returns:
            True on success.
        """
        return await self._set_archived(idea_id, is_archived)

    async def get_details(self, idea_id: str) -> Idea | None:
        """Fetch one idea straight from the server.

        The result is not cached and the collection is not touched.

        Returns:
            The idea, or None on failure.
        """
        try:
            token = await self._token()
            entry = await self._service.get_by_id(idea_id, token)
        except IdeaSyncError as e:
            self._fail("get_details", e)
            return None
        return normalize(entry)

    def search(self, query: str) -> list[Idea]:
        """Filter the cached collection by transcription or title."""
        return search_ideas(self._state.ideas, query)
