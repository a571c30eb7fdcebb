"""Store for the archived idea collection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ideasync.store._base import BaseIdeaStore

if TYPE_CHECKING:
    from ideasync.gateway import RawEntry

__all__ = ["ArchivedIdeaStore"]


class ArchivedIdeaStore(BaseIdeaStore):
    """Archived ideas.

    Mirrors IdeaStore's refresh behavior for the archived slice and only
    supports deleting and unarchiving. Unarchived ideas are dropped here but
    not pushed into any active store.
    """

    __slots__: Final = ()

    async def _fetch(self, token: str) -> list[RawEntry]:
        return await self._service.list_archived(token, limit=self._page_size)

    async def delete(self, idea_id: str) -> bool:
        """Delete an archived idea and drop it from the collection.

        Returns:
            True on success.
        """
        return await self._delete(idea_id)

    async def unarchive(self, idea_id: str) -> bool:
        """Clear the archive flag and drop the idea from this collection.

        Returns:
            True on success.
        """
        return await self._set_archived(idea_id, False)  # noqa: FBT003
