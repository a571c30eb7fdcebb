"""Domain models for ideas.

This module provides the canonical Idea record the rest of the client works
with, along with the input and partial-update shapes accepted by the stores.
Raw server payloads live in `ideasync.gateway` and are turned into Ideas by
the mapper.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final, TypedDict

import pendulum

__all__ = [
    "UNCATEGORIZED",
    "UPDATABLE_FIELDS",
    "Idea",
    "IdeaInput",
    "IdeaUpdate",
]

# Category assigned when the server supplies none
UNCATEGORIZED: Final = "uncategorized"


@dataclass(frozen=True, slots=True)
class Idea:
    """Canonical idea record.

    Attributes:
        id: Server-assigned identifier, stable and immutable.
        transcription: The user's raw or dictated content.
        created_at: Server timestamp, kept verbatim.
        category: Category name, never empty.
        ai_processed: Whether processed markdown is available.
        title: AI-derived title, absent until processing completes.
        audio_url: Reserved, never populated from the server.
        audio_duration: Length of the source recording in seconds.
        ai_markdown: Processed markdown content.
        ai_analysis: Serialized processed content.
        ai_suggestions: Reserved, always empty.
        tags: Reserved, always empty.
        is_archived: Whether the idea lives in the archive.
    """

    id: str
    transcription: str
    created_at: str
    category: str = UNCATEGORIZED
    ai_processed: bool = False
    title: str | None = None
    audio_url: str | None = None
    audio_duration: float | None = None
    ai_markdown: str | None = None
    ai_analysis: str | None = None
    ai_suggestions: tuple[str, ...] = field(default_factory=tuple)
    tags: tuple[str, ...] = field(default_factory=tuple)
    is_archived: bool = False

    @property
    def created(self) -> datetime | None:
        """Parsed creation timestamp, or None if the server value is unparseable."""
        if not self.created_at:
            return None
        try:
            parsed = pendulum.parse(self.created_at)
        except ValueError:
            # pendulum's ParserError subclasses ValueError
            return None
        return parsed if isinstance(parsed, datetime) else None


@dataclass(frozen=True, slots=True)
class IdeaInput:
    """Text-based creation input."""

    transcription: str
    duration: float = 0


class IdeaUpdate(TypedDict, total=False):
    """Partial update over the user-editable Idea fields.

    Derived fields (ai_processed, ai_markdown, ai_analysis) follow the server
    and the archive flag only changes through an explicit archive operation.
    """

    transcription: str
    category: str
    title: str | None
    audio_url: str | None
    audio_duration: float | None
    ai_suggestions: tuple[str, ...]
    tags: tuple[str, ...]


UPDATABLE_FIELDS: Final = frozenset(IdeaUpdate.__annotations__)
