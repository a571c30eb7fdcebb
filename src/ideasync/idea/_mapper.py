# pyright: reportAny=false
"""Mapping from raw backend entries to domain Ideas.

The backend has renamed several fields over time and still sends whichever
names a given entry was stored with. Each extractor below resolves one domain
field from its candidate sources in a fixed priority order, taking the first
non-empty value. All functions are pure and never fail.
"""

import json
from collections.abc import Iterable

from ideasync.gateway._models import RawEntry
from ideasync.idea._models import UNCATEGORIZED, Idea

__all__ = [
    "extract_ai_analysis",
    "extract_ai_markdown",
    "extract_category",
    "extract_title",
    "extract_transcription",
    "is_ai_processed",
    "normalize",
    "normalize_list",
]


def extract_transcription(entry: RawEntry) -> str:
    """Resolve the transcription, falling back to legacy and preview fields."""
    return entry.transcription or entry.raw_transcription or entry.preview or ""


def extract_title(entry: RawEntry) -> str | None:
    """Resolve the AI-derived title, if processing produced one."""
    if entry.processed_content is None:
        return None
    return entry.processed_content.titulo or None


def extract_category(entry: RawEntry) -> str:
    """Resolve the category name.

    Explicit category wins over the processor's category, which wins over the
    processor's suggestion. Falls back to UNCATEGORIZED.
    """
    processed = entry.processed_content
    return (
        entry.category_name
        or (processed.categoria if processed is not None else None)
        or (processed.categoria_sugerida if processed is not None else None)
        or UNCATEGORIZED
    )


def extract_ai_markdown(entry: RawEntry) -> str | None:
    """Resolve the processed markdown from either of its field names."""
    return entry.markdown_content or entry.content_markdown or None


def is_ai_processed(entry: RawEntry) -> bool:
    """Whether the entry carries processed markdown."""
    return extract_ai_markdown(entry) is not None


def extract_ai_analysis(entry: RawEntry) -> str | None:
    """Serialize the processed content, or the generic content JSON.

    Returns:
        A JSON string, or None when the entry carries neither object.
    """
    if entry.processed_content is not None:
        return json.dumps(
            entry.processed_content.model_dump(exclude_unset=True),
            ensure_ascii=False,
        )
    if entry.content_json is not None:
        return json.dumps(entry.content_json, ensure_ascii=False)
    return None


def normalize(entry: RawEntry) -> Idea:
    """Convert a raw backend entry into a domain Idea.

    Args:
        entry: The raw entry as received from the backend.

    Returns:
        The normalized Idea. `tags` and `ai_suggestions` are always empty and
        `audio_url` is always None; the backend does not provide them yet.
    """
    return Idea(
        id=entry.id,
        transcription=extract_transcription(entry),
        created_at=entry.created_at or "",
        category=extract_category(entry),
        ai_processed=is_ai_processed(entry),
        title=extract_title(entry),
        audio_url=None,
        audio_duration=entry.duration,
        ai_markdown=extract_ai_markdown(entry),
        ai_analysis=extract_ai_analysis(entry),
        ai_suggestions=(),
        tags=(),
        is_archived=bool(entry.is_archived),
    )


def normalize_list(entries: Iterable[RawEntry]) -> list[Idea]:
    """Normalize entries, preserving the order the server returned them in."""
    return [normalize(entry) for entry in entries]
