# pyright: reportExplicitAny=false, reportAny=false
"""Wire models for the remote idea service.

These models mirror the payloads returned by the backend exactly as it sends
them, legacy field names included. Every field except the entry id is
optional; collapsing the aliases into one shape is the mapper's job.

Entry fields are lenient: a value of the wrong type is dropped to None
rather than rejected, so one irregular record never fails a whole page.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = [
    "ApiResponse",
    "ArchiveResult",
    "ProcessedContent",
    "RawEntry",
]

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _text_or_none(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _number_or_none(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _flag_or_none(value: object) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


class ProcessedContent(BaseModel):
    """AI-processed content attached to an entry.

    Only the keys the client reads are declared; anything else the processor
    emits is kept so it can be serialized back out untouched.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="allow")

    titulo: str | None = None
    categoria: str | None = None
    categoria_sugerida: str | None = None

    @field_validator("titulo", "categoria", "categoria_sugerida", mode="before")
    @classmethod
    def _lenient_text(cls, value: object) -> str | None:
        return _text_or_none(value)


class RawEntry(BaseModel):
    """Entry record as returned by the backend."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    id: str
    category_name: str | None = None
    created_at: str | None = None
    preview: str | None = None
    transcription: str | None = None
    raw_transcription: str | None = None
    # Free-form; serialized verbatim when no processed content exists
    content_json: Any = None
    content_markdown: str | None = None
    markdown_content: str | None = None
    processed_content: ProcessedContent | None = None
    user_id: str | None = None
    category_id: str | None = None
    duration: float | None = None
    # The backend emits 0/1 as often as false/true
    is_archived: bool | None = None

    @field_validator(
        "category_name",
        "created_at",
        "preview",
        "transcription",
        "raw_transcription",
        "content_markdown",
        "markdown_content",
        "user_id",
        "category_id",
        mode="before",
    )
    @classmethod
    def _lenient_text(cls, value: object) -> str | None:
        return _text_or_none(value)

    @field_validator("processed_content", mode="before")
    @classmethod
    def _object_or_none(cls, value: object) -> object:
        if isinstance(value, dict | ProcessedContent):
            return value
        return None

    @field_validator("duration", mode="before")
    @classmethod
    def _lenient_duration(cls, value: object) -> float | None:
        return _number_or_none(value)

    @field_validator("is_archived", mode="before")
    @classmethod
    def _lenient_flag(cls, value: object) -> bool | None:
        return _flag_or_none(value)


class ApiResponse(BaseModel):
    """Envelope shared by every entries endpoint."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    entries: list[RawEntry] | None = None
    entry: RawEntry | None = None
    data: RawEntry | None = None
    success: bool | None = None
    message: str | None = None
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    entry_id: str | None = None


@dataclass(frozen=True, slots=True)
class ArchiveResult:
    """Outcome of an archive toggle.

    Carries only what the server confirmed, not a fresh entry.
    """

    entry_id: str
    is_archived: bool
