"""Pre-flight validation for idea input.

Checks here run before any network call so that obviously bad input never
reaches the backend.
"""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Final

from ideasync.exceptions import IdeaValidationError
from ideasync.idea._models import UPDATABLE_FIELDS

__all__ = ["validate_create_input", "validate_update"]

_IMMUTABLE_FIELDS: Final = frozenset({"id", "created_at"})
_DERIVED_FIELDS: Final = frozenset({"ai_processed", "ai_markdown", "ai_analysis"})
_ARCHIVE_FIELD: Final = "is_archived"


def _validate_transcription(transcription: object) -> None:
    if not isinstance(transcription, str) or not transcription.strip():
        msg = "Transcription cannot be empty"
        raise IdeaValidationError(msg, field="transcription")


def validate_create_input(transcription: object, duration: object) -> None:
    """Validate text-based creation input.

    Args:
        transcription: The idea text.
        duration: Recording duration in seconds.

    Raises:
        IdeaValidationError: If the transcription is empty or whitespace-only,
            or the duration is not a finite non-negative number.
    """
    _validate_transcription(transcription)

    # bool is a Real subclass but never a meaningful duration
    if isinstance(duration, bool) or not isinstance(duration, Real):
        msg = "Duration must be a number"
        raise IdeaValidationError(msg, field="duration")
    if not math.isfinite(duration) or duration < 0:
        msg = "Duration must be a finite non-negative number"
        raise IdeaValidationError(msg, field="duration")


def validate_update(updates: Mapping[str, object]) -> None:
    """Validate a partial update before it is sent.

    Args:
        updates: Field name to new value.

    Raises:
        IdeaValidationError: If the update is empty, names a field that is
            immutable, derived, unknown or the archive flag, or blanks the
            transcription.
    """
    if not updates:
        msg = "Update must change at least one field"
        raise IdeaValidationError(msg)

    for key in updates:
        if key in _IMMUTABLE_FIELDS:
            msg = f"Field cannot be updated: {key}"
        elif key in _DERIVED_FIELDS:
            msg = f"Field is derived from server processing: {key}"
        elif key == _ARCHIVE_FIELD:
            msg = "Archive state changes through archive(), not update()"
        elif key not in UPDATABLE_FIELDS:
            msg = f"Unknown idea field: {key}"
        else:
            continue
        raise IdeaValidationError(msg, field=key)

    if "transcription" in updates:
        _validate_transcription(updates["transcription"])
