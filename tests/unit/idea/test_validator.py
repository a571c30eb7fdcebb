"""Unit tests for idea input validation."""

import pytest

from ideasync.exceptions import IdeaSyncError, IdeaValidationError
from ideasync.idea import validate_create_input, validate_update


class TestValidateCreateInput:
    def test_accepts_valid_input(self) -> None:
        validate_create_input("buy milk", 0)
        validate_create_input("buy milk", 12.5)

    @pytest.mark.parametrize("transcription", ["", "   ", "\n\t"])
    def test_rejects_blank_transcription(self, transcription: str) -> None:
        with pytest.raises(IdeaValidationError, match="cannot be empty") as exc_info:
            validate_create_input(transcription, 0)

        assert exc_info.value.field == "transcription"

    def test_rejects_non_string_transcription(self) -> None:
        with pytest.raises(IdeaValidationError):
            validate_create_input(None, 0)

    @pytest.mark.parametrize("duration", [-1, -0.5, float("nan"), float("inf")])
    def test_rejects_out_of_range_duration(self, duration: float) -> None:
        with pytest.raises(IdeaValidationError, match="finite non-negative") as exc_info:
            validate_create_input("buy milk", duration)

        assert exc_info.value.field == "duration"

    @pytest.mark.parametrize("duration", ["3", None, True])
    def test_rejects_non_numeric_duration(self, duration: object) -> None:
        with pytest.raises(IdeaValidationError, match="must be a number"):
            validate_create_input("buy milk", duration)

    def test_error_is_catchable_as_base_and_value_error(self) -> None:
        with pytest.raises(IdeaSyncError):
            validate_create_input("", 0)
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_create_input("", 0)


class TestValidateUpdate:
    def test_accepts_editable_fields(self) -> None:
        validate_update({"transcription": "new text", "category": "work"})
        validate_update({"title": None})

    def test_rejects_empty_update(self) -> None:
        with pytest.raises(IdeaValidationError, match="at least one field"):
            validate_update({})

    @pytest.mark.parametrize("key", ["id", "created_at"])
    def test_rejects_immutable_fields(self, key: str) -> None:
        with pytest.raises(IdeaValidationError, match="cannot be updated") as exc_info:
            validate_update({key: "x"})

        assert exc_info.value.field == key

    @pytest.mark.parametrize("key", ["ai_processed", "ai_markdown", "ai_analysis"])
    def test_rejects_derived_fields(self, key: str) -> None:
        with pytest.raises(IdeaValidationError, match="derived from server"):
            validate_update({key: "x"})

    def test_rejects_archive_flag(self) -> None:
        with pytest.raises(IdeaValidationError, match=r"archive\(\)"):
            validate_update({"is_archived": True})

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(IdeaValidationError, match="Unknown idea field: color"):
            validate_update({"color": "red"})

    def test_rejects_blank_transcription(self) -> None:
        with pytest.raises(IdeaValidationError, match="cannot be empty"):
            validate_update({"transcription": "  "})
