"""Unit tests for the idea domain models."""

import dataclasses

import pytest

from ideasync.idea import UNCATEGORIZED, UPDATABLE_FIELDS, Idea, IdeaInput


class TestIdea:
    def test_defaults(self) -> None:
        idea = Idea(id="a1", transcription="buy milk", created_at="2024-01-01")

        assert idea.category == UNCATEGORIZED
        assert idea.ai_processed is False
        assert idea.is_archived is False
        assert idea.tags == ()

    def test_is_frozen(self) -> None:
        idea = Idea(id="a1", transcription="buy milk", created_at="")

        with pytest.raises(dataclasses.FrozenInstanceError):
            idea.transcription = "changed"  # pyright: ignore[reportAttributeAccessIssue]

    def test_created_parses_iso_timestamp(self) -> None:
        idea = Idea(id="a1", transcription="", created_at="2024-05-01T10:30:00Z")

        created = idea.created

        assert created is not None
        assert (created.year, created.month, created.day) == (2024, 5, 1)
        assert created.hour == 10

    @pytest.mark.parametrize("created_at", ["", "not a date"])
    def test_created_is_none_when_unparseable(self, created_at: str) -> None:
        idea = Idea(id="a1", transcription="", created_at=created_at)

        assert idea.created is None


class TestIdeaInput:
    def test_duration_defaults_to_zero(self) -> None:
        assert IdeaInput("buy milk").duration == 0


class TestUpdatableFields:
    def test_excludes_immutable_derived_and_archive_fields(self) -> None:
        excluded = {
            "id",
            "created_at",
            "ai_processed",
            "ai_markdown",
            "ai_analysis",
            "is_archived",
        }

        assert not UPDATABLE_FIELDS & excluded
        assert "transcription" in UPDATABLE_FIELDS
        assert "category" in UPDATABLE_FIELDS
