# pyright: reportAny=false
"""Property tests for raw entry normalization."""

from typing import Any

from hypothesis import given, strategies as st

from ideasync.gateway import RawEntry
from ideasync.idea import UNCATEGORIZED, normalize, normalize_list, search_ideas

optional_text = st.none() | st.text(max_size=20)

processed_content = st.none() | st.fixed_dictionaries(
    {},
    optional={
        "titulo": optional_text,
        "categoria": optional_text,
        "categoria_sugerida": optional_text,
    },
)

raw_entries = st.fixed_dictionaries(
    {"id": st.text(min_size=1, max_size=8)},
    optional={
        "transcription": optional_text,
        "raw_transcription": optional_text,
        "preview": optional_text,
        "category_name": optional_text,
        "markdown_content": optional_text,
        "content_markdown": optional_text,
        "processed_content": processed_content,
        "content_json": st.none()
        | st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
        "duration": st.none()
        | st.floats(min_value=0, max_value=3600, allow_nan=False),
        "is_archived": st.none() | st.booleans() | st.sampled_from([0, 1]),
        "created_at": st.text(max_size=25),
    },
).map(RawEntry.model_validate)


@given(entry=raw_entries)
def test_normalize_is_total(entry: RawEntry) -> None:
    idea = normalize(entry)

    assert idea.id == entry.id
    assert isinstance(idea.transcription, str)
    assert idea.category
    assert idea.tags == ()
    assert idea.audio_url is None


@given(entry=raw_entries)
def test_ai_processed_matches_markdown(entry: RawEntry) -> None:
    idea = normalize(entry)

    assert idea.ai_processed == bool(entry.markdown_content or entry.content_markdown)
    assert idea.ai_processed == (idea.ai_markdown is not None)


@given(primary=st.text(min_size=1), legacy=st.text(min_size=1))
def test_transcription_beats_legacy_field(primary: str, legacy: str) -> None:
    entry = RawEntry.model_validate(
        {"id": "e1", "transcription": primary, "raw_transcription": legacy}
    )

    assert normalize(entry).transcription == primary


@given(id_=st.text(min_size=1, max_size=8))
def test_bare_entry_uses_fallbacks(id_: str) -> None:
    idea = normalize(RawEntry.model_validate({"id": id_}))

    assert idea.category == UNCATEGORIZED
    assert idea.transcription == ""
    assert idea.ai_processed is False
    assert idea.is_archived is False


@given(entries=st.lists(raw_entries, max_size=6))
def test_normalize_list_preserves_order(entries: list[RawEntry]) -> None:
    assert [idea.id for idea in normalize_list(entries)] == [e.id for e in entries]


@given(entries=st.lists(raw_entries, max_size=6), query=st.text(max_size=5))
def test_search_returns_subsequence(entries: list[RawEntry], query: str) -> None:
    ideas = normalize_list(entries)

    matches = search_ideas(ideas, query)

    remaining: Any = iter(ideas)
    assert all(any(match is idea for idea in remaining) for match in matches)
