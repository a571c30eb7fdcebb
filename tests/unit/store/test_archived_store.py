"""Unit tests for the archived idea store."""

import pytest

from ideasync.auth import StaticTokenProvider
from ideasync.gateway import IdeaService
from ideasync.store import ArchivedIdeaStore, IdeaStore

from tests.conftest import FakeEntriesApi

pytestmark = pytest.mark.anyio


@pytest.fixture
def archived(
    service: IdeaService, token_provider: StaticTokenProvider
) -> ArchivedIdeaStore:
    return ArchivedIdeaStore(service, token_provider)


@pytest.fixture
def populated(api: FakeEntriesApi) -> FakeEntriesApi:
    _ = api.add(id="a1", transcription="active idea")
    _ = api.add(id="b1", transcription="old plan", is_archived=True)
    _ = api.add(id="b2", transcription="older plan", is_archived=1)
    return api


class TestRefresh:
    async def test_lists_only_archived(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        assert await archived.refresh()

        assert [idea.id for idea in archived.ideas] == ["b2", "b1"]
        assert all(idea.is_archived for idea in archived.ideas)
        params = populated.requests[0].url.params
        assert params["include_archived"] == "true"

    async def test_failure_keeps_previous_collection(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        _ = await archived.refresh()
        before = archived.ideas
        populated.fail_status = 502

        assert await archived.refresh() is False

        assert archived.ideas == before
        assert archived.error == "Internal server error"


class TestDelete:
    async def test_removes_idea(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        _ = await archived.refresh()

        assert await archived.delete("b1")

        assert [idea.id for idea in archived.ideas] == ["b2"]
        assert "b1" not in populated.entries

    async def test_failure_keeps_idea(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        _ = await archived.refresh()
        populated.fail_status = 500

        assert await archived.delete("b1") is False

        assert any(idea.id == "b1" for idea in archived.ideas)


class TestUnarchive:
    async def test_removes_from_archived_collection(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        _ = await archived.refresh()

        assert await archived.unarchive("b1")

        assert [idea.id for idea in archived.ideas] == ["b2"]
        assert populated.entries["b1"]["is_archived"] is False

    async def test_unknown_id_sets_error(
        self, populated: FakeEntriesApi, archived: ArchivedIdeaStore
    ) -> None:
        _ = await archived.refresh()

        assert await archived.unarchive("zz") is False

        assert archived.error == "Entry not found"
        assert len(archived.ideas) == 2


class TestIndependentViews:
    async def test_stores_do_not_cross_populate(
        self,
        populated: FakeEntriesApi,
        service: IdeaService,
        token_provider: StaticTokenProvider,
    ) -> None:
        active = IdeaStore(service, token_provider)
        archived = ArchivedIdeaStore(service, token_provider)
        _ = await active.refresh()
        _ = await archived.refresh()

        assert await active.archive("a1")
        assert all(idea.id != "a1" for idea in archived.ideas)

        assert await archived.unarchive("b1")
        assert all(idea.id != "b1" for idea in active.ideas)

        _ = await active.refresh()
        _ = await archived.refresh()
        assert {idea.id for idea in active.ideas} == {"b1"}
        assert {idea.id for idea in archived.ideas} == {"a1", "b2"}
