"""Shared test fixtures for ideasync tests."""

import json
import re
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from rich.console import Console

from ideasync.auth import StaticTokenProvider
from ideasync.gateway import IdeaService

TEST_TOKEN = "test-token"
BASE_URL = "http://ideas.test"

_ENTRY_PATH = re.compile(r"^/entries/(?P<id>[^/]+)(?P<archive>/archive)?$")
_MULTIPART_DURATION = re.compile(rb'name="duration"\r\n\r\n(?P<value>[^\r]*)')


def _json(status_code: int, body: object) -> httpx.Response:
    return httpx.Response(status_code, json=body)


class FakeEntriesApi:
    """In-memory stand-in for the remote entries API.

    Serves the same routes and envelopes as the real backend through an
    httpx.MockTransport. Entries are listed newest first.

    Attributes:
        entries: Stored entries keyed by id, in insertion order.
        requests: Every request received, in order.
        fail_status: When set, every request is answered with this status.
    """

    def __init__(self) -> None:
        self.entries: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.fail_status: int | None = None
        self._next_id = 1

    def add(self, **fields: Any) -> dict[str, Any]:
        """Store an entry directly, as if created earlier."""
        entry_id = str(fields.pop("id", None) or self._new_id())
        entry: dict[str, Any] = {
            "id": entry_id,
            "created_at": f"2024-05-0{min(len(self.entries) + 1, 9)}T10:00:00Z",
            "transcription": "",
            "is_archived": False,
            **fields,
        }
        self.entries[entry_id] = entry
        return entry

    def _new_id(self) -> str:
        entry_id = f"e{self._next_id}"
        self._next_id += 1
        while entry_id in self.entries:
            entry_id = f"e{self._next_id}"
            self._next_id += 1
        return entry_id

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_status is not None:
            return _json(self.fail_status, {"detail": "Internal server error"})
        if request.headers.get("Authorization") != f"Bearer {TEST_TOKEN}":
            return _json(401, {"detail": "Not authenticated"})

        path = request.url.path
        if path == "/entries":
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._create(request)
            return _json(405, {"detail": "Method not allowed"})

        match = _ENTRY_PATH.match(path)
        if match is None:
            return _json(404, {"detail": "Not found"})

        entry = self.entries.get(match["id"])
        if entry is None:
            return _json(404, {"detail": "Entry not found"})

        if match["archive"]:
            entry["is_archived"] = bool(json.loads(request.content)["is_archived"])
            return _json(200, {"success": True, "entry_id": entry["id"]})
        if request.method == "GET":
            return _json(200, {"entry": entry})
        if request.method == "PATCH":
            entry.update(json.loads(request.content))
            return _json(200, {"success": True, "entry": entry})
        if request.method == "DELETE":
            del self.entries[entry["id"]]
            return httpx.Response(204)
        return _json(405, {"detail": "Method not allowed"})

    def _list(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        include_archived = params.get("include_archived") == "true"
        limit = int(params.get("limit", "10"))
        offset = int(params.get("offset", "0"))

        visible = [
            entry
            for entry in reversed(self.entries.values())
            if include_archived or not entry["is_archived"]
        ]
        page = visible[offset : offset + limit]
        return _json(
            200,
            {"entries": page, "total": len(visible), "limit": limit, "offset": offset},
        )

    def _create(self, request: httpx.Request) -> httpx.Response:
        content_type = request.headers.get("Content-Type", "")
        if content_type.startswith("multipart/form-data"):
            match = _MULTIPART_DURATION.search(request.content)
            duration = float(match["value"]) if match else 0.0
            transcription = "transcribed audio"
        else:
            body = json.loads(request.content)
            duration = body["duration"]
            transcription = body["transcription"]

        entry = self.add(transcription=transcription, duration=duration)
        return _json(201, {"success": True, "data": entry})


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def api() -> FakeEntriesApi:
    return FakeEntriesApi()


@pytest.fixture
def service(api: FakeEntriesApi) -> IdeaService:
    """IdeaService wired to the fake API."""
    client = httpx.AsyncClient(base_url=BASE_URL, transport=api.transport())
    return IdeaService(client, owns_client=True)


@pytest.fixture
def token_provider() -> StaticTokenProvider:
    return StaticTokenProvider(TEST_TOKEN)


@pytest.fixture
def make_entry() -> Callable[..., dict[str, Any]]:
    """Return a factory for raw entry payloads with sensible defaults."""

    def _make(**fields: Any) -> dict[str, Any]:
        return {
            "id": "e1",
            "created_at": "2024-05-01T10:00:00Z",
            "transcription": "buy milk",
            **fields,
        }

    return _make


@pytest.fixture
def console() -> Console:
    return Console(
        width=100,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
