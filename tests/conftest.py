"""Shared pytest fixtures for the admin client tests."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Iterator

import httpx
import pytest

from adapters.http_client import ApiClient, build_async_client
from adapters.token_store import MemoryTokenStore
from core.config import AppSettings

BASE_URL = "http://api.test"


class RecordingBackend:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []
        self.default: httpx.Response | None = None

    def queue(self, response: httpx.Response | Exception) -> None:
        self._responses.append(response)

    def envelope(self, data: Any, *, status: int = 200, message: str = "OK", meta: Any = None, transport_status: int = 200) -> None:
        body: dict[str, Any] = {"statusCode": status, "message": message, "data": data}
        if meta is not None:
            body["meta"] = meta
        self.queue(httpx.Response(transport_status, json=body))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            item = self._responses.pop(0)
        elif self.default is not None:
            item = self.default
        else:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def make_client(
    settings: AppSettings, backend: RecordingBackend
) -> Iterator[Callable[..., ApiClient]]:
    """Build `ApiClient`s wired to the recording backend; closed on teardown."""

    created: list[ApiClient] = []

    def _make(token_store: Any = None) -> ApiClient:
        http = build_async_client(settings, transport=httpx.MockTransport(backend))
        client = ApiClient(settings=settings, token_store=token_store, base_url=BASE_URL, http_client=http)
        created.append(client)
        return client

    yield _make

    for client in created:
        asyncio.run(client.aclose())


@pytest.fixture
def client(make_client: Callable[..., ApiClient], token_store: MemoryTokenStore) -> ApiClient:
    return make_client(token_store)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config dir at a temp directory and clear env overrides."""

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("CMS_ADMIN_API_BASE_URL", raising=False)
    monkeypatch.setenv("CMS_ADMIN_TOKEN_FILE", str(tmp_path / "session.json"))
    return tmp_path
