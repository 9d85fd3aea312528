"""Tests for the Typer console."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from adapters.http_client import ApiClient, build_async_client
from adapters.query_cache import QueryCache
from adapters.token_store import FileTokenStore
from cli import main as cli_main
from cli.ui_components import GENERIC_ERROR_MESSAGE, describe_error
from core.config import AppSettings
from core.domain.errors import ApiError
from tests.conftest import BASE_URL, RecordingBackend


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def wired(
    monkeypatch: pytest.MonkeyPatch, backend: RecordingBackend, isolated_config: Path
) -> FileTokenStore:
    """Route CLI commands to the recording backend with a file token store."""

    store = FileTokenStore(isolated_config / "session.json")

    def _build(settings: AppSettings | None = None) -> ApiClient:
        settings = AppSettings(_env_file=None)
        http = build_async_client(settings, transport=httpx.MockTransport(backend))
        return ApiClient(settings=settings, token_store=store, base_url=BASE_URL, http_client=http)

    monkeypatch.setattr(cli_main, "build_api_client", _build)
    monkeypatch.setattr(cli_main, "_query_cache", QueryCache(retry_delay=lambda failure_count: 0.0))
    return store


def test_list_categories(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    backend.envelope([{"id": "c1", "name": "Chargers", "image": "/img/c1.png"}])
    result = runner.invoke(cli_main.app, ["list", "categories"])
    assert result.exit_code == 0, result.output
    assert "Chargers" in result.output
    assert backend.last.url.path == "/category"


def test_malformed_entity_reports_generic_error(
    runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend
) -> None:
    for _ in range(3):
        backend.envelope([{"id": "c1"}])
    result = runner.invoke(cli_main.app, ["list", "categories"])
    assert result.exit_code == 1
    assert GENERIC_ERROR_MESSAGE in result.output
    assert not isinstance(result.exception, ValidationError)
    assert len(backend.requests) == 3


def test_list_retries_server_errors(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    backend.queue(httpx.Response(503, text="busy"))
    backend.envelope([{"id": "c1", "name": "Chargers", "image": "/img/c1.png"}])
    result = runner.invoke(cli_main.app, ["list", "categories"])
    assert result.exit_code == 0, result.output
    assert len(backend.requests) == 2


def test_list_is_served_from_cache_until_mutation(
    runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend
) -> None:
    backend.envelope([{"id": "k1", "title": "Drill", "description": "", "link": "https://x.test"}])
    backend.envelope({"id": "k2", "title": "Saw", "description": "", "link": "https://y.test"})
    backend.envelope([])

    assert runner.invoke(cli_main.app, ["list", "cordless"]).exit_code == 0
    assert runner.invoke(cli_main.app, ["list", "cordless"]).exit_code == 0
    assert len(backend.requests) == 1

    result = runner.invoke(cli_main.app, ["cordless-add", "--title", "Saw", "--link", "https://y.test"])
    assert result.exit_code == 0, result.output
    assert runner.invoke(cli_main.app, ["list", "cordless"]).exit_code == 0
    assert len(backend.requests) == 3

def test_list_sends_stored_token(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    wired.set_token("jwt")
    backend.envelope([])
    result = runner.invoke(cli_main.app, ["list", "cordless"])
    assert result.exit_code == 0, result.output
    assert backend.last.headers["Authorization"] == "Bearer jwt"


def test_api_error_is_reported(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    backend.queue(httpx.Response(404, text="nope"))
    result = runner.invoke(cli_main.app, ["delete", "gallery-web", "g1", "--yes"])
    assert result.exit_code == 1
    assert "Not Found" in result.output


def test_login_persists_token(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    backend.envelope({"token": "jwt-9", "user": {"id": "u1", "name": "Ada", "email": "ada@example.com"}})
    result = runner.invoke(cli_main.app, ["login", "--email", "ada@example.com", "--password", "pw"])
    assert result.exit_code == 0, result.output
    assert wired.get_token() == "jwt-9"


def test_logout_clears_token(runner: CliRunner, wired: FileTokenStore) -> None:
    wired.set_token("jwt")
    result = runner.invoke(cli_main.app, ["logout"])
    assert result.exit_code == 0, result.output
    assert wired.get_token() is None


def test_whoami_without_session(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    result = runner.invoke(cli_main.app, ["whoami"])
    assert result.exit_code == 1
    assert "Not logged in" in result.output
    assert backend.requests == []


def test_cordless_add(runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend) -> None:
    backend.envelope({"id": "k9", "title": "X", "description": "", "link": "https://z"})
    result = runner.invoke(cli_main.app, ["cordless-add", "--title", "X", "--link", "https://z"])
    assert result.exit_code == 0, result.output
    assert "cordless/k9" in result.output
    assert backend.last_json() == {"title": "X", "description": "", "link": "https://z"}


def test_category_add_uploads_image(
    runner: CliRunner, wired: FileTokenStore, backend: RecordingBackend, tmp_path: Path
) -> None:
    image = tmp_path / "chargers.png"
    image.write_bytes(b"\x89PNG-data")
    backend.envelope({"id": "c7", "name": "Chargers", "image": "/img/c7.png"})

    result = runner.invoke(cli_main.app, ["category-add", "--name", "Chargers", "--image", str(image)])

    assert result.exit_code == 0, result.output
    assert "categories/c7" in result.output
    request = backend.last
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="chargers.png"' in request.content
    assert b"image/png" in request.content


def test_describe_error_fallback() -> None:
    assert describe_error(ApiError(400, "Name is required")) == "Name is required"
    assert describe_error(ApiError(500, "")) == GENERIC_ERROR_MESSAGE
    assert describe_error(RuntimeError("internal")) == GENERIC_ERROR_MESSAGE
