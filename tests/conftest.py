"""Shared pytest fixtures and test helpers for nowctl tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from nowctl.commands._context import AppContext
from nowctl.config.settings import NowSettings
from nowctl.infrastructure.api import ApiClient

Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]

USER_BODY = {"user": {"uid": "usr_1", "username": "alice", "email": "alice@example.com"}}


def json_response(status: int, body: Any = None) -> httpx.Response:
    """Build an httpx.Response with a JSON body."""
    if body is None:
        return httpx.Response(status)
    return httpx.Response(status, json=body)


def api_error(status: int, code: str, message: str, **extra: Any) -> httpx.Response:
    """Build a platform error response ``{"error": {...}}``."""
    return json_response(status, {"error": {"code": code, "message": message, **extra}})


def alias_ok(domain: str) -> httpx.Response:
    """Successful ``POST /projects/<p>/alias`` response for *domain*."""
    return json_response(200, [{"domain": domain, "target": "PRODUCTION"}])


class FakeApi:
    """Route table for ``httpx.MockTransport`` that records every request.

    Each route holds a queue of responses. The last queued response is
    reused once the queue is drained.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Responder]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses: Responder) -> FakeApi:
        self.routes.setdefault((method, path), []).extend(responses)
        return self

    def calls(self, method: str, path: str | None = None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method and (path is None or r.url.path == path)
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return api_error(404, "not_found", f"No route for {request.method} {request.url.path}")
        responder = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(responder):
            return responder(request)
        # Fresh copy: a Response must not be sent twice.
        return httpx.Response(
            responder.status_code, headers=responder.headers, content=responder.content
        )


class RecordingOutput:
    """Output stand-in that records calls instead of printing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def _record(self, kind: str, message: Any) -> None:
        self.calls.append((kind, str(message)))

    def error(self, message: str) -> None:
        self._record("error", message)

    def warn(self, message: str) -> None:
        self._record("warn", message)

    def log(self, message: str) -> None:
        self._record("log", message)

    def print(self, text: Any) -> None:
        self._record("print", text)

    def success(self, message: Any) -> None:
        self._record("success", message)

    def of(self, kind: str) -> list[str]:
        return [msg for k, msg in self.calls if k == kind]

    @property
    def text(self) -> str:
        return "".join(msg for _, msg in self.calls)


@pytest.fixture(autouse=True)
def _isolated_user_config(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the per-user config directory at an empty temp location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_api() -> FakeApi:
    """Fake platform API with the current user already routed."""
    return FakeApi().add("GET", "/www/user", json_response(200, USER_BODY))


@pytest.fixture
def make_client(fake_api: FakeApi) -> Iterator[Callable[..., ApiClient]]:
    """Factory for ApiClients wired to ``fake_api``."""
    clients: list[ApiClient] = []

    def factory(**kwargs: Any) -> ApiClient:
        options: dict[str, Any] = {
            "base_url": "https://api.test",
            "token": "tok_123",
            "max_retries": 2,
            "backoff_factor": 0,
            "transport": httpx.MockTransport(fake_api),
        }
        options.update(kwargs)
        client = ApiClient(**options)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client: Callable[..., ApiClient]) -> ApiClient:
    return make_client()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> NowSettings:
    """Settings isolated from the environment and any nowctl.toml."""
    for var in ("NOWCTL_TOKEN", "NOWCTL_CURRENT_TEAM", "NOWCTL_CONFIG", "NOWCTL_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return NowSettings(token="tok_123")


@pytest.fixture
def app(settings: NowSettings, client: ApiClient) -> AppContext:
    """AppContext with the fake-API client and a recording output."""
    return AppContext(settings, output=RecordingOutput(), client=client)  # type: ignore[arg-type]
