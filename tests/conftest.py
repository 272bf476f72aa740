from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timekeeping.main import create_app


class FakeResponse:
    def __init__(self, status_code: int = 200):
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class FakeMessengerClient:
    def __init__(self, *, status_code: int = 200, error: Exception | None = None):
        self.sent: list[tuple[str, str]] = []
        self._status_code = status_code
        self._error = error

    def send_text(self, recipient_id: str, text: str) -> FakeResponse:
        if self._error:
            raise self._error
        self.sent.append((recipient_id, text))
        return FakeResponse(self._status_code)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    created = []

    def _make(messenger_client=None, **overrides):
        overrides.setdefault("DB_PATH", str(tmp_path / "timekeeping.db"))
        app = create_app(overrides, messenger_client=messenger_client or FakeMessengerClient())
        created.append(app)
        return app

    yield _make
    for app in created:
        app.extensions["timekeeping"].close()


@pytest.fixture
def messenger() -> FakeMessengerClient:
    return FakeMessengerClient()


@pytest.fixture
def failing_messenger() -> FakeMessengerClient:
    return FakeMessengerClient(error=ConnectionError("send api unreachable"))


@pytest.fixture
def app(make_app, messenger):
    return make_app(messenger)


@pytest.fixture
def container(app):
    return app.extensions["timekeeping"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_messenger_factory():
    return FakeMessengerClient
