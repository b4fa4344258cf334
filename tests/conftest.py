import json

import pytest
import requests

from samples import (
    NEW,
    OLD,
    WORDLE_JSON,
    STRANDS_JSON,
    CONNECTIONS_JSON,
    SPELLING_BEE_HTML,
    LETTER_BOXED_HTML,
    SUDOKU_HTML,
)
from upstream import client


class FakeResponse:
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeUpstream:
    """Maps URLs to (status, body) or an exception; records every request."""

    def __init__(self):
        self.routes: dict[str, object] = {}
        self.calls: list[dict] = []

    def add(self, url: str, body, status: int = 200) -> None:
        text = body if isinstance(body, str) else json.dumps(body)
        self.routes[url] = (status, text)

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(404, "Not Found")
        if isinstance(route, Exception):
            raise route
        status, text = route
        return FakeResponse(status, text)

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def upstream_env(monkeypatch):
    monkeypatch.setenv("BASE_URL_NEW", NEW + "/")
    monkeypatch.setenv("BASE_URL_OLD", OLD)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("USER_AGENT", raising=False)


@pytest.fixture
def fake_upstream(monkeypatch, upstream_env):
    fake = FakeUpstream()
    monkeypatch.setattr(client.requests, "get", fake.get)
    return fake


@pytest.fixture
def all_puzzles(fake_upstream):
    """Fake upstream serving every puzzle for 2024-01-01 (HTML pages for "today")."""
    fake_upstream.add(f"{NEW}/wordle/v2/2024-01-01.json", WORDLE_JSON)
    fake_upstream.add(f"{NEW}/strands/v2/2024-01-01.json", STRANDS_JSON)
    fake_upstream.add(f"{NEW}/connections/v2/2024-01-01.json", CONNECTIONS_JSON)
    fake_upstream.add(f"{OLD}/spelling-bee", SPELLING_BEE_HTML)
    fake_upstream.add(f"{OLD}/spelling-bee/2024-01-01", SPELLING_BEE_HTML)
    fake_upstream.add(f"{OLD}/letter-boxed/", LETTER_BOXED_HTML)
    fake_upstream.add(f"{OLD}/sudoku/", SUDOKU_HTML)
    return fake_upstream
