"""Shared test fixtures for taxjar.

Provides environment isolation and stub transports built on
:class:`httpx.MockTransport`, so no test ever reaches the network.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

API_KEY = "test-api-key"
API_URL = "https://api.example.com/v2/"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear TaxJar env vars so the host environment never leaks into tests."""
    for var in ["TAXJAR_API_KEY", "TAXJAR_API_URL"]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Stub transport
# ---------------------------------------------------------------------------


class StubTransport:
    """Records every request and answers with a fixed status and payload.

    Works as the handler of an :class:`httpx.MockTransport` for both
    :class:`httpx.Client` and :class:`httpx.AsyncClient`.
    """

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None

    def sync_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def stub() -> Callable[..., StubTransport]:
    """Factory for :class:`StubTransport` instances."""
    return StubTransport
