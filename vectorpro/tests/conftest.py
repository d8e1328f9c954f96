"""
vectorpro test configuration.

No test touches the network: every client is wired to an httpx.MockTransport
backed by FakeApi, which replays queued responses and records requests.
"""
from __future__ import annotations

import os
from typing import Any

import httpx
import pytest

# ── Pin the environment ───────────────────────────────────────────────────
# These must be set before any vectorpro modules are imported.

for _var in ("VECTORPRO_API_KEY", "VECTORPRO_BASE_URL"):
    os.environ.pop(_var, None)


class FakeApi:
    """Queue of canned responses plus a log of every request received."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        *,
        content: bytes | None = None,
    ) -> None:
        if content is not None:
            self._responses.append(httpx.Response(status_code, content=content))
        else:
            self._responses.append(httpx.Response(status_code, json=json))

    def fail_with(self, exc: Exception) -> None:
        self._responses.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached env config so monkeypatched env vars are seen."""
    from vectorpro.core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(fake_api: FakeApi):
    """A client with the default base URL talking to fake_api."""
    from vectorpro import VectorProClient

    return VectorProClient(
        api_key="test-api-key",
        transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture
def envelope():
    """Build a success envelope the way the API shapes it."""

    def _envelope(data: Any, message: str = "Success", http_status: int = 200, **extra: Any):
        return {"data": data, "message": message, "http_status": http_status, **extra}

    return _envelope
