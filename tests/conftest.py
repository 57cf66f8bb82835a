"""
Shared fixtures for helix-client tests.
"""
from __future__ import annotations

from typing import Sequence

import httpx
import pytest
import respx

from core.config import AppSettings
from core.options import RequestOption, RequestSpec, apply_options

BASE_URL = "https://api.example.com/helix"


class FakeResponse:
    """Minimal stand-in for a streamed httpx.Response that counts aclose() calls."""

    def __init__(
        self,
        body: bytes = b'{"data": []}',
        headers: dict[str, str] | None = None,
        read_error: Exception | None = None,
    ) -> None:
        self._body = body
        self._read_error = read_error
        self.headers = httpx.Headers(headers or {})
        self.aclose_calls = 0

    async def aread(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    async def aclose(self) -> None:
        self.aclose_calls += 1


class RecordingTransport:
    """Transport double: returns queued responses and records every send()."""

    def __init__(self, *responses: FakeResponse) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, str, bytes | None, list[RequestOption]]] = []

    async def send(
        self,
        method: str,
        path: str,
        body: bytes | None,
        options: Sequence[RequestOption],
    ) -> FakeResponse:
        self.calls.append((method, path, body, list(options)))
        return self.responses.pop(0)

    def rendered(self, index: int = -1) -> RequestSpec:
        method, path, body, options = self.calls[index]
        return apply_options(RequestSpec(method=method, path=path, body=body), options)


@pytest.fixture
def settings():
    """Settings isolated from any local/user .env file."""
    return AppSettings(
        _env_file=None,
        client_id="test-client-id",
        access_token="test-token",
        base_url=BASE_URL,
    )


@pytest.fixture
def router():
    """respx router; wire it into httpx via MockTransport (see mock_http_client)."""
    return respx.MockRouter(assert_all_called=False)


@pytest.fixture
def mock_http_client(router):
    return httpx.AsyncClient(transport=httpx.MockTransport(router.async_handler))


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_transport():
    return RecordingTransport
