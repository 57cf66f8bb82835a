"""Wrapper de httpx para Helix.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación para todos los recursos.
- Facilita testeo: se puede sustituir por un stub/mocked client.
"""

from __future__ import annotations

import json
import logging
from typing import Sequence

import httpx

from core.config import AppSettings
from core.errors import HelixAPIError, TransportError
from core.options import RequestOption, RequestSpec, apply_options

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    La autenticación no va aquí: la inyecta `HttpxTransport` en cada petición,
    así también funciona con un cliente inyectado desde fuera.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


class HttpxTransport:
    """Implementación de `core.interfaces.HelixTransport` sobre httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    def _auth_headers(self) -> list[tuple[str, str]]:
        headers: list[tuple[str, str]] = []
        if self._settings.client_id:
            headers.append(("Client-Id", self._settings.client_id))
        if self._settings.access_token:
            headers.append(("Authorization", f"Bearer {self._settings.access_token}"))
        return headers

    def url_for(self, path: str) -> str:
        return self._settings.base_url.rstrip("/") + "/" + path.lstrip("/")

    def build_request(
        self,
        method: str,
        path: str,
        body: bytes | None,
        options: Sequence[RequestOption],
    ) -> httpx.Request:
        spec = RequestSpec(method=method, path=path, body=body, headers=self._auth_headers())
        apply_options(spec, options)
        return self._client.build_request(
            spec.method,
            self.url_for(spec.path),
            params=spec.params,
            headers=spec.headers,
            content=spec.body,
        )

    async def send(
        self,
        method: str,
        path: str,
        body: bytes | None,
        options: Sequence[RequestOption],
    ) -> httpx.Response:
        request = self.build_request(method, path, body, options)
        logger.debug("%s %s", request.method, request.url)

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path}: {exc}") from exc

        if response.is_error:
            await self._raise_for_status(response)
        return response

    async def _raise_for_status(self, response: httpx.Response) -> None:
        try:
            raw = (await response.aread()).decode("utf-8", errors="replace")
        except httpx.HTTPError as exc:
            raise TransportError(f"HTTP {response.status_code}: {exc}") from exc
        finally:
            await response.aclose()

        try:
            payload = json.loads(raw) if raw else None
        except json.JSONDecodeError:
            payload = None

        logger.debug("HTTP %d from %s: %s", response.status_code, response.request.url, raw[:200])
        raise HelixAPIError.from_payload(response.status_code, payload, raw)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
