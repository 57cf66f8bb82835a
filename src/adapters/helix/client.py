"""Punto de entrada del cliente Helix."""

from __future__ import annotations

from types import TracebackType

import httpx

from adapters.helix.channels import ChannelsResource
from adapters.http_client import HttpxTransport
from core.config import AppSettings
from core.interfaces.transport import HelixTransport


class HelixClient:
    """Agrupa los recursos Helix sobre un transporte compartido.

    Si no se inyecta `transport`, se crea un `HttpxTransport` a partir de
    `settings` (y opcionalmente de un `httpx.AsyncClient` externo, que en ese
    caso no se cierra al salir).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: HelixTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._owned: HttpxTransport | None = None
        if transport is None:
            self._owned = HttpxTransport(self.settings, client=http_client)
            transport = self._owned
        self.transport = transport
        self.channels = ChannelsResource(transport)

    async def aclose(self) -> None:
        if self._owned is not None:
            await self._owned.aclose()

    async def __aenter__(self) -> "HelixClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def api(
    client_id: str,
    *,
    access_token: str | None = None,
    base_url: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> HelixClient:
    """Atajo: construye un `HelixClient` con credenciales explícitas."""

    overrides: dict[str, object] = {"client_id": client_id, "access_token": access_token}
    if base_url:
        overrides["base_url"] = base_url
    return HelixClient(AppSettings(**overrides), http_client=http_client)
