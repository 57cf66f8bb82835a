"""Contrato del transporte HTTP.

Por qué Protocol:
- El core no conoce httpx.AsyncClient ni cómo se autentica: solo necesita
  "envía esta petición y dame la respuesta abierta".
- En tests se sustituye por un doble que registra el cierre de la respuesta.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import httpx

from core.options import RequestOption


@runtime_checkable
class HelixTransport(Protocol):
    """Contrato mínimo para ejecutar una petición Helix.

    Reglas de diseño:
    - `send` devuelve la respuesta en modo streaming (cuerpo sin leer); quien
      llama es responsable de leerla y cerrarla con `aclose()`.
    - Resuelve la base URL e inyecta la autenticación.
    - Los fallos de red y los status no-2xx se elevan como `TransportError`.
    """

    async def send(
        self,
        method: str,
        path: str,
        body: bytes | None,
        options: Sequence[RequestOption],
    ) -> httpx.Response:
        ...
