"""Builder de llamadas Helix.

Cada endpoint tiene su propia subclase de `ListCall`:
- Los métodos encadenables agregan opciones y devuelven la MISMA instancia
  (no una copia).
- `do()` ejecuta exactamente un GET al path fijo del recurso.

Precedencia al ejecutar: primero las opciones guardadas en el builder, luego
las opciones extra pasadas a `do()`. Para opciones "set", gana el valor extra.
Las opciones extra nunca se guardan en el builder.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, ClassVar, Generic, Protocol, Sequence, TypeVar

import httpx

from core.decoding import decode_envelope
from core.domain.models import Envelope, T
from core.errors import TransportError
from core.interfaces.transport import HelixTransport
from core.options import RequestOption, set_query_parameter

logger = logging.getLogger(__name__)


class Resource:
    """Base de las fachadas: solo guarda el transporte compartido."""

    def __init__(self, transport: HelixTransport) -> None:
        self.transport = transport


class ListCall(Generic[T]):
    path: ClassVar[str]
    model: ClassVar[type[Any]]

    def __init__(self, resource: Resource) -> None:
        self.resource = resource
        self._options: list[RequestOption] = []

    @property
    def options(self) -> tuple[RequestOption, ...]:
        return tuple(self._options)

    def _append(self, *options: RequestOption) -> None:
        self._options.extend(options)

    def merged_options(self, extra: Sequence[RequestOption] = ()) -> list[RequestOption]:
        return [*self._options, *extra]

    async def _execute(
        self,
        extra: Sequence[RequestOption],
        timeout: float | None,
    ) -> tuple[dict[str, str], Envelope[T]]:
        if timeout is not None and timeout <= 0:
            raise TransportError(f"GET {self.path}: deadline already expired")

        options = self.merged_options(extra)
        logger.debug("GET %s (%d options)", self.path, len(options))

        if timeout is None:
            return await self._round_trip(options)
        try:
            return await asyncio.wait_for(self._round_trip(options), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"GET {self.path}: timed out after {timeout}s") from exc

    async def _round_trip(
        self,
        options: Sequence[RequestOption],
    ) -> tuple[dict[str, str], Envelope[T]]:
        response = await self.resource.transport.send("GET", self.path, None, options)
        try:
            body = await response.aread()
            envelope = decode_envelope(body, self.model)
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {self.path}: failed reading body: {exc}") from exc
        finally:
            await response.aclose()

        logger.debug("GET %s -> %d items", self.path, len(envelope.data))
        return dict(response.headers), envelope


class PaginatedResponse(Protocol):
    cursor: str


P = TypeVar("P", bound=PaginatedResponse, covariant=True)


class PaginatedCall(Protocol[P]):
    """Cualquier builder cuyo `do()` devuelve una respuesta con `cursor`."""

    async def do(self, *options: RequestOption, timeout: float | None = None) -> P:
        ...


async def paginate(
    call: PaginatedCall[P],
    *options: RequestOption,
    max_pages: int | None = None,
    timeout: float | None = None,
) -> AsyncIterator[P]:
    """Recorre páginas siguiendo el cursor hasta que venga vacío.

    Usa el canal de opciones extra (`after`), así que el builder no se muta.
    """

    cursor = ""
    pages = 0
    while True:
        extra = list(options)
        if cursor:
            extra.append(set_query_parameter("after", cursor))
        page = await call.do(*extra, timeout=timeout)
        yield page

        pages += 1
        cursor = page.cursor
        if not cursor:
            return
        if max_pages is not None and pages >= max_pages:
            return
