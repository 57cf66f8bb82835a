"""Recursos de canales: `/channels`, `/channels/followed`, `/channels/followers`.

Cada recurso expone `list()`, que crea su propio builder. Los métodos del
builder devuelven la misma instancia para poder encadenarlos:

    resp = await client.channels.followed.list().user_id("100").first(50).do()
"""

from __future__ import annotations

from core.call import ListCall, Resource
from core.domain.models import (
    Channel,
    ChannelsListResponse,
    Followed,
    FollowedListResponse,
    Follower,
    FollowersListResponse,
)
from core.interfaces.transport import HelixTransport
from core.options import RequestOption, add_query_parameter, set_query_parameter


class ChannelsListCall(ListCall[Channel]):
    path = "/channels"
    model = Channel

    def broadcaster_id(self, ids: list[str]) -> "ChannelsListCall":
        """Filtra por broadcaster; un parámetro `broadcaster_id` por ID, en orden."""

        self._append(*(add_query_parameter("broadcaster_id", i) for i in ids))
        return self

    async def do(self, *options: RequestOption, timeout: float | None = None) -> ChannelsListResponse:
        header, envelope = await self._execute(options, timeout)
        return ChannelsListResponse(header=header, data=envelope.data)


class FollowedListCall(ListCall[Followed]):
    path = "/channels/followed"
    model = Followed

    def broadcaster_id(self, id: str) -> "FollowedListCall":
        """Comprueba si el usuario sigue a este broadcaster.

        Si se indica, la respuesta solo contiene a ese broadcaster (cuando el
        usuario lo sigue); si no, todos los broadcasters seguidos.
        """

        self._append(set_query_parameter("broadcaster_id", id))
        return self

    def user_id(self, id: str) -> "FollowedListCall":
        """Usuario cuyos canales seguidos se listan."""

        self._append(set_query_parameter("user_id", id))
        return self

    def first(self, n: int) -> "FollowedListCall":
        """Tamaño de página: mínimo 1, máximo 100, por defecto 20 (lo valida el servidor)."""

        self._append(set_query_parameter("first", str(n)))
        return self

    def after(self, cursor: str | int) -> "FollowedListCall":
        """Cursor de la página siguiente."""

        self._append(set_query_parameter("after", str(cursor)))
        return self

    async def do(self, *options: RequestOption, timeout: float | None = None) -> FollowedListResponse:
        header, envelope = await self._execute(options, timeout)
        return FollowedListResponse(
            header=header,
            data=envelope.data,
            cursor=envelope.pagination.cursor,
        )


class FollowersListCall(ListCall[Follower]):
    path = "/channels/followers"
    model = Follower

    def broadcaster_id(self, id: str) -> "FollowersListCall":
        self._append(set_query_parameter("broadcaster_id", id))
        return self

    def user_id(self, id: str) -> "FollowersListCall":
        """Comprueba si este usuario sigue al broadcaster."""

        self._append(set_query_parameter("user_id", id))
        return self

    def first(self, n: int) -> "FollowersListCall":
        self._append(set_query_parameter("first", str(n)))
        return self

    def after(self, cursor: str | int) -> "FollowersListCall":
        self._append(set_query_parameter("after", str(cursor)))
        return self

    async def do(self, *options: RequestOption, timeout: float | None = None) -> FollowersListResponse:
        header, envelope = await self._execute(options, timeout)
        return FollowersListResponse(
            header=header,
            data=envelope.data,
            cursor=envelope.pagination.cursor,
        )


class FollowedResource(Resource):
    def list(self) -> FollowedListCall:
        return FollowedListCall(self)


class FollowersResource(Resource):
    def list(self) -> FollowersListCall:
        return FollowersListCall(self)


class ChannelsResource(Resource):
    def __init__(self, transport: HelixTransport) -> None:
        super().__init__(transport)
        self.followed = FollowedResource(transport)
        self.followers = FollowersResource(transport)

    def list(self) -> ChannelsListCall:
        """Lista canales según los filtros indicados."""

        return ChannelsListCall(self)
