"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde JSON → objetos tipados.
- El mismo modelo genérico (`Envelope[T]`) decodifica todas las entidades.

Nota:
- Las entidades son valores inmutables (`frozen`); no tienen identidad más
  allá de sus campos.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import AwareDatetime, BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Channel(BaseModel):
    """Información de un canal (`GET /channels`)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="broadcaster_id")
    login: str = Field(..., alias="broadcaster_login")
    display_name: str = Field(..., alias="broadcaster_name")
    game_id: str = Field(default="")
    game_name: str = Field(default="")
    title: str = Field(default="")
    delay: int = Field(
        default=0,
        description="Retraso del stream en segundos (solo visible para el propio broadcaster).",
    )
    tags: list[str] = Field(default_factory=list)
    content_classification_labels: list[str] = Field(default_factory=list)
    is_branded_content: bool = Field(default=False)


class Followed(BaseModel):
    """Un broadcaster seguido por el usuario (`GET /channels/followed`)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    broadcaster_id: str
    broadcaster_login: str
    broadcaster_name: str
    followed_at: AwareDatetime


class Follower(BaseModel):
    """Un usuario que sigue al broadcaster (`GET /channels/followers`)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    user_id: str
    user_login: str
    user_name: str
    followed_at: AwareDatetime


T = TypeVar("T", bound=BaseModel)


class Pagination(BaseModel):
    model_config = ConfigDict(extra="ignore")

    cursor: str = Field(
        default="",
        description="Token opaco para la página siguiente; vacío si no hay más páginas.",
    )

    @field_validator("cursor", mode="before")
    @classmethod
    def _none_cursor(cls, value: Any) -> Any:
        return "" if value is None else value


class Envelope(BaseModel, Generic[T]):
    """Forma uniforme de las respuestas Helix: `{data: [T], pagination: {cursor}}`.

    `data` es obligatorio; `pagination` es opcional (endpoints sin paginación).
    """

    model_config = ConfigDict(extra="ignore")

    data: list[T]
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("pagination", mode="before")
    @classmethod
    def _none_pagination(cls, value: Any) -> Any:
        return {} if value is None else value


class ChannelsListResponse(BaseModel):
    header: dict[str, str] = Field(default_factory=dict)
    data: list[Channel] = Field(default_factory=list)


class FollowedListResponse(BaseModel):
    header: dict[str, str] = Field(default_factory=dict)
    data: list[Followed] = Field(default_factory=list)
    cursor: str = ""


class FollowersListResponse(BaseModel):
    header: dict[str, str] = Field(default_factory=dict)
    data: list[Follower] = Field(default_factory=list)
    cursor: str = ""
