"""Decodificación genérica del envelope `{data, pagination}`."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from core.domain.models import Envelope, T
from core.errors import DecodeError


def decode_envelope(body: bytes | str, model: type[T]) -> Envelope[T]:
    """Parsea `body` como `Envelope[model]`.

    - `data` vacío → secuencia vacía, sin error.
    - Falta `data`, tipos incorrectos o JSON inválido → `DecodeError`.
    - Sin `pagination` (o sin `cursor`) → cursor `""`.
    """

    if not isinstance(model, type) or not issubclass(model, BaseModel):
        raise TypeError(f"model must be a pydantic model class, got {model!r}")

    try:
        return Envelope[model].model_validate_json(body)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise DecodeError(f"invalid {model.__name__} envelope: {exc}") from exc
