"""Opciones de petición componibles.

Una `RequestOption` es una mutación sobre un `RequestSpec` (query o headers).
Dos sabores:
- set: reemplaza todos los valores previos de la clave.
- add: agrega otro valor bajo la misma clave (filtros repetidos).

Las opciones se aplican estrictamente en orden con `apply_options`. Aquí no se
valida cardinalidad ni legalidad de parámetros: eso lo decide el servidor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

Target = Literal["query", "header"]


def _same_key(target: Target, a: str, b: str) -> bool:
    # Los nombres de header no distinguen mayúsculas.
    if target == "header":
        return a.lower() == b.lower()
    return a == b


@dataclass
class RequestSpec:
    """Contexto mutable a partir del cual el transporte construye la petición."""

    method: str
    path: str
    body: bytes | None = None
    params: list[tuple[str, str]] = field(default_factory=list)
    headers: list[tuple[str, str]] = field(default_factory=list)

    def _pairs(self, target: Target) -> list[tuple[str, str]]:
        return self.params if target == "query" else self.headers

    def set(self, target: Target, key: str, value: str) -> None:
        pairs = self._pairs(target)
        pairs[:] = [(k, v) for k, v in pairs if not _same_key(target, k, key)]
        pairs.append((key, value))

    def add(self, target: Target, key: str, value: str) -> None:
        self._pairs(target).append((key, value))

    def query_values(self, key: str) -> list[str]:
        return [v for k, v in self.params if k == key]


@dataclass(frozen=True)
class RequestOption:
    """Una mutación sobre la petición saliente."""

    target: Target
    key: str
    value: str
    append: bool = False

    def apply(self, request: RequestSpec) -> None:
        if self.append:
            request.add(self.target, self.key, self.value)
        else:
            request.set(self.target, self.key, self.value)


def set_query_parameter(key: str, value: str) -> RequestOption:
    return RequestOption("query", key, value)


def add_query_parameter(key: str, value: str) -> RequestOption:
    return RequestOption("query", key, value, append=True)


def set_header(key: str, value: str) -> RequestOption:
    return RequestOption("header", key, value)


def add_header(key: str, value: str) -> RequestOption:
    return RequestOption("header", key, value, append=True)


def apply_options(request: RequestSpec, options: Iterable[RequestOption]) -> RequestSpec:
    """Aplica `options` en orden sobre `request` y lo devuelve."""

    for option in options:
        option.apply(request)
    return request
