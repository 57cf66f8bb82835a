"""Errores del cliente Helix.

Taxonomía:
- `TransportError`: la petición no se pudo enviar, la conexión falló, se
  agotó el plazo o el transporte clasificó el status HTTP como error.
- `DecodeError`: el cuerpo no es JSON válido o no tiene forma de envelope.

Configurar una llamada nunca falla; todo error sale de `do()`.
"""

from __future__ import annotations

from typing import Any


class HelixError(Exception):
    """Base de todos los errores del cliente."""


class TransportError(HelixError):
    """Fallo de red, timeout o status HTTP no exitoso."""


class HelixAPIError(TransportError):
    """Respuesta no-2xx de la API.

    Helix devuelve errores con forma `{"error", "status", "message"}`; si el
    cuerpo no la respeta, `message` queda con el texto crudo.
    """

    def __init__(self, status_code: int, message: str, *, error: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.error = error

    @classmethod
    def from_payload(cls, status_code: int, payload: Any, raw: str = "") -> "HelixAPIError":
        if isinstance(payload, dict):
            message = payload.get("message")
            error = payload.get("error")
            return cls(
                status_code,
                str(message) if message else raw,
                error=str(error) if error else None,
            )
        return cls(status_code, raw)


class DecodeError(HelixError):
    """El cuerpo de la respuesta no coincide con el envelope esperado."""
