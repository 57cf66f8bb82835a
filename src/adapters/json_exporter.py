"""Exportación JSON de respuestas tipadas.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar una página sin depender de la tabla de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


def export_response_json(*, response: BaseModel | Sequence[BaseModel], output_path: Path) -> Path:
    """Exporta una respuesta (o varias páginas) a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(response, BaseModel):
        payload: object = response.model_dump(mode="json")
    else:
        payload = [page.model_dump(mode="json") for page in response]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
