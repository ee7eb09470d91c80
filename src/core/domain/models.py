"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field).
- Serialización directa del reporte de ejecución a JSON.

Nota:
- `User` es el único valor de negocio; el resto describe *qué* imprimió una
  demostración, no *cómo* se muestra.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.principle import Principle, Variant


class User(BaseModel):
    """Usuario de ejemplo para la demostración de responsabilidad única.

    Inmutable: se crea por llamada y nunca se guarda fuera de ella.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Nombre visible del usuario.",
    )
    email: str = Field(
        ...,
        min_length=3,
        max_length=320,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Dirección de correo para la bienvenida.",
    )


class DemoTranscript(BaseModel):
    """Lo que imprimió una variante de una demostración."""

    principle: Principle = Field(..., description="Principio demostrado.")
    variant: Variant = Field(..., description="Mitad ejecutada (violación o refactor).")
    lines: list[str] = Field(
        default_factory=list,
        description="Líneas emitidas, en orden.",
    )
    status: Literal["ok", "raised"] = Field(
        default="ok",
        description="`raised` si la variante lanzó el error de dominio.",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje del error de dominio (si aplica).",
    )


class RunReport(BaseModel):
    """Agregado exportable de una ejecución completa."""

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación del reporte (UTC).",
    )
    transcripts: list[DemoTranscript] = Field(
        default_factory=list,
        description="Transcripciones en el orden en que se ejecutaron.",
    )

    @property
    def violations(self) -> list[DemoTranscript]:
        return [t for t in self.transcripts if t.status == "raised"]
