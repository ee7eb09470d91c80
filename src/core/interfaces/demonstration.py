"""Contrato de una demostración (par violación/refactor).

Reglas de diseño:
- Una implementación por principio, en su propio módulo.
- Ambas mitades son síncronas y deterministas; solo imprimen vía `Output`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.principle import Principle
from core.interfaces.output import Output

if TYPE_CHECKING:
    from core.config import AppSettings


@runtime_checkable
class Demonstration(Protocol):
    principle: Principle
    title: str
    summary: str

    def run_violation(self, output: Output, settings: "AppSettings") -> None:
        """Ejecuta el ejemplo que viola el principio."""

        ...

    def run_compliant(self, output: Output, settings: "AppSettings") -> None:
        """Ejecuta el refactor que respeta el principio."""

        ...
