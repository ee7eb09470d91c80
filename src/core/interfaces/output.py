"""Contrato de salida por consola.

Por qué Protocol:
- Cada variante imprime su línea ilustrativa a través de un sink inyectable.
- Permite grabar lo impreso (tests, JSON) sin acoplar las demostraciones a Rich.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Output(Protocol):
    """Sink mínimo: una línea de texto por acción."""

    def emit(self, message: str) -> None:
        ...
