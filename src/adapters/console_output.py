"""Sinks concretos de salida.

Por qué un módulo aparte:
- Las demostraciones solo conocen `core.interfaces.output.Output`.
- La consola real (Rich) y el grabador en memoria son intercambiables.
"""

from __future__ import annotations

from rich.console import Console

from core.interfaces.output import Output


class RichOutput(Output):
    """Imprime cada línea en una consola Rich, sin markup ni resaltado."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def emit(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)


class RecordingOutput(Output):
    """Guarda las líneas en memoria (tests, transcripciones)."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, message: str) -> None:
        self.lines.append(message)


class TeeOutput(Output):
    """Reenvía cada línea a varios sinks, en orden."""

    def __init__(self, *sinks: Output) -> None:
        self._sinks = sinks

    def emit(self, message: str) -> None:
        for sink in self._sinks:
            sink.emit(message)


def default_output() -> Output:
    return RichOutput()
