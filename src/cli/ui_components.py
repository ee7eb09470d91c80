"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `list`, `run` y `doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.domain.models import DemoTranscript, RunReport
from core.domain.principle import Variant
from core.interfaces.demonstration import Demonstration


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("SOLID", style="bold cyan")
    subtitle = Text("Violation • Refactor • Five principles", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_principles_table(demos: Iterable[Demonstration]) -> Table:
    table = Table(title="SOLID Principles")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Principle", style="white")
    table.add_column("Refactor", style="dim")
    for demo in demos:
        table.add_row(demo.principle.value, demo.title, demo.summary)
    return table


def build_section_rule(demo: Demonstration, variant: Variant) -> Rule:
    style = "red" if variant is Variant.VIOLATION else "green"
    return Rule(Text(f"{demo.title} · {variant.value}", style=f"bold {style}"), style=style)


def build_violation_panel(transcript: DemoTranscript) -> Panel:
    """Panel para el error de dominio que la variante violadora lanzó."""

    body = Text()
    body.append(f"{transcript.error}\n", style="bold")
    body.append("This is the runtime failure the compliant design removes.", style="dim")
    return Panel(body, title=Text("Violation raised", style="bold yellow"), border_style="yellow")


def build_summary_table(report: RunReport) -> Table:
    table = Table(title="Run summary")
    table.add_column("Principle", style="cyan", no_wrap=True)
    table.add_column("Variant", style="white")
    table.add_column("Lines", style="magenta", justify="right")
    table.add_column("Status", style="green")
    for t in report.transcripts:
        status = "[yellow]raised[/yellow]" if t.status == "raised" else "ok"
        table.add_row(t.principle.label(), t.variant.value, str(len(t.lines)), status)
    return table
