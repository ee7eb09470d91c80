"""CLI principal (Typer).

Por qué Typer:
- Subcomandos tipados (`list`, `run`, `doctor`) sin parseo manual.
- La lógica de ejecución vive en `core.services.demo_runner`; aquí solo se
  presenta.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.console_output import RichOutput
from adapters.json_exporter import export_run_json
from cli import doctor
from cli.ui_components import (
    build_principles_table,
    build_section_rule,
    build_summary_table,
    build_violation_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.principle import Principle, Variant
from core.services.demo_runner import RunHooks, RunRequest, list_demonstrations, run_demonstrations

app = typer.Typer(
    no_args_is_help=True,
    help="Violating and compliant examples of the five SOLID principles.",
)
app.add_typer(doctor.app, name="doctor")

_VARIANT_CHOICES = ("violation", "compliant", "both")


def _parse_principles(values: list[str] | None) -> list[Principle]:
    principles: list[Principle] = []
    for value in values or []:
        try:
            principles.append(Principle.from_alias(value))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="PRINCIPLES") from exc
    return principles


def _parse_variant(value: str | None) -> list[Variant]:
    if value is None:
        return []
    key = value.strip().lower()
    if key not in _VARIANT_CHOICES:
        raise typer.BadParameter(
            f"expected one of {', '.join(_VARIANT_CHOICES)}", param_hint="--variant"
        )
    if key == "both":
        return list(Variant)
    return [Variant(key)]


def _resolve_json_path(raw: str, settings: AppSettings) -> Path:
    # A bare filename goes to `reports_dir`; anything with a separator is used as given.
    if "/" in raw or os.sep in raw:
        return Path(raw)
    return settings.reports_dir / raw


@app.command(name="list")
def list_principles() -> None:
    """List the available demonstrations."""

    settings = AppSettings()
    console = Console(no_color=not settings.color)
    console.print(build_principles_table(list_demonstrations()))


@app.command(name="run")
def run_cmd(
    principles: Optional[List[str]] = typer.Argument(
        None,
        help="Principles to run (srp, ocp, lsp, isp, dip or full names). Default: all.",
        show_default=False,
    ),
    variant: Optional[str] = typer.Option(
        None,
        "--variant",
        help="violation, compliant or both.",
    ),
    json_path: Optional[str] = typer.Option(
        None,
        "--json",
        help="Export the run report as JSON.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
) -> None:
    """Run demonstrations and print what each variant does."""

    settings = AppSettings()
    console = Console(no_color=not settings.color)

    request = RunRequest(
        principles=_parse_principles(principles),
        variants=_parse_variant(variant),
    )

    if settings.show_banner and not no_banner:
        print_banner(console)

    hooks = RunHooks(
        section_start=lambda demo, v: console.print(build_section_rule(demo, v)),
        violation=lambda transcript: console.print(build_violation_panel(transcript)),
    )
    result = run_demonstrations(
        settings=settings,
        request=request,
        output=RichOutput(console),
        hooks=hooks,
    )

    console.print(build_summary_table(result.report))

    if json_path is not None:
        out = export_run_json(
            report=result.report,
            output_path=_resolve_json_path(json_path, settings),
        )
        console.print(f"[green]Report saved to:[/green] {out}")


def run() -> None:
    app()
