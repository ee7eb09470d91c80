"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.domain.principle import Variant
from core.services.demo_runner import list_demonstrations, run_variant

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


def _check_compliant(settings: AppSettings) -> list[tuple[str, bool, str]]:
    """Run every compliant variant silently; none of them may raise."""

    results: list[tuple[str, bool, str]] = []
    for demo in list_demonstrations():
        try:
            transcript = run_variant(demo, Variant.COMPLIANT, settings=settings)
        except Exception as exc:
            results.append((demo.title, False, f"{type(exc).__name__}: {exc}"))
            continue
        if transcript.status == "raised":
            results.append((demo.title, False, transcript.error or "raised"))
        else:
            results.append((demo.title, True, f"{len(transcript.lines)} lines"))
    return results


@app.command()
def run() -> None:
    """Run baseline diagnostics over the configuration and every compliant demo."""

    settings = AppSettings()
    console = Console(no_color=not settings.color)

    table = Table(title="SOLID Demos Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Demo user", "OK", f"{settings.demo_user_name} <{settings.demo_user_email}>")
    default_variant = settings.default_variant.value if settings.default_variant else "both"
    table.add_row("Default variant", "OK", default_variant)

    # Demonstrations
    failures = 0
    for title, ok, detail in _check_compliant(settings):
        table.add_row(f"{title} (compliant)", "OK" if ok else "FAIL", detail)
        failures += 0 if ok else 1

    console.print(table)

    if failures:
        console.print(f"\n[red]{failures} compliant demonstration(s) failed.[/red]")
        raise typer.Exit(code=1)
