"""Exportación JSON del reporte de ejecución.

Por qué JSON:
- Permite comparar lo que imprimió cada variante sin depender de la consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import RunReport


def export_run_json(*, report: RunReport, output_path: Path) -> Path:
    """Exporta `RunReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
