"""Exportación JSON del reporte de pico.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite persistir el resultado sin depender del render HTML.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PeakReport


def export_report_json(*, report: PeakReport, output_path: Path) -> Path:
    """Exporta `PeakReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
