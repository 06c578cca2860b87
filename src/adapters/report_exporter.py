"""Exportación de reportes HTML.

Por qué está en adapters:
- HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce `Census` y `PeakReport`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import MAX_YEAR, MIN_YEAR, Census, PeakReport


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, census: Census, report: PeakReport) -> str:
    """Renderiza un HTML autocontenido con el pico y la ocupación por año."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    peak_years = set(report.liveliest_years)

    # Barra relativa al máximo; años sin ocupación quedan fuera del censo.
    rows = [
        {
            "year": year,
            "count": len(names),
            "width": round(100 * len(names) / report.max_count) if report.max_count else 0,
            "is_peak": year in peak_years,
        }
        for year, names in census.items()
    ]

    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        rows=rows,
        generated_at=generated_at,
        min_year=MIN_YEAR,
        max_year=MAX_YEAR,
    )


def export_report_html(*, census: Census, report: PeakReport, output_path: Path) -> Path:
    """Exporta el reporte como HTML."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(census=census, report=report)
    output_path.write_text(html, encoding="utf-8")
    return output_path
