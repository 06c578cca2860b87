"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import RecordIssue
from core.domain.models import MAX_YEAR, MIN_YEAR, PeakReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) para salidas que otros procesos leen.
    """

    title = Text("Liveliest Year", style="bold cyan")
    subtitle = Text(f"Census {MIN_YEAR} - {MAX_YEAR} • Peak occupancy", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def report_lines(report: PeakReport) -> list[str]:
    """Líneas de texto plano del reporte, en el formato clásico de la herramienta."""

    lines = [
        f"Most number of people alive: {report.max_count}",
        "Year(s) with most people alive:",
    ]
    for entry in report.entries:
        lines.append(f"\t{entry.year} - {', '.join(entry.names)}")
    return lines


def print_report(console: Console, report: PeakReport) -> None:
    for line in report_lines(report):
        # markup=False: los nombres pueden contener corchetes.
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def build_peak_table(report: PeakReport) -> Table:
    """Tabla Rich con los años de ocupación máxima."""

    table = Table(title=f"Most number of people alive: {report.max_count}")
    table.add_column("Year", style="cyan", no_wrap=True)
    table.add_column("Alive", style="green", justify="right")
    table.add_column("Names", style="white")
    for entry in report.entries:
        table.add_row(str(entry.year), str(entry.count), Text(", ".join(entry.names)))
    return table


def build_issues_panel(issues: list[RecordIssue]) -> Panel:
    """Panel con los registros rechazados."""

    body = Text()
    for issue in issues:
        body.append(f"- {issue.message}\n")
    title = Text(f"Invalid input ({len(issues)} issue(s))", style="bold red")
    return Panel(body, title=title, border_style="red")
