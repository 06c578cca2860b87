"""CLI principal (typer).

Por qué aquí:
- La CLI solo traduce argumentos y resultados; el cálculo vive en
  `core.services.census_pipeline` y la I/O en `adapters`.
- Cada tipo de fallo tiene su propio código de salida.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from adapters.json_exporter import export_report_json
from adapters.people_generator import generate_people, write_people
from adapters.people_loader import load_people
from adapters.report_exporter import export_report_html
from cli.ui_components import build_issues_panel, build_peak_table, print_banner, print_report
from core.config import AppSettings
from core.domain.errors import MalformedSourceError, SourceUnavailableError
from core.domain.policy import ValidationPolicy
from core.logging_setup import setup_logging
from core.services.census_pipeline import EmptyInput, ValidationFailed, analyze as run_analysis

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Find the year(s) with the most people alive.",
)

_console = Console()
_err_console = Console(stderr=True)


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    SOURCE_UNAVAILABLE = 3
    MALFORMED_SOURCE = 4
    EMPTY_INPUT = 5
    VALIDATION_FAILED = 6


def _fail(message: str, code: ExitCode) -> typer.Exit:
    _err_console.print(Text.assemble(("Error: ", "red"), message), soft_wrap=True)
    return typer.Exit(code=int(code))


def _default_report_path(settings: AppSettings, source: str, suffix: str) -> Path:
    stem = source.rstrip("/").rsplit("/", 1)[-1].rsplit(".", 1)[0]
    cleaned = "".join(ch if ch.isalnum() or ch in ("-", "_") else "-" for ch in stem).strip("-_")
    return settings.reports_dir / f"{cleaned or 'people'}-peak{suffix}"


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for stderr diagnostics (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    settings = AppSettings()
    setup_logging(log_level or settings.log_level)


@app.command()
def analyze(
    source: str = typer.Argument(..., help="Path or http(s) URL of a JSON list of people."),
    policy: Optional[ValidationPolicy] = typer.Option(
        None,
        "--policy",
        help="fail_fast stops at the first invalid record; collect_all reports every one.",
    ),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Also export the report as JSON."),
    html_out: Optional[Path] = typer.Option(None, "--html-out", help="Also export an HTML report."),
    export: bool = typer.Option(
        False,
        "--export",
        help="Export JSON and HTML reports into the configured reports directory.",
    ),
    table: bool = typer.Option(False, "--table", help="Render the result as a table."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Analyze a people list and print the liveliest year(s)."""

    settings = AppSettings()
    effective_policy = policy or settings.validation_policy

    try:
        records = load_people(source, settings)
    except SourceUnavailableError as exc:
        raise _fail(str(exc), ExitCode.SOURCE_UNAVAILABLE) from exc
    except MalformedSourceError as exc:
        raise _fail(str(exc), ExitCode.MALFORMED_SOURCE) from exc

    outcome = run_analysis(records, policy=effective_policy)

    if isinstance(outcome, EmptyInput):
        raise _fail("The input JSON was empty.", ExitCode.EMPTY_INPUT)
    if isinstance(outcome, ValidationFailed):
        _err_console.print(build_issues_panel(list(outcome.issues)))
        raise typer.Exit(code=int(ExitCode.VALIDATION_FAILED))

    if not no_banner:
        print_banner(_console)

    if table:
        _console.print(build_peak_table(outcome.report))
    else:
        print_report(_console, outcome.report)

    if export:
        json_out = json_out or _default_report_path(settings, source, ".json")
        html_out = html_out or _default_report_path(settings, source, ".html")

    if json_out is not None:
        path = export_report_json(report=outcome.report, output_path=json_out)
        _console.print(f"[green]JSON report:[/green] {escape(str(path))}", soft_wrap=True)
    if html_out is not None:
        path = export_report_html(census=outcome.census, report=outcome.report, output_path=html_out)
        _console.print(f"[green]HTML report:[/green] {escape(str(path))}", soft_wrap=True)


@app.command()
def generate(
    count: int = typer.Option(..., "--count", "-n", help="Number of people to generate (1 - 9001)."),
    output: Path = typer.Option(..., "--output", "-o", help="Destination JSON file."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible datasets."),
) -> None:
    """Write a random people list suitable for `analyze`."""

    try:
        people = generate_people(count, seed=seed)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--count") from exc

    path = write_people(people=people, output_path=output)
    logger.info("Generated %d people into %s", len(people), path)
    _console.print(f"Successfully wrote list of random people to: {path.resolve()}", soft_wrap=True)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
