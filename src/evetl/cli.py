"""Command line interface for the EV dataset ETL."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from evetl.build.pipeline import Pipeline
from evetl.config import DEFAULT_FORMATS, ETL_VERSION, AppConfig, parse_formats
from evetl.errors import ScanError
from evetl.ingestion.scanner import scan as scan_dataset
from evetl.models import BatchResult, ErrorReporting

console = Console()
app = typer.Typer(help="EV ETL - compile layered vehicle JSON into validated records")

SCAN_FAILED_EXIT_CODE = 2


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _reporting(minimal_errors: bool) -> ErrorReporting:
    return ErrorReporting.MINIMAL if minimal_errors else ErrorReporting.DETAILED


def _run(pipeline: Pipeline) -> BatchResult:
    try:
        return pipeline.run()
    except ScanError as exc:
        console.print(f"[red]Dataset scan failed:[/red] {exc}")
        raise typer.Exit(code=SCAN_FAILED_EXIT_CODE) from exc


def _print_summary(result: BatchResult) -> None:
    console.print(
        f"Files: {result.files_scanned}, candidates: {result.candidates}, "
        f"decoded: {result.decoded}, valid: {len(result.records)}, "
        f"errors: {len(result.errors)}"
    )


def _print_errors(result: BatchResult) -> None:
    if not result.errors:
        return
    table = Table(show_header=True, header_style="bold red")
    table.add_column("Stage")
    table.add_column("Kind")
    table.add_column("Context")
    table.add_column("Message")
    for error in result.errors:
        table.add_row(error.stage, error.kind, error.context, error.message)
    console.print(table)


@app.command()
def validate(
    input_dir: Path = typer.Argument(..., help="Dataset root directory", resolve_path=True),
    workers: int = typer.Option(AppConfig().scan_workers, help="Parallel file readers"),
    minimal_errors: bool = typer.Option(
        False, "--minimal-errors", help="Report only one error per year missing its base file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Assemble and validate the dataset without writing outputs."""
    _setup_logging(verbose)
    config = AppConfig(
        input_dir=input_dir,
        scan_workers=workers,
        reporting=_reporting(minimal_errors),
    )

    result = _run(Pipeline(config))
    _print_summary(result)
    _print_errors(result)

    if result.errors:
        console.print(f"[red]{len(result.errors)} problems found.[/red]")
        raise typer.Exit(code=1)
    console.print("[green]Dataset is valid.[/green]")


@app.command()
def build(
    input_dir: Path = typer.Argument(..., help="Dataset root directory", resolve_path=True),
    output: Path = typer.Option(AppConfig().output_dir, "--output", "-o", help="Output directory"),
    formats: str = typer.Option(
        ",".join(DEFAULT_FORMATS), "--formats", "-f", help="Comma separated: json, sqlite, csv"
    ),
    workers: int = typer.Option(AppConfig().scan_workers, help="Parallel file readers"),
    strict: bool = typer.Option(False, "--strict", help="Exit non-zero if any record failed"),
    minimal_errors: bool = typer.Option(
        False, "--minimal-errors", help="Report only one error per year missing its base file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build output artifacts from the valid records."""
    _setup_logging(verbose)
    config = AppConfig(
        input_dir=input_dir,
        output_dir=output,
        formats=parse_formats(formats),
        scan_workers=workers,
        reporting=_reporting(minimal_errors),
        fail_on_errors=strict,
    )
    output_dir = config.resolve_output_dir(Path.cwd())

    console.print(f"EV ETL v{ETL_VERSION}: building into [bold]{output_dir}[/bold]...")
    pipeline = Pipeline(config)
    result = _run(pipeline)
    written = pipeline.write_outputs(result, output_dir)

    _print_summary(result)
    for name, path in written.items():
        console.print(f"Generated {name}: {path}")
    _print_errors(result)

    if result.errors and config.fail_on_errors:
        raise typer.Exit(code=1)


@app.command()
def scan(
    input_dir: Path = typer.Argument(..., help="Dataset root directory", resolve_path=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the dataset files and the layer each one contributes."""
    _setup_logging(verbose)
    try:
        files = scan_dataset(input_dir)
    except ScanError as exc:
        console.print(f"[red]Dataset scan failed:[/red] {exc}")
        raise typer.Exit(code=SCAN_FAILED_EXIT_CODE) from exc

    if not files:
        console.print("[yellow]No dataset files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Path")
    table.add_column("Make")
    table.add_column("Model")
    table.add_column("Year")
    table.add_column("Role")
    for item in files:
        year: Optional[int] = item.year
        table.add_row(
            item.relative_path,
            item.make_slug,
            item.model_slug,
            "" if year is None else str(year),
            item.role.value,
        )
    console.print(table)
