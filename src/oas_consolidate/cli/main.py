"""CLI entry point for oas-consolidate.

Invoked as::

    oas-consolidate [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m oas_consolidate.cli.main

Commands
--------
consolidate  Move titled inline schemas into components.schemas
check        Exit non-zero if a document is not yet consolidated
enhancers    List registered document enhancers
version      Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from oas_consolidate.config.options import ConsolidationOptions
    from oas_consolidate.walker.report import ConsolidationReport

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route package logging through Rich on stderr."""
    logger = logging.getLogger("oas_consolidate")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    if not verbose:
        return
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _load_or_exit(path: str) -> dict[str, Any]:
    """Load a document, printing the error and exiting on failure."""
    from oas_consolidate.core.errors import DocumentLoadError
    from oas_consolidate.document import load_document

    try:
        return load_document(path)
    except DocumentLoadError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _options_or_exit(config: str | None) -> "ConsolidationOptions":
    """Load options from ``config``, or return the defaults."""
    from oas_consolidate.config import ConfigurationError, load_options
    from oas_consolidate.config.options import DEFAULT_OPTIONS

    if config is None:
        return DEFAULT_OPTIONS
    try:
        return load_options(config)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)


def _consolidate_or_exit(
    document: dict[str, Any], options: "ConsolidationOptions", path: str
) -> tuple[dict[str, Any], "ConsolidationReport"]:
    from oas_consolidate.core.errors import ConsolidationError
    from oas_consolidate.enhancers import consolidate_document

    try:
        return consolidate_document(document, options)
    except ConsolidationError as exc:
        err_console.print(f"[red]Consolidation error[/red] in {path}: {exc}")
        sys.exit(1)


def _print_report(report: "ConsolidationReport") -> None:
    from oas_consolidate.walker.report import ExtractionAction

    if report.has_changes:
        table = Table(title="Extracted schemas", show_lines=False)
        table.add_column("Location")
        table.add_column("Title")
        table.add_column("Schema", style="bold")
        table.add_column("Action")
        for record in report.records:
            registered = record.action is ExtractionAction.REGISTERED
            action = "[green]new[/green]" if registered else "[blue]reused[/blue]"
            if record.renamed and registered:
                action += " [yellow](renamed)[/yellow]"
            table.add_row(
                escape(record.pointer or "/"), escape(record.title), escape(record.name), action
            )
        err_console.print(table)
    err_console.print(f"[bold]Summary:[/bold] {report.summary()}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="oas-consolidate")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each extraction to stderr")
def cli(verbose: bool) -> None:
    """Consolidate inline OpenAPI schemas into shared components."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from oas_consolidate import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]oas-consolidate[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# enhancers command
# ---------------------------------------------------------------------------


@cli.command(name="enhancers")
def enhancers_command() -> None:
    """List all registered document enhancers, including entry-points."""
    from oas_consolidate.enhancers import enhancer_registry

    enhancer_registry.load_entrypoints()
    console.print("[bold]Registered enhancers:[/bold]")
    for name in enhancer_registry.list_enhancers():
        cls = enhancer_registry.get(name)
        console.print(f"  {name}  [dim]{cls.__module__}.{cls.__qualname__}[/dim]")


# ---------------------------------------------------------------------------
# consolidate command
# ---------------------------------------------------------------------------


@cli.command(name="consolidate")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default=None,
    help="Output format (defaults to the input file's format)",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.option("--config", "config", default=None, help="YAML file with consolidation options")
@click.option("--report", is_flag=True, default=False, help="Print a table of extracted schemas to stderr")
def consolidate_command(
    file: str,
    output_format: str | None,
    output: str | None,
    config: str | None,
    report: bool,
) -> None:
    """Move titled inline schemas into components.schemas.

    FILE is the path to an OpenAPI document in JSON or YAML.
    """
    from oas_consolidate.document import dump_document, format_for_path

    document = _load_or_exit(file)
    options = _options_or_exit(config)
    updated, extraction_report = _consolidate_or_exit(document, options, file)

    fmt = (output_format or format_for_path(output or file)).lower()
    text = dump_document(updated, fmt)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        err_console.print(f"[green]Consolidated document written to[/green] {output}")
    else:
        click.echo(text, nl=False)

    if report:
        _print_report(extraction_report)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@click.option("--config", "config", default=None, help="YAML file with consolidation options")
def check_command(file: str, config: str | None) -> None:
    """Check whether a document is already consolidated.

    Exits with status 1 when consolidation would change FILE.
    """
    document = _load_or_exit(file)
    options = _options_or_exit(config)
    updated, extraction_report = _consolidate_or_exit(document, options, file)

    if updated == document:
        console.print(f"[green]OK[/green] {file}: already consolidated")
        sys.exit(0)

    console.print(f"[yellow]NEEDS CONSOLIDATION[/yellow] {file}")
    for record in extraction_report.records:
        console.print(f"  {escape(str(record))}")
    sys.exit(1)


if __name__ == "__main__":
    cli()
