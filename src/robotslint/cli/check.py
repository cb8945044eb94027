"""CLI command: robotslint check <file>... — validate robots.txt files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from robotslint.config import OUTPUT_FORMATS, RobotsLintConfig
from robotslint.validator import (
    Severity,
    ValidationResult,
    format_validation_results,
    validate_robots_txt,
)

logger = logging.getLogger(__name__)

console = Console(stderr=True)

_SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: table, or the configured format).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit non-zero on warnings as well as errors.",
)
@click.pass_context
def check(
    ctx: click.Context,
    files: tuple[str, ...],
    output_format: str | None,
    strict: bool,
) -> None:
    """Validate one or more robots.txt files ('-' reads stdin)."""
    config: RobotsLintConfig = ctx.obj["config"]
    output_format = output_format or config.output_format
    strict = strict or config.strict

    results: dict[str, ValidationResult] = {}
    for name in files:
        content = _read(name)
        logger.debug("Validating %s (%d chars)", name, len(content))
        results[name] = validate_robots_txt(content)

    if output_format == "json":
        payload = {name: result.to_dict() for name, result in results.items()}
        click.echo(json.dumps(payload, indent=2))
    elif output_format == "text":
        for name, result in results.items():
            if len(results) > 1:
                click.echo(f"==> {name} <==")
            click.echo(format_validation_results(result).rstrip("\n"))
    else:
        for name, result in results.items():
            _print_table(name, result)

    failed = [
        name
        for name, result in results.items()
        if not result.is_valid or (strict and result.warnings)
    ]
    if failed:
        sys.exit(1)


def _read(name: str) -> str:
    if name == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        data = Path(name).read_bytes()
    # Invalid bytes survive as surrogates so the encoding check can flag them
    return data.decode("utf-8-sig", errors="surrogateescape")


def _print_table(name: str, result: ValidationResult) -> None:
    if not result.findings:
        console.print(f"[green]{escape(name)}: no findings.[/green]")
        return

    table = Table(title=escape(name), show_lines=False)
    table.add_column("Severity", style="bold", width=10)
    table.add_column("Line", justify="right")
    table.add_column("Message")

    for finding in result.findings:
        color = _SEVERITY_COLORS.get(finding.severity, "white")
        table.add_row(
            f"[{color}]{finding.severity.value}[/{color}]",
            str(finding.line),
            escape(finding.message),
        )

    console.print(table)
    console.print(
        f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
