"""CLI entry point for itipcheck."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from itipcheck import __version__
from itipcheck.ics import (
    CalendarValidator,
    ICSError,
    default_validator,
    format_error_for_user,
    load_calendar,
    load_config,
)
from itipcheck.logging_config import configure_logging

app = typer.Typer(help="Structural and iTIP validation for iCalendar (.ics) files")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"itipcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    )
):
    """Validate iCalendar documents."""
    pass


def _validate_file(validator: CalendarValidator, path: Path) -> bool:
    try:
        calendar = load_calendar(path)
        result = validator.check(calendar)
    except ICSError as exc:
        typer.secho(f"{path}: {format_error_for_user(exc)}", fg=typer.colors.RED, err=True)
        return False

    for message in result.warnings:
        typer.secho(f"{path}: warning: {message}", fg=typer.colors.YELLOW)
    for message in result.errors:
        typer.secho(f"{path}: error: {message}", fg=typer.colors.RED, err=True)
    for failure in result.component_failures:
        for message in failure.errors:
            typer.secho(f"{path}: error: {failure.message}: {message}", fg=typer.colors.RED, err=True)
    if result.valid:
        typer.echo(f"✅ {path}: OK")
    return result.valid


@app.command("validate")
def validate(
    files: List[Path] = typer.Argument(..., help="Calendar files to validate."),
    relaxed: Optional[bool] = typer.Option(
        None,
        "--relaxed/--strict",
        help="Downgrade relaxable failures to warnings (defaults to ICS_RELAXED_VALIDATION).",
    ),
    rules: bool = typer.Option(
        True,
        "--rules/--no-rules",
        help="Apply the PRODID/VERSION/CALSCALE/METHOD cardinality rules.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
):
    """Validate one or more .ics files."""
    try:
        configure_logging(log_level, json_output=json_logs)
        config = load_config(relaxed)
    except (ValueError, ICSError) as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    validator = default_validator(config) if rules else CalendarValidator(config=config)
    outcomes = [_validate_file(validator, path) for path in files]
    if not all(outcomes):
        raise typer.Exit(code=1)


def cli():
    """Entry point for the CLI."""
    app()
