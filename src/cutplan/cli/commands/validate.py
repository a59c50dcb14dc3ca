"""Validate command for checking project files.

This module provides the `validate` command that checks a JSON project
file for syntax and schema errors, and the shared loader used by the
other commands.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutplan.application.config import (
    ConfigError,
    ProjectConfiguration,
    load_config,
)


def display_load_error(error: ConfigError) -> None:
    """Display a project loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "project"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_project_or_exit(project_file: Path) -> ProjectConfiguration:
    """Load a project file, exiting with code 1 on any loading error."""
    try:
        return load_config(project_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def validate_command(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a cut planning project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema errors (missing fields, non-positive dimensions, unknown
      thickness notation, etc.)

    Exit codes:
        0 - Project is valid
        1 - Project has errors

    Example:
        cutplan validate bookshelf.json
    """
    typer.echo(f"Validating {project_file}...")

    try:
        config = load_config(project_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed: {len(config.boards)} board(s), "
        f"{len(config.pieces)} piece(s), {len(config.templates)} template(s)."
    )
