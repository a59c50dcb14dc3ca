"""CLI command implementations for the cutplan application.

This package contains subcommands for the cutplan CLI, including:
- validate: Validate a project file
- price: Look up lumber prices
"""

from cutplan.cli.commands.price import price_command
from cutplan.cli.commands.validate import (
    display_load_error,
    load_project_or_exit,
    validate_command,
)

__all__ = [
    "display_load_error",
    "load_project_or_exit",
    "price_command",
    "validate_command",
]
