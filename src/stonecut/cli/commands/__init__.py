"""CLI command implementations for the stonecut application.

This package contains subcommands for the stonecut CLI, including:
- validate: Validate a nesting job file
"""

from stonecut.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
