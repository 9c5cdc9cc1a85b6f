"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the cheatcheck tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from cheat_checker.errors import CheatCheckError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    CHECK_FAILED = 1     # At least one cheat has errors (or warnings in strict mode)
    INVALID_INPUT = 2    # Unreadable document, catalog or configuration
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for CLI commands.

    Formats the error message, optionally prints a traceback for internal
    errors in verbose mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, CheatCheckError):
        # Bad document, catalog or configuration
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_INPUT)

    elif isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_INPUT)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
