"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across all CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    SCAN_ERROR = 1       # Scan aborted by a fatal diagnostic
    INVALID_ARGS = 2     # Invalid arguments or unreadable input file
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for all CLI tools.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from kpl.errors import KPLError, SourceIOError
    from kpl.scanner.errors import ScannerError

    if isinstance(error, ScannerError):
        # The diagnostic itself has already been echoed as it was reported
        click.echo("Scanning aborted.", err=True)
        if verbose:
            click.echo(str(error), err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    elif isinstance(error, SourceIOError):
        click.echo("Can't read input file!", err=True)
        if verbose:
            click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, KPLError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
