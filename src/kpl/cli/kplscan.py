"""
kplscan - KPL Scanner Command-Line Interface
============================================

Tokenizes a KPL source file and prints one line per token in the form
line-column:KIND(payload). Diagnostics are printed to stderr in the form
line-column:message as they are found.

Usage Examples
--------------
Basic scan:
    $ kplscan example.kpl
    1-1:KW_PROGRAM
    1-9:TK_IDENT(example)
    1-16:SB_SEMICOLON

Stop at the first lexical error:
    $ kplscan --fatal broken.kpl

Verbose mode (debug logging):
    $ kplscan -v example.kpl
"""

import logging
from pathlib import Path

import click

from kpl import __version__
from kpl.cli.errors import handle_cli_exception
from kpl.scanner import (
    MAX_IDENT_LEN,
    DiagnosticSink,
    Scanner,
    ScannerError,
    ScannerOptions,
    SourceReader,
    TokenType,
    format_token,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def echo_diagnostic(error: ScannerError) -> None:
    """Print a diagnostic in the classic 'line-column:message' form."""
    click.echo(error.short(), err=True)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--max-ident-len",
    type=click.IntRange(min=1),
    default=MAX_IDENT_LEN,
    show_default=True,
    help="Longest identifier, number or string kept",
)
@click.option(
    "--int-bits",
    type=click.IntRange(min=2),
    default=32,
    show_default=True,
    help="Width of the target signed integer",
)
@click.option(
    "--check-overflow",
    is_flag=True,
    help="Report integer constants that do not fit --int-bits",
)
@click.option(
    "--strict-strings",
    is_flag=True,
    help="Report string constants longer than --max-ident-len",
)
@click.option(
    "--fatal",
    is_flag=True,
    help="Stop at the first lexical error (exit code 1)",
)
@click.option(
    "--summary",
    is_flag=True,
    help="Print the number of diagnostics when done",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="kplscan")
def main(
    input_file: Path,
    max_ident_len: int,
    int_bits: int,
    check_overflow: bool,
    strict_strings: bool,
    fatal: bool,
    summary: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a KPL source file.

    INPUT_FILE is the KPL source file to scan.

    \b
    Examples:
        kplscan example.kpl              # Print all tokens
        kplscan --fatal example.kpl      # Stop at the first error
        kplscan --summary example.kpl    # Also count diagnostics
    """
    setup_logging(verbose)

    options = ScannerOptions(
        max_ident_len=max_ident_len,
        int_bits=int_bits,
        check_overflow=check_overflow,
        strict_strings=strict_strings,
        fatal_errors=fatal,
    )

    try:
        with SourceReader.open(input_file, encoding=options.encoding) as reader:
            sink = DiagnosticSink(
                reader.filename,
                fatal=options.fatal_errors,
                on_report=echo_diagnostic,
            )
            scanner = Scanner(reader, sink=sink, options=options)

            for token in scanner.tokenize():
                if token.type == TokenType.TK_EOF:
                    break
                click.echo(format_token(token))

    except Exception as e:
        handle_cli_exception(e, verbose)

    logger.debug("Scanned %s: %d diagnostics", input_file, sink.error_count())
    if summary:
        count = sink.error_count()
        error_word = "error" if count == 1 else "errors"
        click.echo(f"{count} {error_word}", err=True)


if __name__ == "__main__":
    main()
