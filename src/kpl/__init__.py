"""
KPL Toolkit - Front End for the KPL Teaching Language
=====================================================

KPL is a small Pascal-like procedural language (PROGRAM, CONST, TYPE,
VAR, FUNCTION, PROCEDURE, BEGIN ... END). This package provides its
lexical analyzer and the kplscan command-line tool.

Quick Start
-----------
Scan a string:
    >>> from kpl import scan_source
    >>> tokens, sink = scan_source("PROGRAM demo;")
    >>> [t.type.name for t in tokens]
    ['KW_PROGRAM', 'TK_IDENT', 'SB_SEMICOLON', 'TK_EOF']

Or use the command-line tool:
    $ kplscan demo.kpl
"""

__version__ = "1.0.0"

from kpl.errors import KPLError, SourceIOError, SourceLocation
from kpl.scanner import (
    DiagnosticSink,
    ErrorCode,
    Scanner,
    ScannerError,
    ScannerOptions,
    SourceReader,
    Token,
    TokenType,
    format_token,
    scan_file,
    scan_source,
)

__all__ = [
    "__version__",
    # Errors
    "KPLError",
    "SourceIOError",
    "SourceLocation",
    "ScannerError",
    "ErrorCode",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "SourceReader",
    "DiagnosticSink",
    "Token",
    "TokenType",
    "format_token",
    "scan_source",
    "scan_file",
]
