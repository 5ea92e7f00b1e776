"""
KPL Scanner
===========

Lexical analysis for KPL, a small Pascal-like teaching language.

Modules
-------
- **charcode**: character classification table
- **tokens**: token types, keyword table, Token and the token factory
- **reader**: SourceReader, the cursor over source text
- **diagnostics**: DiagnosticSink collecting lexical diagnostics
- **errors**: ErrorCode taxonomy and ScannerError
- **options**: ScannerOptions configuration
- **scanner**: the Scanner itself

Quick Start
-----------
    >>> from kpl.scanner import scan_source, format_token
    >>> tokens, sink = scan_source("BEGIN x := 1 END")
    >>> [format_token(t) for t in tokens[:2]]
    ['1-1:KW_BEGIN', '1-7:TK_IDENT(x)']
"""

from kpl.scanner.charcode import CHAR_CODES, CharCode, classify
from kpl.scanner.diagnostics import DiagnosticSink
from kpl.scanner.errors import ErrorCode, ScannerError
from kpl.scanner.options import ScannerOptions
from kpl.scanner.reader import SourceReader
from kpl.scanner.scanner import Scanner, scan_file, scan_source
from kpl.scanner.tokens import (
    KEYWORDS,
    MAX_IDENT_LEN,
    Token,
    TokenType,
    check_keyword,
    format_token,
    make_token,
)

__all__ = [
    # Scanner
    "Scanner",
    "scan_source",
    "scan_file",
    "ScannerOptions",
    # Cursor and diagnostics
    "SourceReader",
    "DiagnosticSink",
    "ErrorCode",
    "ScannerError",
    # Character classes
    "CharCode",
    "CHAR_CODES",
    "classify",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "MAX_IDENT_LEN",
    "check_keyword",
    "make_token",
    "format_token",
]
