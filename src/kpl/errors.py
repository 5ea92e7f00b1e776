"""
KPL Toolkit Error Hierarchy
===========================

This module defines the root of the exception hierarchy for the KPL
toolkit. All exceptions inherit from KPLError, allowing callers to catch
every toolkit error with a single except clause.

Exception Hierarchy
-------------------
KPLError (base)
├── SourceIOError - source file cannot be opened or read
└── ScannerError - lexical diagnostic (see kpl.scanner.errors)

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class KPLError(Exception):
    """
    Base exception for all KPL toolkit errors.

        try:
            tokens, sink = scan_source(text)
        except KPLError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Source Input Errors
# =============================================================================

class SourceIOError(KPLError):
    """
    The source file cannot be opened or read.

    This is the only fatal condition of the scanner: it is raised before
    any token is produced and is kept distinct from per-token diagnostics.

    Attributes:
        path: The path that could not be read
        reason: The underlying operating system message
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot read input file '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
