"""
KPL Scanner Diagnostics
=======================

This module defines the lexical diagnostic taxonomy of the KPL scanner.
Each diagnostic has an ErrorCode carrying its message text, and is
represented at runtime by a ScannerError, which inherits from the base
KPLError for consistent error handling across the toolkit.

Diagnostic Codes
----------------
| Code                  | Anchored at            | Enabled       |
|-----------------------|------------------------|---------------|
| INVALID_SYMBOL        | the offending char     | always        |
| END_OF_COMMENT        | where input ended      | always        |
| IDENT_TOO_LONG        | identifier start       | always        |
| NUMBER_TOO_LONG       | number start           | always        |
| INVALID_CHAR_CONSTANT | opening quote          | always        |
| NUMBER_OVERFLOW       | number start           | check_overflow|
| STRING_TOO_LONG       | opening quote          | strict_strings|

Error Message Format
--------------------
    prog.kpl:3:7: error: Invalid symbol!
        x := y ! 2;
              ^
"""

from enum import Enum
from typing import Optional

from kpl.errors import KPLError, SourceLocation


# =============================================================================
# Diagnostic Codes
# =============================================================================

class ErrorCode(Enum):
    """
    Lexical diagnostic codes.

    The value of each member is the message reported to the user; the
    short messages are the ones printed by the classic KPL driver.
    """

    INVALID_SYMBOL = "Invalid symbol!"
    END_OF_COMMENT = "End of comment expected!"
    IDENT_TOO_LONG = "Identification too long!"
    NUMBER_TOO_LONG = "Value of integer number exceeds the range!"
    INVALID_CHAR_CONSTANT = "Invalid const char!"
    NUMBER_OVERFLOW = "Integer constant does not fit the target integer width!"
    STRING_TOO_LONG = "String constant too long!"

    @property
    def message(self) -> str:
        return self.value


# Hints shown under the caret; codes without an entry get none
_HINTS: dict[ErrorCode, str] = {
    ErrorCode.END_OF_COMMENT: "close the block comment with '*)'",
    ErrorCode.INVALID_CHAR_CONSTANT: (
        "a character constant holds exactly one character, e.g. 'a' or ''''"
    ),
}


# =============================================================================
# Scanner Exception
# =============================================================================

class ScannerError(KPLError):
    """
    A single lexical diagnostic.

    Scanner errors are normally collected by a DiagnosticSink and the
    scan continues; under a fatal policy the sink raises the first one.

    Attributes:
        code: The ErrorCode of this diagnostic
        location: Where in the source the diagnostic is anchored
        hint: A suggestion for fixing the error
        source_line: The source text of the line at the error location
    """

    def __init__(
        self,
        code: ErrorCode,
        location: SourceLocation,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.code = code
        self.message = code.message
        self.location = location
        self.source_line = source_line
        self.hint = hint if hint is not None else _HINTS.get(code)
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def short(self) -> str:
        """Format as 'line-column:message', the classic driver format."""
        return f"{self.location.line}-{self.location.column}:{self.message}"

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            prog.kpl:1:1: error: End of comment expected!
                (* never closed
                ^
            hint: close the block comment with '*)'
        """
        parts = [f"{self.location}: error: {self.message}"]

        if self.source_line is not None and self.location.column > 0:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)
