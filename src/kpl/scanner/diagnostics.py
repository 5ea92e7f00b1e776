"""
Diagnostic Sink
===============

The scanner reports every lexical problem through a DiagnosticSink and
keeps going. The sink collects the diagnostics for batch reporting, logs
each one, and applies the fatal/non-fatal policy.

Example:
    sink = DiagnosticSink("prog.kpl")
    scanner = Scanner(reader, sink=sink)
    tokens = list(scanner.tokenize())

    if sink.has_errors():
        print(sink.report_text())
"""

import logging
from typing import Callable, List, Optional

from kpl.errors import SourceLocation
from kpl.scanner.errors import ErrorCode, ScannerError

logger = logging.getLogger(__name__)


class DiagnosticSink:
    """
    Collects scanner diagnostics.

    Attributes:
        filename: Source name used in diagnostic locations
        fatal: If True, report() raises the diagnostic instead of
               returning, which aborts the scan
        on_report: Optional callback invoked with each diagnostic as it
                   is reported, before the fatal policy applies
        errors: Diagnostics collected so far, in report order
    """

    def __init__(
        self,
        filename: str = "<input>",
        fatal: bool = False,
        on_report: Optional[Callable[[ScannerError], None]] = None,
    ):
        self.filename = filename
        self.fatal = fatal
        self.on_report = on_report
        self.errors: List[ScannerError] = []

    def report(
        self,
        code: ErrorCode,
        line: int,
        column: int,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> ScannerError:
        """
        Record a diagnostic at the given position.

        Returns:
            The recorded ScannerError

        Raises:
            ScannerError: If the sink is fatal
        """
        error = ScannerError(
            code,
            SourceLocation(self.filename, line, column),
            source_line=source_line,
            hint=hint,
        )
        self.errors.append(error)
        logger.debug("%s: %s", error.location, error.message)

        if self.on_report is not None:
            self.on_report(error)

        if self.fatal:
            raise error
        return error

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been reported."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of reported diagnostics."""
        return len(self.errors)

    def codes(self) -> List[ErrorCode]:
        """Return the codes of the reported diagnostics, in order."""
        return [error.code for error in self.errors]

    def report_text(self) -> str:
        """Format all diagnostics for display."""
        lines = []
        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")
        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all reported diagnostics."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise the first diagnostic if any were reported."""
        if self.errors:
            raise self.errors[0]
