# =============================================================================
# test_diagnostics.py - Diagnostic Sink and Error Hierarchy Tests
# =============================================================================

import pytest
from kpl.errors import KPLError, SourceIOError, SourceLocation
from kpl.scanner.diagnostics import DiagnosticSink
from kpl.scanner.errors import ErrorCode, ScannerError
from kpl.scanner.options import ScannerOptions


class TestScannerError:
    """Test diagnostic formatting."""

    def test_is_kpl_error(self):
        error = ScannerError(ErrorCode.INVALID_SYMBOL, SourceLocation("a.kpl", 1, 1))
        assert isinstance(error, KPLError)

    def test_message_with_source_line(self):
        error = ScannerError(
            ErrorCode.END_OF_COMMENT,
            SourceLocation("a.kpl", 2, 5),
            source_line="x = (* open",
        )
        lines = str(error).split("\n")
        assert lines[0] == "a.kpl:2:5: error: End of comment expected!"
        assert lines[1] == "    x = (* open"
        assert lines[2] == "        ^"
        assert lines[3] == "hint: close the block comment with '*)'"

    def test_message_without_source_line(self):
        error = ScannerError(ErrorCode.IDENT_TOO_LONG, SourceLocation("a.kpl", 1, 3))
        assert str(error) == "a.kpl:1:3: error: Identification too long!"

    def test_short_form(self):
        error = ScannerError(ErrorCode.INVALID_CHAR_CONSTANT, SourceLocation("a.kpl", 4, 2))
        assert error.short() == "4-2:Invalid const char!"
        assert (error.line, error.column) == (4, 2)

    def test_custom_hint(self):
        error = ScannerError(
            ErrorCode.NUMBER_TOO_LONG,
            SourceLocation("a.kpl", 1, 1),
            hint="split the constant",
        )
        assert str(error).endswith("hint: split the constant")


class TestSourceIOError:
    """Test the file open error."""

    def test_message(self):
        error = SourceIOError("missing.kpl", "No such file or directory")
        assert isinstance(error, KPLError)
        assert str(error) == "cannot read input file 'missing.kpl': No such file or directory"
        assert error.path == "missing.kpl"


class TestDiagnosticSink:
    """Test diagnostic collection and the fatal policy."""

    def test_collects_in_order(self):
        sink = DiagnosticSink("a.kpl")
        sink.report(ErrorCode.INVALID_SYMBOL, 1, 2)
        sink.report(ErrorCode.END_OF_COMMENT, 3, 4)
        assert sink.has_errors()
        assert sink.error_count() == 2
        assert sink.codes() == [ErrorCode.INVALID_SYMBOL, ErrorCode.END_OF_COMMENT]
        assert str(sink.errors[1].location) == "a.kpl:3:4"

    def test_report_returns_error(self):
        sink = DiagnosticSink()
        error = sink.report(ErrorCode.INVALID_SYMBOL, 1, 1, "#")
        assert error is sink.errors[0]
        assert error.source_line == "#"

    def test_report_hint(self):
        sink = DiagnosticSink()
        plain = sink.report(ErrorCode.INVALID_SYMBOL, 1, 1)
        hinted = sink.report(ErrorCode.INVALID_SYMBOL, 1, 2, hint="try '!='")
        assert plain.hint is None
        assert hinted.hint == "try '!='"
        assert sink.report(ErrorCode.END_OF_COMMENT, 2, 1).hint == (
            "close the block comment with '*)'"
        )

    def test_fatal_sink_raises(self):
        sink = DiagnosticSink(fatal=True)
        with pytest.raises(ScannerError):
            sink.report(ErrorCode.INVALID_SYMBOL, 1, 1)
        assert sink.error_count() == 1

    def test_callback_sees_every_report(self):
        seen = []
        sink = DiagnosticSink(on_report=seen.append, fatal=True)
        with pytest.raises(ScannerError):
            sink.report(ErrorCode.NUMBER_TOO_LONG, 1, 1)
        assert [e.code for e in seen] == [ErrorCode.NUMBER_TOO_LONG]

    def test_report_text(self):
        sink = DiagnosticSink("a.kpl")
        sink.report(ErrorCode.INVALID_SYMBOL, 1, 1)
        text = sink.report_text()
        assert "a.kpl:1:1: error: Invalid symbol!" in text
        assert text.endswith("1 error")

    def test_clear_and_raise_if_errors(self):
        sink = DiagnosticSink()
        sink.raise_if_errors()
        sink.report(ErrorCode.INVALID_SYMBOL, 1, 1)
        with pytest.raises(ScannerError):
            sink.raise_if_errors()
        sink.clear()
        assert not sink.has_errors()


class TestScannerOptions:
    """Test option validation."""

    def test_defaults(self):
        options = ScannerOptions()
        assert options.max_ident_len == 15
        assert options.int_bits == 32
        assert not options.fatal_errors
        assert not options.check_overflow
        assert not options.strict_strings

    def test_invalid_max_ident_len(self):
        with pytest.raises(ValueError):
            ScannerOptions(max_ident_len=0)

    def test_invalid_int_bits(self):
        with pytest.raises(ValueError):
            ScannerOptions(int_bits=1)
