"""
Tests for kplscan - KPL Scanner CLI
===================================

These tests run the click command through CliRunner on small source
files and check the printed tokens, diagnostics and exit codes.
"""

import pytest
from click.testing import CliRunner

from kpl.cli.errors import ExitCode
from kpl.cli.kplscan import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_source(tmp_path):
    def _write(text: str, name: str = "prog.kpl"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


class TestKplscanCLI:
    """Tests for the kplscan CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Tokenize a KPL source file" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "kplscan" in result.output

    def test_basic_scan(self, runner, write_source):
        path = write_source("PROGRAM demo;\nBEGIN x := 'a' END.")
        result = runner.invoke(main, [str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        lines = result.output.splitlines()
        assert lines == [
            "1-1:KW_PROGRAM",
            "1-9:TK_IDENT(demo)",
            "1-13:SB_SEMICOLON",
            "2-1:KW_BEGIN",
            "2-7:TK_IDENT(x)",
            "2-9:SB_ASSIGN",
            "2-12:TK_CHAR('a')",
            "2-16:KW_END",
            "2-19:SB_PERIOD",
        ]

    def test_eof_is_not_printed(self, runner, write_source):
        result = runner.invoke(main, [str(write_source("42"))])
        assert result.output.splitlines() == ["1-1:TK_NUMBER(42)"]

    def test_missing_file(self, runner, tmp_path):
        """An unreadable input file is the only fatal condition."""
        result = runner.invoke(main, [str(tmp_path / "missing.kpl")])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Can't read input file!" in result.output

    def test_no_arguments(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code != 0

    def test_diagnostics_do_not_stop_scan(self, runner, write_source):
        path = write_source("a # b")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.SUCCESS
        assert "1-3:Invalid symbol!" in result.output
        assert "1-3:TK_NONE" in result.output
        assert "1-5:TK_IDENT(b)" in result.output

    def test_fatal_stops_at_first_error(self, runner, write_source):
        path = write_source("a # b")
        result = runner.invoke(main, ["--fatal", str(path)])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "1-3:Invalid symbol!" in result.output
        assert "TK_IDENT(b)" not in result.output

    def test_summary(self, runner, write_source):
        path = write_source("@ (* open")
        result = runner.invoke(main, ["--summary", str(path)])
        assert result.exit_code == ExitCode.SUCCESS
        assert "2 errors" in result.output

    def test_max_ident_len_option(self, runner, write_source):
        path = write_source("abcdefgh")
        result = runner.invoke(main, ["--max-ident-len", "4", str(path)])
        assert "1-1:Identification too long!" in result.output
        assert "1-1:TK_IDENT(abcd)" in result.output

    def test_check_overflow_option(self, runner, write_source):
        path = write_source("300")
        result = runner.invoke(main, ["--int-bits", "8", "--check-overflow", str(path)])
        assert "1-1:TK_NUMBER(44)" in result.output
        assert "does not fit" in result.output

    def test_strict_strings_option(self, runner, write_source):
        path = write_source('"' + "x" * 20 + '"')
        result = runner.invoke(main, ["--strict-strings", str(path)])
        assert "1-1:String constant too long!" in result.output
        assert "1-1:TK_STRING(" + "x" * 15 + ")" in result.output

    def test_invalid_option_value(self, runner, write_source):
        path = write_source("x")
        result = runner.invoke(main, ["--max-ident-len", "0", str(path)])
        assert result.exit_code == 2
