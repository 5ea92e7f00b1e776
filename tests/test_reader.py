# =============================================================================
# test_reader.py - Source Reader Tests
# =============================================================================
# Tests for the cursor: position tracking, end of input and file opening.
# =============================================================================

import pytest
from kpl.errors import SourceIOError
from kpl.scanner.reader import SourceReader


class TestCursor:
    """Test current character and position tracking."""

    def test_initial_position(self):
        reader = SourceReader("abc")
        assert reader.current_char == "a"
        assert (reader.line, reader.column) == (1, 1)

    def test_empty_source_is_at_end(self):
        reader = SourceReader("")
        assert reader.at_end
        assert reader.current_char is None
        assert (reader.line, reader.column) == (1, 1)

    def test_read_char_advances_column(self):
        reader = SourceReader("abc")
        assert reader.read_char() == "b"
        assert reader.column == 2
        assert reader.read_char() == "c"
        assert reader.column == 3

    def test_newline_moves_to_next_line(self):
        """The character after a newline is at column 1 of the next line."""
        reader = SourceReader("a\nb")
        reader.read_char()
        assert reader.current_char == "\n"
        assert (reader.line, reader.column) == (1, 2)
        reader.read_char()
        assert reader.current_char == "b"
        assert (reader.line, reader.column) == (2, 1)

    def test_end_of_input_position(self):
        """At end of input the cursor sits just past the last character."""
        reader = SourceReader("ab")
        reader.read_char()
        assert reader.read_char() is None
        assert reader.at_end
        assert (reader.line, reader.column) == (1, 3)

    def test_read_past_end_is_stable(self):
        reader = SourceReader("a")
        reader.read_char()
        assert reader.read_char() is None
        assert reader.read_char() is None
        assert (reader.line, reader.column) == (1, 2)


class TestLineText:
    """Test source line lookup used in diagnostics."""

    def test_line_text(self):
        reader = SourceReader("first\nsecond\r\nthird")
        while not reader.at_end:
            reader.read_char()
        assert reader.line_text(1) == "first"
        assert reader.line_text(2) == "second"
        assert reader.line_text(3) == "third"
        assert reader.line_text(4) is None
        assert reader.line_text(0) is None

    def test_line_text_before_line_is_reached(self):
        """Only lines the cursor has entered are available."""
        reader = SourceReader("ab\ncd")
        assert reader.line_text(1) == "ab"
        assert reader.line_text(2) is None
        for _ in range(3):
            reader.read_char()
        assert reader.line_text(2) == "cd"

    def test_line_text_after_close(self):
        reader = SourceReader("ab\ncd")
        for _ in range(3):
            reader.read_char()
        reader.close()
        assert reader.line_text(2) is None


class TestOpenClose:
    """Test opening source files."""

    def test_open_file(self, tmp_path):
        source = tmp_path / "prog.kpl"
        source.write_text("PROGRAM p;")
        reader = SourceReader.open(source)
        assert reader.filename == str(source)
        assert reader.current_char == "P"

    def test_open_missing_file(self, tmp_path):
        """A missing file raises SourceIOError."""
        with pytest.raises(SourceIOError) as exc_info:
            SourceReader.open(tmp_path / "missing.kpl")
        assert "missing.kpl" in str(exc_info.value)

    def test_open_directory(self, tmp_path):
        with pytest.raises(SourceIOError):
            SourceReader.open(tmp_path)

    def test_open_reads_every_byte(self, tmp_path):
        """latin-1 maps each byte to one character."""
        source = tmp_path / "bytes.kpl"
        source.write_bytes(b"a\xffb")
        reader = SourceReader.open(source)
        assert reader.read_char() == "\xff"
        assert reader.read_char() == "b"

    def test_close_via_context_manager(self, tmp_path):
        source = tmp_path / "prog.kpl"
        source.write_text("abc")
        with SourceReader.open(source) as reader:
            assert reader.current_char == "a"
        assert reader.at_end
