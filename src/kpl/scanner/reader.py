"""
Source Reader
=============

The reader owns the scan cursor: the current character and its line and
column. It is the only writer of that state; the scanner advances it
exclusively through read_char().

Each source being scanned needs its own reader. A reader is not safe to
share between concurrent scans.

Example:
    >>> reader = SourceReader("ab\\nc")
    >>> reader.current_char, reader.line, reader.column
    ('a', 1, 1)
    >>> reader.read_char()
    'b'
    >>> reader.read_char()
    '\\n'
    >>> reader.read_char(), reader.line, reader.column
    ('c', 2, 1)
"""

import logging
from pathlib import Path
from typing import Optional, Union

from kpl.errors import SourceIOError

logger = logging.getLogger(__name__)


class SourceReader:
    """
    Character cursor over KPL source text.

    Attributes:
        filename: Name of the source (for diagnostics)
        current_char: The character under the cursor, None at end of input
        line: Line of current_char (1-indexed)
        column: Column of current_char (1-indexed)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.filename = filename
        self._source = source
        self._pos = 0
        # Offset of the first character of each line reached so far
        self._line_starts = [0]
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = source[0] if source else None

    @classmethod
    def open(cls, path: Union[str, Path], encoding: str = "latin-1") -> "SourceReader":
        """
        Open a source file.

        Raises:
            SourceIOError: If the file cannot be read
        """
        path = Path(path)
        try:
            source = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(str(path), getattr(e, "strerror", None) or str(e)) from e

        logger.debug("Opened %s (%d characters)", path, len(source))
        return cls(source, str(path))

    def close(self) -> None:
        """Release the source text; the reader is at end of input afterwards."""
        logger.debug("Closed %s", self.filename)
        self._source = ""
        self._pos = 0
        self._line_starts = [0]
        self.current_char = None

    def __enter__(self) -> "SourceReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def at_end(self) -> bool:
        """True when the cursor is past the last character."""
        return self.current_char is None

    def read_char(self) -> Optional[str]:
        """
        Consume the current character and return the next one.

        Consuming a newline moves to column 1 of the next line. At end of
        input the cursor stays put and None is returned.
        """
        if self.current_char is None:
            return None

        if self.current_char == "\n":
            self.line += 1
            self.column = 1
            self._line_starts.append(self._pos + 1)
        else:
            self.column += 1

        self._pos += 1
        if self._pos < len(self._source):
            self.current_char = self._source[self._pos]
        else:
            self.current_char = None
        return self.current_char

    def line_text(self, line: int) -> Optional[str]:
        """
        Return the text of a 1-indexed source line the cursor has reached.

        Returns None for lines not reached yet.
        """
        if not 1 <= line <= len(self._line_starts):
            return None

        start = self._line_starts[line - 1]
        line_end = self._source.find("\n", start)
        if line_end == -1:
            line_end = len(self._source)
        return self._source[start:line_end].rstrip("\r")
