"""
KPL Scanner (Lexical Analyzer)
==============================

This module implements the scanner for KPL, a small Pascal-like
language. It converts source text into a stream of tokens for a parser.

Each call to Scanner.next_token() classifies the character under the
cursor and dispatches on its CharCode:

- blanks and comments are skipped, then dispatch starts over
- letters start an identifier or keyword
- digits start an unsigned integer
- quotes start a character or string constant
- everything else is a one or two character symbol

Comments
--------
- Block: (* comment *), not nested
- Line: // comment, through the end of the line

Error Recovery
--------------
Lexical problems are reported to a DiagnosticSink and scanning goes on:
every call returns a token (exact, truncated or a TK_NONE placeholder)
and consumes at least one character unless the input is exhausted, so a
scan of finite input always ends with a single TK_EOF.

Example Usage
-------------
>>> from kpl.scanner import Scanner, SourceReader
>>> scanner = Scanner(SourceReader("x := 42;"))
>>> for token in scanner.tokenize():
...     print(token)
Token(TK_IDENT, 'x', 1:1)
Token(SB_ASSIGN, 1:3)
Token(TK_NUMBER, 42, 1:6)
Token(SB_SEMICOLON, 1:8)
Token(TK_EOF, 1:9)
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from kpl.scanner.charcode import CharCode, classify
from kpl.scanner.diagnostics import DiagnosticSink
from kpl.scanner.errors import ErrorCode
from kpl.scanner.options import ScannerOptions
from kpl.scanner.reader import SourceReader
from kpl.scanner.tokens import (
    Token,
    TokenType,
    check_keyword,
    make_token,
)

logger = logging.getLogger(__name__)


# Symbols that are always exactly one character long
SINGLE_SYMBOLS: dict[CharCode, TokenType] = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.MOD: TokenType.SB_MOD,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.RPAR: TokenType.SB_RPAR,
}

# Symbols that extend to a two character symbol when followed by a given
# character class: first char -> (follower, short form, long form)
PAIRED_SYMBOLS: dict[CharCode, tuple[CharCode, TokenType, TokenType]] = {
    CharCode.GT: (CharCode.EQ, TokenType.SB_GT, TokenType.SB_GE),
    CharCode.LT: (CharCode.EQ, TokenType.SB_LT, TokenType.SB_LE),
    CharCode.COLON: (CharCode.EQ, TokenType.SB_COLON, TokenType.SB_ASSIGN),
    CharCode.PERIOD: (CharCode.RPAR, TokenType.SB_PERIOD, TokenType.SB_RSEL),
}


class Scanner:
    """
    Tokenizes KPL source code.

    The scanner reads characters only through its SourceReader, which
    owns the cursor; one scanner/reader pair per source.

    Usage:
        scanner = Scanner(SourceReader(source_text, "prog.kpl"))
        token = scanner.next_token()
        while token.type != TokenType.TK_EOF:
            ...
            token = scanner.next_token()

    Attributes:
        reader: The cursor being scanned
        sink: Where diagnostics are reported
        options: Scanner configuration
    """

    def __init__(
        self,
        reader: SourceReader,
        sink: Optional[DiagnosticSink] = None,
        options: Optional[ScannerOptions] = None,
    ):
        self.options = options or ScannerOptions()
        self.reader = reader
        if sink is None:
            sink = DiagnosticSink(reader.filename, fatal=self.options.fatal_errors)
        self.sink = sink

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns TK_EOF once the input is exhausted, on this and every
        later call.

        Raises:
            ScannerError: Only when the sink is fatal
        """
        reader = self.reader

        while True:
            code = classify(reader.current_char)

            if code == CharCode.SPACE:
                self._skip_blank()
                continue

            if code == CharCode.EOF:
                return self._make_token(TokenType.TK_EOF, reader.line, reader.column)

            if code == CharCode.LETTER:
                return self._read_ident_keyword()

            if code == CharCode.DIGIT:
                return self._read_number()

            if code == CharCode.DOUBLEQUOTE:
                return self._read_string()

            if code == CharCode.SINGLEQUOTE:
                return self._read_const_char()

            line, column = reader.line, reader.column

            if code in SINGLE_SYMBOLS:
                reader.read_char()
                return self._make_token(SINGLE_SYMBOLS[code], line, column)

            if code in PAIRED_SYMBOLS:
                follower, short_type, long_type = PAIRED_SYMBOLS[code]
                reader.read_char()
                if classify(reader.current_char) == follower:
                    reader.read_char()
                    return self._make_token(long_type, line, column)
                return self._make_token(short_type, line, column)

            if code == CharCode.SLASH:
                reader.read_char()
                if classify(reader.current_char) == CharCode.SLASH:
                    self._skip_line_comment()
                    continue
                return self._make_token(TokenType.SB_SLASH, line, column)

            if code == CharCode.LPAR:
                reader.read_char()
                follower = classify(reader.current_char)
                if follower == CharCode.TIMES:
                    self._skip_comment()
                    continue
                if follower == CharCode.PERIOD:
                    reader.read_char()
                    return self._make_token(TokenType.SB_LSEL, line, column)
                return self._make_token(TokenType.SB_LPAR, line, column)

            if code == CharCode.EXCLAMATION:
                reader.read_char()
                if classify(reader.current_char) == CharCode.EQ:
                    reader.read_char()
                    return self._make_token(TokenType.SB_NEQ, line, column)
                self._error(
                    ErrorCode.INVALID_SYMBOL, line, column,
                    hint="did you mean '!=' (not equal)?",
                )
                return self._make_token(TokenType.TK_NONE, line, column)

            # Unknown character: report it and step over it
            self._error(ErrorCode.INVALID_SYMBOL, line, column)
            reader.read_char()
            return self._make_token(TokenType.TK_NONE, line, column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the end of input.

        Yields:
            Every token of the source, the final TK_EOF included
        """
        while True:
            token = self.next_token()
            logger.debug("%r", token)
            yield token
            if token.type == TokenType.TK_EOF:
                return

    # =========================================================================
    # Token Creation and Diagnostics
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        line: int,
        column: int,
        string: str = "",
        value: int = 0,
    ) -> Token:
        return make_token(token_type, line, column, string, value, self.reader.filename)

    def _error(
        self, code: ErrorCode, line: int, column: int, hint: Optional[str] = None
    ) -> None:
        self.sink.report(code, line, column, self.reader.line_text(line), hint=hint)

    # =========================================================================
    # Blank and Comment Handling
    # =========================================================================

    def _skip_blank(self) -> None:
        """Skip a run of whitespace."""
        reader = self.reader
        while classify(reader.current_char) == CharCode.SPACE:
            reader.read_char()

    def _skip_comment(self) -> None:
        """
        Skip a block comment whose '(' has been consumed.

        The cursor is on the opening '*'. A '*' closes the comment only
        when directly followed by ')'.
        """
        reader = self.reader
        reader.read_char()

        while True:
            if reader.current_char is None:
                self._error(ErrorCode.END_OF_COMMENT, reader.line, reader.column)
                return

            if classify(reader.current_char) == CharCode.TIMES:
                reader.read_char()
                if classify(reader.current_char) == CharCode.RPAR:
                    reader.read_char()
                    return
                # Not consumed: it may be the '*' of the closing '*)'
                continue

            reader.read_char()

    def _skip_line_comment(self) -> None:
        """Skip a line comment through its newline, or to end of input."""
        reader = self.reader
        while reader.current_char is not None and reader.current_char != "\n":
            reader.read_char()
        if reader.current_char is not None:
            reader.read_char()

    # =========================================================================
    # Literal Readers
    # =========================================================================

    def _read_ident_keyword(self) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter and continue with letters and
        digits. A run longer than max_ident_len is reported and truncated,
        and is never promoted to a keyword.
        """
        reader = self.reader
        line, column = reader.line, reader.column
        max_len = self.options.max_ident_len

        chars = []
        length = 0
        while classify(reader.current_char) in (CharCode.LETTER, CharCode.DIGIT):
            if length < max_len:
                chars.append(reader.current_char)
            length += 1
            reader.read_char()

        text = "".join(chars)

        if length > max_len:
            self._error(ErrorCode.IDENT_TOO_LONG, line, column)
            return self._make_token(TokenType.TK_IDENT, line, column, text)

        token_type = check_keyword(text)
        if token_type == TokenType.TK_NONE:
            token_type = TokenType.TK_IDENT
        return self._make_token(token_type, line, column, text)

    def _read_number(self) -> Token:
        """
        Scan an unsigned decimal integer.

        At most max_ident_len digits are taken. If more follow, the number
        is reported as too long and the remaining digits are left in the
        input.
        """
        reader = self.reader
        line, column = reader.line, reader.column
        max_len = self.options.max_ident_len

        chars = []
        while classify(reader.current_char) == CharCode.DIGIT:
            if len(chars) >= max_len:
                self._error(ErrorCode.NUMBER_TOO_LONG, line, column)
                break
            chars.append(reader.current_char)
            reader.read_char()

        digits = "".join(chars)
        value = self._narrow(int(digits), line, column)
        return self._make_token(TokenType.TK_NUMBER, line, column, digits, value)

    def _narrow(self, value: int, line: int, column: int) -> int:
        """Wrap value to a signed integer of options.int_bits bits."""
        bits = self.options.int_bits
        if self.options.check_overflow and value >= 1 << (bits - 1):
            self._error(ErrorCode.NUMBER_OVERFLOW, line, column)

        value &= (1 << bits) - 1
        if value >= 1 << (bits - 1):
            value -= 1 << bits
        return value

    def _read_string(self) -> Token:
        """
        Scan a double-quoted string constant.

        There are no escape sequences. Characters past max_ident_len are
        consumed but dropped; they are reported only with strict_strings.
        """
        reader = self.reader
        line, column = reader.line, reader.column
        max_len = self.options.max_ident_len

        reader.read_char()  # consume opening "

        chars = []
        length = 0
        while (reader.current_char is not None
               and classify(reader.current_char) != CharCode.DOUBLEQUOTE):
            if length < max_len:
                chars.append(reader.current_char)
            length += 1
            reader.read_char()

        if reader.current_char is None:
            self._error(ErrorCode.INVALID_CHAR_CONSTANT, line, column)
        else:
            reader.read_char()  # consume closing "

        if self.options.strict_strings and length > max_len:
            self._error(ErrorCode.STRING_TOO_LONG, line, column)

        return self._make_token(TokenType.TK_STRING, line, column, "".join(chars))

    def _read_const_char(self) -> Token:
        """
        Scan a single-quoted character constant.

        Accepted shapes are 'c' for any single character c, and '''' for
        the quote character itself. Anything else is reported at the
        opening quote and a best-effort TK_CHAR is returned; the offending
        character is left in the input.
        """
        reader = self.reader
        line, column = reader.line, reader.column

        reader.read_char()  # consume opening '

        if reader.current_char is None:
            self._error(ErrorCode.INVALID_CHAR_CONSTANT, line, column)
            return self._make_token(TokenType.TK_CHAR, line, column)

        if classify(reader.current_char) == CharCode.SINGLEQUOTE:
            reader.read_char()
            if classify(reader.current_char) != CharCode.SINGLEQUOTE:
                # Empty constant ''
                self._error(ErrorCode.INVALID_CHAR_CONSTANT, line, column)
                return self._make_token(TokenType.TK_CHAR, line, column)

            reader.read_char()
            if classify(reader.current_char) == CharCode.SINGLEQUOTE:
                reader.read_char()
                return self._make_token(TokenType.TK_CHAR, line, column, "'")

            self._error(ErrorCode.INVALID_CHAR_CONSTANT, line, column)
            return self._make_token(TokenType.TK_CHAR, line, column, "'")

        char = reader.current_char
        reader.read_char()

        if classify(reader.current_char) != CharCode.SINGLEQUOTE:
            self._error(ErrorCode.INVALID_CHAR_CONSTANT, line, column)
            return self._make_token(TokenType.TK_CHAR, line, column, char)

        reader.read_char()  # consume closing '
        return self._make_token(TokenType.TK_CHAR, line, column, char)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan_source(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> tuple[list[Token], DiagnosticSink]:
    """
    Scan source text completely.

    Returns:
        The tokens (ending with TK_EOF) and the sink holding diagnostics

    Raises:
        ScannerError: Only with options.fatal_errors
    """
    scanner = Scanner(SourceReader(source, filename), options=options)
    return list(scanner.tokenize()), scanner.sink


def scan_file(
    path: Union[str, Path],
    options: Optional[ScannerOptions] = None,
) -> tuple[list[Token], DiagnosticSink]:
    """
    Scan a source file completely.

    Raises:
        SourceIOError: If the file cannot be read
        ScannerError: Only with options.fatal_errors
    """
    options = options or ScannerOptions()
    with SourceReader.open(path, encoding=options.encoding) as reader:
        scanner = Scanner(reader, options=options)
        tokens = list(scanner.tokenize())
    return tokens, scanner.sink
