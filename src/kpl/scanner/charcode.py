"""
Character Classification
========================

Every input character is mapped to a coarse CharCode before the scanner
dispatches on it. The table covers all 256 byte values and is built once
at import time; it is an immutable tuple and may be shared freely.

| Class       | Characters                        |
|-------------|-----------------------------------|
| LETTER      | a-z A-Z                           |
| DIGIT       | 0-9                               |
| SPACE       | space, \\t, \\n, \\r, \\v, \\f          |
| symbols     | + - * / % = , ; : . ( ) > < ! ' " |
| UNKNOWN     | everything else (including _)     |
| EOF         | end of input (None)               |
"""

from enum import Enum, auto
from typing import Optional
import string


class CharCode(Enum):
    """Coarse character classes used by the scanner dispatcher."""

    LETTER = auto()
    DIGIT = auto()
    SPACE = auto()
    PLUS = auto()           # +
    MINUS = auto()          # -
    TIMES = auto()          # *
    SLASH = auto()          # /
    MOD = auto()            # %
    EQ = auto()             # =
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    COLON = auto()          # :
    PERIOD = auto()         # .
    LPAR = auto()           # (
    RPAR = auto()           # )
    GT = auto()             # >
    LT = auto()             # <
    EXCLAMATION = auto()    # !
    SINGLEQUOTE = auto()    # '
    DOUBLEQUOTE = auto()    # "
    EOF = auto()
    UNKNOWN = auto()


_SYMBOL_CODES = {
    "+": CharCode.PLUS,
    "-": CharCode.MINUS,
    "*": CharCode.TIMES,
    "/": CharCode.SLASH,
    "%": CharCode.MOD,
    "=": CharCode.EQ,
    ",": CharCode.COMMA,
    ";": CharCode.SEMICOLON,
    ":": CharCode.COLON,
    ".": CharCode.PERIOD,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
    ">": CharCode.GT,
    "<": CharCode.LT,
    "!": CharCode.EXCLAMATION,
    "'": CharCode.SINGLEQUOTE,
    '"': CharCode.DOUBLEQUOTE,
}


def _build_table() -> tuple[CharCode, ...]:
    table = []
    for code in range(256):
        ch = chr(code)
        if ch in string.ascii_letters:
            table.append(CharCode.LETTER)
        elif ch in string.digits:
            table.append(CharCode.DIGIT)
        elif ch in string.whitespace:
            table.append(CharCode.SPACE)
        else:
            table.append(_SYMBOL_CODES.get(ch, CharCode.UNKNOWN))
    return tuple(table)


CHAR_CODES: tuple[CharCode, ...] = _build_table()


def classify(ch: Optional[str]) -> CharCode:
    """
    Return the CharCode of a character.

    None stands for end of input. Characters outside the 8-bit range are
    UNKNOWN, so the mapping is total.
    """
    if ch is None:
        return CharCode.EOF
    code = ord(ch)
    if code >= len(CHAR_CODES):
        return CharCode.UNKNOWN
    return CHAR_CODES[code]
