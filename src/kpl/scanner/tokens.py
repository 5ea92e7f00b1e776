"""
KPL Tokens
==========

Token types, the keyword table, the Token data class and the token
factory used by the scanner.

Token Categories
----------------
- Literals: TK_IDENT, TK_NUMBER, TK_CHAR, TK_STRING
- Structural: TK_EOF, TK_NONE (placeholder for an invalid symbol)
- Keywords: KW_PROGRAM ... KW_STRING (case-sensitive, upper case)
- Symbols: SB_SEMICOLON ... SB_MOD

Symbol Spellings
----------------
| Token       | Source | Token       | Source |
|-------------|--------|-------------|--------|
| SB_ASSIGN   | :=     | SB_NEQ      | !=     |
| SB_LE       | <=     | SB_GE       | >=     |
| SB_LSEL     | (.     | SB_RSEL     | .)     |
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from kpl.errors import SourceLocation


# Longest identifier, number or string payload kept by the scanner
MAX_IDENT_LEN = 15


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the KPL language.

    Member names are the names printed by the kplscan driver, so they
    follow the classic TK_/KW_/SB_ prefixes.
    """

    # === Structural Tokens ===
    TK_NONE = auto()        # Invalid symbol placeholder
    TK_EOF = auto()         # End of file

    # === Identifiers and Literals ===
    TK_IDENT = auto()
    TK_NUMBER = auto()
    TK_CHAR = auto()
    TK_STRING = auto()

    # === Keywords ===
    KW_PROGRAM = auto()
    KW_CONST = auto()
    KW_TYPE = auto()
    KW_VAR = auto()
    KW_INTEGER = auto()
    KW_CHAR = auto()
    KW_ARRAY = auto()
    KW_OF = auto()
    KW_FUNCTION = auto()
    KW_PROCEDURE = auto()
    KW_BEGIN = auto()
    KW_END = auto()
    KW_CALL = auto()
    KW_IF = auto()
    KW_THEN = auto()
    KW_ELSE = auto()
    KW_WHILE = auto()
    KW_DO = auto()
    KW_FOR = auto()
    KW_TO = auto()
    KW_STRING = auto()

    # === Symbols ===
    SB_SEMICOLON = auto()   # ;
    SB_COLON = auto()       # :
    SB_PERIOD = auto()      # .
    SB_COMMA = auto()       # ,
    SB_ASSIGN = auto()      # :=
    SB_EQ = auto()          # =
    SB_NEQ = auto()         # != (not equal)
    SB_LT = auto()          # <
    SB_LE = auto()          # <=
    SB_GT = auto()          # >
    SB_GE = auto()          # >=
    SB_PLUS = auto()        # +
    SB_MINUS = auto()       # -
    SB_TIMES = auto()       # *
    SB_SLASH = auto()       # /
    SB_LPAR = auto()        # (
    SB_RPAR = auto()        # )
    SB_LSEL = auto()        # (.
    SB_RSEL = auto()        # .)
    SB_MOD = auto()         # %

    @property
    def is_keyword(self) -> bool:
        return self.name.startswith("KW_")

    @property
    def is_symbol(self) -> bool:
        return self.name.startswith("SB_")


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "PROGRAM": TokenType.KW_PROGRAM,
    "CONST": TokenType.KW_CONST,
    "TYPE": TokenType.KW_TYPE,
    "VAR": TokenType.KW_VAR,
    "INTEGER": TokenType.KW_INTEGER,
    "CHAR": TokenType.KW_CHAR,
    "ARRAY": TokenType.KW_ARRAY,
    "OF": TokenType.KW_OF,
    "FUNCTION": TokenType.KW_FUNCTION,
    "PROCEDURE": TokenType.KW_PROCEDURE,
    "BEGIN": TokenType.KW_BEGIN,
    "END": TokenType.KW_END,
    "CALL": TokenType.KW_CALL,
    "IF": TokenType.KW_IF,
    "THEN": TokenType.KW_THEN,
    "ELSE": TokenType.KW_ELSE,
    "WHILE": TokenType.KW_WHILE,
    "DO": TokenType.KW_DO,
    "FOR": TokenType.KW_FOR,
    "TO": TokenType.KW_TO,
    "STRING": TokenType.KW_STRING,
})


def check_keyword(text: str) -> TokenType:
    """Return the keyword type for text, or TK_NONE if it is not a keyword."""
    return KEYWORDS.get(text, TokenType.TK_NONE)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from KPL source code.

    Attributes:
        type: The TokenType classification
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        string: Text payload (identifiers, keywords, numbers, chars, strings)
        value: Integer payload, meaningful only for TK_NUMBER
        filename: Name of the source file
    """
    type: TokenType
    line: int
    column: int
    string: str = ""
    value: int = 0
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.type == TokenType.TK_NUMBER:
            return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
        if self.string:
            return f"Token({self.type.name}, {self.string!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


def make_token(
    token_type: TokenType,
    line: int,
    column: int,
    string: str = "",
    value: int = 0,
    filename: str = "<input>",
) -> Token:
    """Create a token stamped with its type and position."""
    return Token(
        type=token_type,
        line=line,
        column=column,
        string=string,
        value=value,
        filename=filename,
    )


def format_token(token: Token) -> str:
    """
    Render a token as 'line-column:KIND(payload)'.

    >>> format_token(make_token(TokenType.TK_IDENT, 1, 5, "foo"))
    '1-5:TK_IDENT(foo)'
    >>> format_token(make_token(TokenType.SB_ASSIGN, 2, 3))
    '2-3:SB_ASSIGN'
    """
    prefix = f"{token.line}-{token.column}:{token.type.name}"

    if token.type in (TokenType.TK_IDENT, TokenType.TK_STRING):
        return f"{prefix}({token.string})"
    if token.type == TokenType.TK_NUMBER:
        return f"{prefix}({token.value})"
    if token.type == TokenType.TK_CHAR:
        return f"{prefix}('{token.string}')"
    return prefix
