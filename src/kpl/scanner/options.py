"""
Scanner configuration options.
"""

from dataclasses import dataclass

from kpl.scanner.tokens import MAX_IDENT_LEN


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        max_ident_len: Longest identifier, number or string payload kept.
                       Longer identifiers and numbers are diagnosed; longer
                       strings are silently truncated unless strict_strings.
        int_bits: Width of the target signed integer. Number literals are
                  narrowed to it with two's-complement wraparound.
        check_overflow: Report NUMBER_OVERFLOW when a literal does not fit
                        int_bits (the value is still wrapped).
        strict_strings: Report STRING_TOO_LONG for string constants longer
                        than max_ident_len.
        fatal_errors: Abort on the first diagnostic by raising it, like the
                      classic KPL driver. False keeps scanning.
        encoding: Encoding used when reading source files. latin-1 maps
                  every byte to exactly one character.
    """
    max_ident_len: int = MAX_IDENT_LEN
    int_bits: int = 32
    check_overflow: bool = False
    strict_strings: bool = False
    fatal_errors: bool = False
    encoding: str = "latin-1"

    def __post_init__(self):
        if self.max_ident_len < 1:
            raise ValueError(f"max_ident_len must be positive, got {self.max_ident_len}")
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")
