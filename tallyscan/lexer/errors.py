"""
Error values for the tallyscan lexer.

Tokenize errors are returned inside ``Err`` rather than raised. Each carries
the 1-based position where scanning stopped and a short message, and renders
as a compiler-style diagnostic.
"""

from dataclasses import dataclass


# Error codes for categorization
ERROR_CODES = {
    "T001": "Unrecognized symbol",
    "T002": "Unexpected character",
}

UNRECOGNIZED_SYMBOL = "T001"
UNEXPECTED_CHARACTER = "T002"


@dataclass(frozen=True)
class TokenizeError:
    """A positioned, immutable scan failure."""
    line: int
    column: int
    message: str
    code: str = UNEXPECTED_CHARACTER

    @property
    def category(self) -> str:
        return ERROR_CODES.get(self.code, "Tokenize error")

    def __str__(self) -> str:
        return (f"ERROR[{self.code}]: {self.message}\n"
                f"  --> {self.line}:{self.column}")


def create_unrecognized_symbol_error(char: str, line: int, column: int) -> TokenizeError:
    """Create an error for a symbol that is neither operator nor punctuation."""
    return TokenizeError(
        line=line,
        column=column,
        message=f"Unrecognized character: {char}",
        code=UNRECOGNIZED_SYMBOL,
    )


def create_unexpected_character_error(char: str, line: int, column: int) -> TokenizeError:
    """Create an error for a character outside the scannable alphabet."""
    return TokenizeError(
        line=line,
        column=column,
        message=f"Unexpected character: {char!r}",
        code=UNEXPECTED_CHARACTER,
    )
