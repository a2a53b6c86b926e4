"""
Token definitions for the tallyscan lexer.

The alphabet is small and ASCII-only:
- Identifiers (letters, digits and underscores, not starting with a digit)
- Number literals (runs of decimal digits, no sign or fraction)
- Operators and punctuation (exactly one character each)
- A sentinel marking the end of input
"""

import string
from enum import Enum
from dataclasses import dataclass


class TokenKind(Enum):
    """Closed set of token classes produced by the tokenizer."""

    IDENTIFIER = "Identifier"
    NUMBER_LITERAL = "NumberLiteral"
    OPERATOR = "Operator"
    PUNCTUATION = "Punctuation"
    END_OF_INPUT = "EndOfInput"


@dataclass(frozen=True)
class Token:
    """
    A classified slice of the input.

    ``line`` and ``column`` are taken when the token is emitted, after its
    last character has been consumed: the line is the cursor line at that
    moment and the column is the cursor column minus the lexeme length.
    """
    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.kind.value}({self.lexeme!r})"

    @property
    def is_end(self) -> bool:
        return self.kind is TokenKind.END_OF_INPUT


# Characters the tokenizer never turns into tokens
WHITESPACE = frozenset(" \r\t\n")

IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
DIGITS = frozenset(string.digits)

# Every printable ASCII symbol; OPERATORS and PUNCTUATION are subsets
SYMBOL_CHARS = frozenset(string.punctuation)

OPERATORS = frozenset("+-*/%&|^~@:$?#><!")
PUNCTUATION = frozenset(";,'.(){}[]\"")
