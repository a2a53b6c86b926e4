"""
Fixed-shape token patterns.

A pattern is a tuple of ``Expect`` predicates matched against the window of
tokens starting at some index. Each predicate checks the token kind and,
optionally, the exact lexeme or a required lexeme suffix. A window that runs
past the end of the token list never matches.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..lexer.tokens import Token, TokenKind


@dataclass(frozen=True)
class Expect:
    """Predicate on a single token."""
    kind: TokenKind
    lexeme: Optional[str] = None
    suffix: Optional[str] = None

    def accepts(self, token: Token) -> bool:
        if token.kind is not self.kind:
            return False
        if self.lexeme is not None and token.lexeme != self.lexeme:
            return False
        if self.suffix is not None and not token.lexeme.endswith(self.suffix):
            return False
        return True


@dataclass(frozen=True)
class TokenPattern:
    name: str
    elements: Tuple[Expect, ...]

    def __len__(self) -> int:
        return len(self.elements)

    def match(self, tokens: Sequence[Token], index: int) -> Optional[Sequence[Token]]:
        """Return the matched window anchored at ``index``, or None."""
        end = index + len(self.elements)
        if index < 0 or end > len(tokens):
            return None
        window = tokens[index:end]
        for expect, token in zip(self.elements, window):
            if not expect.accepts(token):
                return None
        return window


def identifier(lexeme: Optional[str] = None, suffix: Optional[str] = None) -> Expect:
    return Expect(TokenKind.IDENTIFIER, lexeme=lexeme, suffix=suffix)


def punct(lexeme: str) -> Expect:
    return Expect(TokenKind.PUNCTUATION, lexeme=lexeme)


def number() -> Expect:
    return Expect(TokenKind.NUMBER_LITERAL)


# do()
ENABLE = TokenPattern("enable", (
    identifier("do"), punct("("), punct(")"),
))

# <any identifier>'t() - the leading identifier's text is not checked
DISABLE = TokenPattern("disable", (
    identifier(), punct("'"), identifier("t"), punct("("), punct(")"),
))

# <...>mul(<number>,<number>)
MULTIPLY = TokenPattern("multiply", (
    identifier(suffix="mul"), punct("("), number(), punct(","), number(), punct(")"),
))

# Positions of the operands inside a MULTIPLY window
MULTIPLY_OPERANDS = (2, 4)
