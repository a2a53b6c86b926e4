"""
tallyscan Lexer - turns raw text into classified tokens

Single forward pass, no backtracking. Whitespace is skipped, everything else
becomes an identifier, a number, or a one-character operator/punctuation
token. The first character that fits none of those ends the scan: the caller
gets back an ``Err`` holding the position, never a partial token list.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..result import Err, Ok, Result, collect
from .tokens import (
    Token, TokenKind, WHITESPACE, IDENTIFIER_START, IDENTIFIER_CHARS, DIGITS,
    SYMBOL_CHARS, OPERATORS, PUNCTUATION
)
from .errors import (
    TokenizeError, create_unrecognized_symbol_error, create_unexpected_character_error
)

log = logging.getLogger(__name__)


@dataclass
class Cursor:
    """Scan position inside one source string. Lines and columns are 1-based."""
    offset: int = 0
    line: int = 1
    column: int = 1

    def at_end(self, source: str) -> bool:
        return self.offset >= len(source)

    def peek(self, source: str) -> str:
        """Current character, or NUL past the end."""
        if self.at_end(source):
            return '\0'
        return source[self.offset]

    def advance(self, source: str) -> str:
        """Consume one character, updating line/column."""
        char = source[self.offset]
        self.offset += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char


class Tokenizer:
    """
    tallyscan lexical analyzer.

    Instances hold no scan state between calls: every ``tokenize`` call
    starts from a fresh cursor, so one tokenizer can be reused freely (but
    not shared between threads mid-call).
    """

    def tokenize(self, source: str) -> Result[List[Token], TokenizeError]:
        """
        Tokenize the entire input.

        Args:
            source: Fully materialized input text

        Returns:
            ``Ok`` with the tokens followed by one END_OF_INPUT token, or
            ``Err`` with the first scan error
        """
        cursor = Cursor()
        outcome = collect(self._scan_tokens(source, cursor))

        if outcome.is_err():
            error = outcome.unwrap_err()
            log.debug(f"Tokenizing stopped at {error.line}:{error.column}: {error.message}")
            return outcome

        tokens = outcome.unwrap_ok()
        tokens.append(self._make_token(TokenKind.END_OF_INPUT, "", cursor))
        log.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")
        return Ok(tokens)

    def _scan_tokens(self, source: str, cursor: Cursor) -> Iterator[Result[Token, TokenizeError]]:
        """Yield one result per token; the consumer stops at the first error."""
        while not cursor.at_end(source):
            self._skip_whitespace(source, cursor)
            if cursor.at_end(source):
                break
            yield self._next_token(source, cursor)

    def _next_token(self, source: str, cursor: Cursor) -> Result[Token, TokenizeError]:
        char = cursor.peek(source)

        if char in IDENTIFIER_START:
            return self._identifier(source, cursor)

        if char in DIGITS:
            return self._number(source, cursor)

        if char in SYMBOL_CHARS:
            return self._operator_or_punctuation(source, cursor)

        return Err(create_unexpected_character_error(char, cursor.line, cursor.column))

    def _identifier(self, source: str, cursor: Cursor) -> Result[Token, TokenizeError]:
        start = cursor.offset
        while not cursor.at_end(source) and cursor.peek(source) in IDENTIFIER_CHARS:
            cursor.advance(source)
        lexeme = source[start:cursor.offset]
        return Ok(self._make_token(TokenKind.IDENTIFIER, lexeme, cursor))

    def _number(self, source: str, cursor: Cursor) -> Result[Token, TokenizeError]:
        start = cursor.offset
        while not cursor.at_end(source) and cursor.peek(source) in DIGITS:
            cursor.advance(source)
        lexeme = source[start:cursor.offset]
        return Ok(self._make_token(TokenKind.NUMBER_LITERAL, lexeme, cursor))

    def _operator_or_punctuation(self, source: str, cursor: Cursor) -> Result[Token, TokenizeError]:
        """Consume exactly one symbol character and classify it."""
        line, column = cursor.line, cursor.column
        char = cursor.advance(source)

        if char in OPERATORS:
            return Ok(self._make_token(TokenKind.OPERATOR, char, cursor))

        if char in PUNCTUATION:
            return Ok(self._make_token(TokenKind.PUNCTUATION, char, cursor))

        return Err(create_unrecognized_symbol_error(char, line, column))

    def _skip_whitespace(self, source: str, cursor: Cursor):
        while not cursor.at_end(source) and cursor.peek(source) in WHITESPACE:
            cursor.advance(source)

    @staticmethod
    def _make_token(kind: TokenKind, lexeme: str, cursor: Cursor) -> Token:
        # End-anchored position: taken after the lexeme has been consumed
        return Token(kind, lexeme, cursor.line, cursor.column - len(lexeme))


def format_token(token: Token) -> str:
    """Render a token as ``Token(Kind, "lexeme", line, column)``."""
    return f'Token({token.kind.value}, "{token.lexeme}", {token.line}, {token.column})'


def dump_tokens(tokens: List[Token], logger: logging.Logger = log):
    """Log every token on its own line at info level."""
    for token in tokens:
        logger.info(format_token(token))


def tokenize_string(source: str) -> Result[List[Token], TokenizeError]:
    """
    Convenience function to tokenize a source string with a fresh tokenizer.

    Args:
        source: Input text

    Returns:
        Result of ``Tokenizer.tokenize``
    """
    return Tokenizer().tokenize(source)
