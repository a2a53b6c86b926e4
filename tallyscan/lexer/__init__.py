"""
tallyscan Lexer Package

Position-tracking tokenizer over a small ASCII alphabet.

Key Features:
- Identifiers, number literals, one-character operators and punctuation
- End-anchored line/column tracking on every token
- Fail-fast error reporting through ``Result`` values instead of exceptions
"""

from .tokens import Token, TokenKind
from .lexer import Cursor, Tokenizer, dump_tokens, format_token, tokenize_string
from .errors import TokenizeError

__all__ = [
    "Tokenizer",
    "Cursor",
    "Token",
    "TokenKind",
    "TokenizeError",
    "dump_tokens",
    "format_token",
    "tokenize_string",
]
