"""
tallyscan Parser Package

Windowed pattern matcher over the token stream produced by the lexer.
"""

from .parser import Parser
from .patterns import Expect, TokenPattern, ENABLE, DISABLE, MULTIPLY

__all__ = [
    "Parser",
    "Expect",
    "TokenPattern",
    "ENABLE",
    "DISABLE",
    "MULTIPLY",
]
