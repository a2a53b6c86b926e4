"""
tallyscan

Scans corrupted instruction text for ``mul(a,b)`` calls and sums their
products, honouring ``do()`` / ``don't()`` toggles.

Architecture:
    tallyscan/
    ├── result.py        # Ok / Err carrier with short-circuit propagation
    ├── lexer/           # Position-tracking tokenizer
    ├── parser/          # Windowed pattern matcher over tokens
    ├── scan.py          # Tokenize-then-parse pipeline
    ├── puzzles/         # Location-list and report solvers
    ├── app.py           # Input file handling shared by the commands
    └── cli.py           # Console entry points

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .result import Ok, Err, Result, UnwrapError, collect
from .lexer import Tokenizer, Token, TokenKind, TokenizeError
from .parser import Parser
from .scan import scan

__all__ = [
    # Core classes
    "Tokenizer",
    "Parser",
    "Token",
    "TokenKind",
    "TokenizeError",

    # Result carrier
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "collect",

    # Pipeline
    "scan",

    # Version info
    "__version__",
    "__license__",
]
