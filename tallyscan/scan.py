"""
Tokenize-then-parse pipeline behind the ``tallyscan`` command.
"""

import logging
from typing import Optional

from .lexer import Tokenizer, dump_tokens
from .parser import Parser

log = logging.getLogger(__name__)

DEFAULT_INPUT = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"


def scan(text: Optional[str] = None, show_tokens: bool = False) -> int:
    """
    Sum the multiply instructions in ``text`` (or the built-in sample).

    Returns:
        Process exit status: 0 on success, 1 when tokenizing fails
    """
    source = DEFAULT_INPUT if text is None else text

    outcome = Tokenizer().tokenize(source)

    if outcome.is_err():
        error = outcome.unwrap_err()
        log.error(f"Failed to tokenize: {error.message}\n {error.line}:{error.column}")
        return 1

    tokens = outcome.unwrap_ok()

    if show_tokens:
        dump_tokens(tokens, log)

    parser = Parser()
    parser.parse(tokens)

    log.info(f"Uncorrected amount: {parser.ungated_sum()}")
    log.info(f"Corrected amount: {parser.gated_sum()}")

    return 0
