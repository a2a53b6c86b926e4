"""
tallyscan Parser - sums multiply instructions found in a token stream

Walks the token list one index at a time and tests three fixed-shape
patterns at every position: ``do()`` switches counting on, ``<x>'t()``
switches it off, and ``<x>mul(a,b)`` contributes ``a * b``. Every product
goes into the ungated sum; only products seen while enabled go into the
gated sum.

Nothing here can fail. Malformed or truncated instructions are skipped
silently: this is best-effort extraction, not validation.
"""

import logging
from typing import Sequence

from ..lexer.tokens import Token
from .patterns import ENABLE, DISABLE, MULTIPLY, MULTIPLY_OPERANDS

log = logging.getLogger(__name__)


class Parser:
    """
    Stateful instruction scanner.

    Create one per token sequence, call ``parse`` once, then read the totals
    through ``gated_sum()`` and ``ungated_sum()``.
    """

    def __init__(self):
        self.enabled = True
        self._gated_sum = 0
        self._ungated_sum = 0

    def parse(self, tokens: Sequence[Token]):
        """
        Scan the token sequence and accumulate products.

        Patterns are checked independently at each index and never consume
        tokens, so overlapping candidates are each considered from their own
        starting position.
        """
        matched = 0

        for index in range(len(tokens)):
            if ENABLE.match(tokens, index) is not None:
                if not self.enabled:
                    log.debug(f"Enabled at token {index}")
                self.enabled = True

            if DISABLE.match(tokens, index) is not None:
                if self.enabled:
                    log.debug(f"Disabled at token {index}")
                self.enabled = False

            window = MULTIPLY.match(tokens, index)
            if window is not None:
                self._accumulate(window)
                matched += 1

        log.debug(f"Matched {matched} multiply instructions in {len(tokens)} tokens")

    def _accumulate(self, window: Sequence[Token]):
        left, right = (int(window[i].lexeme) for i in MULTIPLY_OPERANDS)
        product = left * right

        self._ungated_sum += product
        if self.enabled:
            self._gated_sum += product

    def gated_sum(self) -> int:
        """Sum of products seen while enabled."""
        return self._gated_sum

    def ungated_sum(self) -> int:
        """Sum of every product, regardless of the toggle."""
        return self._ungated_sum
