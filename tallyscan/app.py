"""
Thin program shell shared by the tallyscan commands.

An ``App`` wraps an entry point taking the optional input text and returning
an exit status. ``run`` reads the file named on the command line, if any, and
hands its contents over.
"""

import logging
from typing import Callable, Optional, Sequence

log = logging.getLogger(__name__)

EntryPoint = Callable[[Optional[str]], int]


class App:
    def __init__(self, entrypoint: EntryPoint):
        self.entrypoint = entrypoint

    def run(self, argv: Sequence[str]) -> int:
        """
        Run the entry point.

        Args:
            argv: Program name followed by an optional input path

        Returns:
            The entry point's exit status, or 1 when the input file
            cannot be read
        """
        contents: Optional[str] = None

        if len(argv) > 1:
            program, filename = argv[0], argv[1]
            try:
                contents = read_input(filename)
            except OSError as e:
                log.error(f"{program}: failed to open file: {filename}")
                log.debug(f"{program}: {e}")
                return 1

        return self.entrypoint(contents)


def read_input(filename: str) -> str:
    """
    Read a whole input file as text.

    Undecodable bytes are kept as surrogate escapes so the tokenizer can
    report them as unexpected characters.
    """
    with open(filename, 'r', encoding='utf-8', errors='surrogateescape') as f:
        return f.read()
