"""
Command-line entry points.

Each command takes an optional input path; without one it runs on its
built-in sample. Results and failures are reported through logging.
"""

import argparse
import functools
import sys
from typing import Callable, List, Optional

from .app import App, EntryPoint
from .config import LoggingConfiguration, LOG_LEVELS, LOG_LEVEL_ENV_VAR, configure_logging
from .scan import scan
from .puzzles import distance, reports


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        epilog=f"Log level defaults to ${LOG_LEVEL_ENV_VAR}, then INFO.",
    )
    parser.add_argument('path', nargs='?',
                        help='Input file (defaults to a built-in sample)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper,
                        help='Logging verbosity')
    return parser


def _run(parser: argparse.ArgumentParser, argv: Optional[List[str]],
         entrypoint_for: Callable[[argparse.Namespace], EntryPoint]) -> int:
    args = parser.parse_args(argv)

    try:
        config = LoggingConfiguration.resolve(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(config)

    app_argv = [parser.prog] + ([args.path] if args.path is not None else [])
    return App(entrypoint_for(args)).run(app_argv)


def main(argv: Optional[List[str]] = None) -> int:
    """``tallyscan [path]``: sum the multiply instructions in the input."""
    parser = _build_parser("tallyscan", "Sum mul(a,b) instructions, honouring do()/don't() toggles.")
    parser.add_argument('--dump-tokens', action='store_true',
                        help='Log every token before parsing')

    return _run(parser, argv, lambda args: functools.partial(scan, show_tokens=args.dump_tokens))


def distance_main(argv: Optional[List[str]] = None) -> int:
    """``tallyscan-distance [path]``: compare two location lists."""
    parser = _build_parser("tallyscan-distance", "Total distance and similarity score of two location lists.")
    return _run(parser, argv, lambda args: distance.solve)


def reports_main(argv: Optional[List[str]] = None) -> int:
    """``tallyscan-reports [path]``: count safe reports."""
    parser = _build_parser("tallyscan-reports", "Count safe reports, with and without problem dampening.")
    return _run(parser, argv, lambda args: reports.solve)


if __name__ == "__main__":
    sys.exit(main())
