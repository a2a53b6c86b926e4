"""
Runtime configuration for the tallyscan command-line tools.

There are no configuration files. The only knob is the log level, taken from
the command line, then the ``TALLYSCAN_LOG_LEVEL`` environment variable, then
the default.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV_VAR = "TALLYSCAN_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfiguration:
    """Configuration for the root log handler"""
    level: str = "INFO"
    fmt: str = "[%(levelname)s] %(message)s"

    @classmethod
    def resolve(cls, cli_level: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> "LoggingConfiguration":
        """Pick the log level: command line first, then environment, then default."""
        if environ is None:
            environ = os.environ

        level = cli_level or environ.get(LOG_LEVEL_ENV_VAR) or cls.level
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})")

        return cls(level=level)


def configure_logging(config: LoggingConfiguration):
    """Install a single stderr handler on the root logger."""
    logging.basicConfig(
        level=getattr(logging, config.level),
        format=config.fmt,
        force=True,
    )
