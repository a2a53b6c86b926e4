"""
Report safety checks.

A report is a row of levels. It is safe when the levels move in one
direction only, by 1 to 3 per step. The dampened check also accepts a report
that becomes safe once a single level is removed.
"""

import logging
from typing import List, Sequence

import numpy as np

log = logging.getLogger(__name__)

MAX_STEP = 3

SAMPLE_REPORTS = [
    [7, 6, 4, 2, 1],
    [1, 2, 7, 8, 9],
    [9, 7, 6, 2, 1],
    [1, 3, 2, 4, 5],
    [8, 6, 4, 4, 1],
    [1, 3, 6, 7, 9],
]


def parse_reports(text: str) -> List[List[int]]:
    """One report per non-empty line of whitespace-separated integers."""
    reports = []
    for line in text.splitlines():
        levels = []
        for field in line.split():
            try:
                levels.append(int(field))
            except ValueError:
                break
        if levels:
            reports.append(levels)
    return reports


def is_report_safe(levels: Sequence[int]) -> bool:
    if len(levels) <= 1:
        return True

    steps = np.diff(np.asarray(levels, dtype=np.int64))
    increasing = np.all((steps >= 1) & (steps <= MAX_STEP))
    decreasing = np.all((steps <= -1) & (steps >= -MAX_STEP))
    return bool(increasing or decreasing)


def can_report_be_made_safe(levels: Sequence[int]) -> bool:
    """Safe as is, or safe after dropping exactly one level."""
    if is_report_safe(levels):
        return True

    array = np.asarray(levels, dtype=np.int64)
    return any(is_report_safe(np.delete(array, i).tolist()) for i in range(len(array)))


def solve(text=None) -> int:
    """Entry point for the ``tallyscan-reports`` command."""
    reports = SAMPLE_REPORTS if text is None else parse_reports(text)

    safe = sum(1 for levels in reports if is_report_safe(levels))
    dampened = sum(1 for levels in reports if can_report_be_made_safe(levels))

    log.info(f"Number of safe reports processed: {safe}")
    log.info(f"Number of safe reports processed with problem dampening: {dampened}")

    return 0
