"""
Location-list distance and similarity scoring.

Input is two columns of integers, one pair per line. The lists are compared
after sorting (total distance) and by frequency (similarity score).
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

log = logging.getLogger(__name__)

SAMPLE_LEFT = [3, 4, 2, 1, 3, 3]
SAMPLE_RIGHT = [4, 3, 5, 3, 9, 3]


def parse_location_lists(text: str) -> Tuple[List[int], List[int]]:
    """
    Split two-column input into left and right lists.

    Lines that do not start with two integers are skipped; anything after
    the second integer is ignored.
    """
    left: List[int] = []
    right: List[int] = []

    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        try:
            a, b = int(fields[0]), int(fields[1])
        except ValueError:
            continue
        left.append(a)
        right.append(b)

    return left, right


def _as_arrays(left: Sequence[int], right: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
    if len(left) != len(right):
        raise ValueError(f"List lengths differ: {len(left)} != {len(right)}")
    return np.asarray(left, dtype=np.int64), np.asarray(right, dtype=np.int64)


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of absolute differences between the sorted lists, paired by rank."""
    a, b = _as_arrays(left, right)
    return int(np.abs(np.sort(a) - np.sort(b)).sum())


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left value times the number of times it appears on the right."""
    a, b = _as_arrays(left, right)
    values, counts = np.unique(b, return_counts=True)
    frequency = dict(zip(values.tolist(), counts.tolist()))
    return int(sum(x * frequency.get(x, 0) for x in a.tolist()))


def solve(text=None) -> int:
    """Entry point for the ``tallyscan-distance`` command."""
    if text is None:
        left, right = SAMPLE_LEFT, SAMPLE_RIGHT
    else:
        left, right = parse_location_lists(text)

    try:
        distance = total_distance(left, right)
        similarity = similarity_score(left, right)
    except ValueError as e:
        log.error(f"Invalid location lists: {e}")
        return 1

    log.info(f"Distance between both lists: {distance}")
    log.info(f"Similarity score: {similarity}")

    return 0
