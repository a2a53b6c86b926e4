"""
Numeric-list solvers shipped alongside the scanner.
"""

from .distance import parse_location_lists, total_distance, similarity_score
from .reports import parse_reports, is_report_safe, can_report_be_made_safe

__all__ = [
    "parse_location_lists",
    "total_distance",
    "similarity_score",
    "parse_reports",
    "is_report_safe",
    "can_report_be_made_safe",
]
