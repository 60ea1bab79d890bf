"""
Date math primitives: wall-clock resolution and day enumeration.
"""

from src.core.datemath.enumeration import generate_dates, iter_matching_times
from src.core.datemath.wall_clock import is_ambiguous, is_nonexistent, resolve_wall_time

__all__ = [
    "generate_dates",
    "iter_matching_times",
    "is_ambiguous",
    "is_nonexistent",
    "resolve_wall_time",
]
