"""Week — построение окна недели и навигация по неделям."""

from .builder import build_week
from .navigation import NavigationResult, apply_week_delta

__all__ = [
    "build_week",
    "NavigationResult",
    "apply_week_delta",
]
