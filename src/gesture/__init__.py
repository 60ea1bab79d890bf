"""Gesture — распознавание drag-жеста и маппинг в навигацию по неделям.

- DragGestureRecognizer: IDLE/DRAGGING с порогом минимальной дистанции
- week_delta_for_translation: знак смещения → ±1 неделя
"""

from .mapper import SwipeDirection, swipe_direction, week_delta_for_translation
from .state_machine import (
    DragEndResult,
    DragGestureConfig,
    DragGestureRecognizer,
    GestureState,
)

__all__ = [
    "SwipeDirection",
    "swipe_direction",
    "week_delta_for_translation",
    "DragEndResult",
    "DragGestureConfig",
    "DragGestureRecognizer",
    "GestureState",
]
