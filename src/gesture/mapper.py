"""
Gesture-to-Navigation Mapper — горизонтальное смещение → сдвиг в неделях

Порог распознавания здесь не проверяется: это ответственность
DragGestureRecognizer. Маппер работает только со знаком смещения.
"""

from enum import Enum


class SwipeDirection(str, Enum):
    """Направление горизонтального свайпа."""

    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


def swipe_direction(translation_width: float) -> SwipeDirection:
    """Направление по знаку горизонтального смещения."""
    if translation_width < 0:
        return SwipeDirection.LEFT
    if translation_width > 0:
        return SwipeDirection.RIGHT
    return SwipeDirection.NONE


def week_delta_for_translation(translation_width: float) -> int:
    """
    Сдвиг в неделях для завершённого drag-жеста.

    - влево (отрицательное смещение) → следующая неделя (+1)
    - вправо (положительное смещение) → предыдущая неделя (-1)
    - без горизонтального смещения → 0

    Args:
        translation_width: Горизонтальное смещение на момент окончания жеста

    Returns:
        -1, 0 или +1
    """
    direction = swipe_direction(translation_width)
    if direction == SwipeDirection.LEFT:
        return 1
    if direction == SwipeDirection.RIGHT:
        return -1
    return 0
