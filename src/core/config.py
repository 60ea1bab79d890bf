"""
Константы и конфигурация weekstrip.

Значения по умолчанию совпадают с поведением исходного компонента:
7 ячеек в ряду, порог распознавания drag-жеста 20 единиц, локаль "en".
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество ячеек в ряду (фиксированная сетка)
DAYS_IN_WEEK: Final[int] = 7

# Минимальная дистанция drag-жеста до его распознавания
MIN_DRAG_DISTANCE: Final[float] = 20.0

# Единственная поддерживаемая локаль форматирования
DEFAULT_LOCALE: Final[str] = "en"


# =============================================================================
# КОНФИГУРАЦИЯ КОМПОНЕНТА
# =============================================================================


@dataclass(frozen=True)
class StripConfig:
    """Конфигурация WeeklyCalendarStrip.

    Количество ячеек не настраивается: ряд всегда DAYS_IN_WEEK.
    """

    minimum_drag_distance: float = MIN_DRAG_DISTANCE

    def __post_init__(self) -> None:
        if self.minimum_drag_distance < 0:
            raise ValueError(
                f"minimum_drag_distance cannot be negative: {self.minimum_drag_distance}"
            )
