"""Drag Gesture State Machine — распознавание drag-жеста для навигации.

Два состояния:
- IDLE: жест не распознан (нет касания или смещение меньше порога)
- DRAGGING: смещение достигло minimum_distance

Переходы:
- IDLE → DRAGGING: update() со смещением >= minimum_distance
- DRAGGING → IDLE: end() (с применением сдвига или без)

Промежуточные позиции не меняют reference date. Отдельной отмены нет:
жест, закончившийся ниже порога, просто не даёт сдвига.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from loguru import logger

from src.core.config import MIN_DRAG_DISTANCE
from src.gesture.mapper import week_delta_for_translation


class GestureState(str, Enum):
    """Состояние распознавателя."""

    IDLE = "IDLE"
    DRAGGING = "DRAGGING"


@dataclass(frozen=True)
class DragGestureConfig:
    """Конфигурация распознавателя.

    minimum_distance — евклидова дистанция смещения, после которой жест
    считается начатым.
    """

    minimum_distance: float = MIN_DRAG_DISTANCE


@dataclass(frozen=True)
class DragEndResult:
    """Результат завершения drag-жеста."""

    week_delta: int
    recognized: bool

    translation_width: float
    translation_height: float

    # Диагностика
    previous_state: GestureState
    details: str


class DragGestureRecognizer:
    """Распознаватель drag-жеста с порогом минимальной дистанции.

    Получает события от внешнего захвата жестов (toolkit хоста):
    update() во время движения и end() при отпускании.
    """

    def __init__(self, config: Optional[DragGestureConfig] = None):
        """
        Args:
            config: конфигурация порога (default: DragGestureConfig())
        """
        self.config = config or DragGestureConfig()
        self._state = GestureState.IDLE

    @property
    def state(self) -> GestureState:
        return self._state

    def _reaches_threshold(self, width: float, height: float) -> bool:
        return math.hypot(width, height) >= self.config.minimum_distance

    def update(self, translation_width: float, translation_height: float = 0.0) -> GestureState:
        """Промежуточная позиция жеста.

        Args:
            translation_width: горизонтальное смещение от точки касания
            translation_height: вертикальное смещение от точки касания

        Returns:
            Состояние после обработки события
        """
        if self._state == GestureState.IDLE and self._reaches_threshold(
            translation_width, translation_height
        ):
            self._state = GestureState.DRAGGING
            logger.debug(
                "gesture: drag recognized",
                width=translation_width,
                height=translation_height,
            )
        return self._state

    def end(self, translation_width: float, translation_height: float = 0.0) -> DragEndResult:
        """Завершение жеста.

        Жест распознан, если порог был достигнут во время update() или
        финальное смещение само достигает порога. Всегда возвращает
        распознаватель в IDLE.

        Returns:
            DragEndResult с week_delta ∈ {-1, 0, +1}
        """
        previous_state = self._state
        recognized = previous_state == GestureState.DRAGGING or self._reaches_threshold(
            translation_width, translation_height
        )
        self._state = GestureState.IDLE

        if not recognized:
            return DragEndResult(
                week_delta=0,
                recognized=False,
                translation_width=translation_width,
                translation_height=translation_height,
                previous_state=previous_state,
                details=(
                    f"Below minimum distance {self.config.minimum_distance}: "
                    f"({translation_width}, {translation_height})"
                ),
            )

        week_delta = week_delta_for_translation(translation_width)
        return DragEndResult(
            week_delta=week_delta,
            recognized=True,
            translation_width=translation_width,
            translation_height=translation_height,
            previous_state=previous_state,
            details=f"Drag ended at width={translation_width}, week_delta={week_delta:+d}",
        )
