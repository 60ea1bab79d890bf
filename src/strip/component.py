"""WeeklyCalendarStrip — горизонтально листаемая полоса недели.

Собирает компонент из независимых частей:
- build_week: 7 дат недели reference date
- DragGestureRecognizer: распознавание свайпа
- apply_week_delta: сдвиг reference date на ±1 неделю

Хост владеет reference date (ReferenceDateState) и передаёт компоненту
DateBinding; отрисовка header и ячеек делегируется callbacks хоста.
"""

from datetime import datetime
from typing import Callable, Generic, Optional, TypeVar

from loguru import logger

from src.core.config import DAYS_IN_WEEK, StripConfig
from src.core.domain.calendar_system import CalendarSystem
from src.core.domain.week_window import WeekWindow
from src.gesture.state_machine import DragGestureConfig, DragGestureRecognizer, GestureState
from src.strip.binding import DateBinding
from src.strip.views import DayCell, StripView
from src.week.builder import build_week
from src.week.navigation import NavigationResult, apply_week_delta

H = TypeVar("H")
C = TypeVar("C")


class WeeklyCalendarStrip(Generic[H, C]):
    """Недельная полоса: header, 7 ячеек дней, разделитель.

    Порядок render():
    1. header(reference_date), один вызов
    2. content(date) для DAYS_IN_WEEK дат окна, в хронологическом порядке
    3. Разделитель

    Ошибки календаря наружу не выходят: неразрешимая неделя даёт пустой
    ряд, переполнение при свайпе оставляет дату прежней.
    """

    def __init__(
        self,
        calendar: CalendarSystem,
        date: DateBinding,
        header: Callable[[datetime], H],
        content: Callable[[datetime], C],
        config: Optional[StripConfig] = None,
    ):
        """
        Args:
            calendar: календарная система хоста
            date: binding к reference date хоста
            header: callback отрисовки заголовка
            content: callback отрисовки ячейки дня
            config: конфигурация компонента (default: StripConfig())
        """
        self.calendar = calendar
        self.config = config or StripConfig()
        self._date = date
        self._header = header
        self._content = content
        self._recognizer = DragGestureRecognizer(
            DragGestureConfig(minimum_distance=self.config.minimum_drag_distance)
        )

    @property
    def reference_date(self) -> datetime:
        return self._date.get()

    @property
    def week(self) -> WeekWindow:
        return build_week(self.calendar, self._date.get())

    @property
    def gesture_state(self) -> GestureState:
        return self._recognizer.state

    def render(self) -> StripView[H, C]:
        reference = self._date.get()
        window = build_week(self.calendar, reference)

        header_view = self._header(reference)
        cells = tuple(
            DayCell(date=day, content=self._content(day))
            for day in window.dates[:DAYS_IN_WEEK]
        )
        return StripView(reference_date=reference, header=header_view, cells=cells, divider=True)

    def drag_changed(self, translation_width: float, translation_height: float = 0.0) -> GestureState:
        """Промежуточная позиция жеста; reference date не меняется."""
        return self._recognizer.update(translation_width, translation_height)

    def drag_ended(self, translation_width: float, translation_height: float = 0.0) -> NavigationResult:
        """Окончание жеста: сдвиг недели и предложение новой даты хосту.

        Returns:
            NavigationResult; хост получает propose() только при applied=True
        """
        outcome = self._recognizer.end(translation_width, translation_height)
        result = apply_week_delta(self.calendar, self._date.get(), outcome.week_delta)

        if result.applied:
            self._date.propose(result.new_date)
        elif outcome.recognized and outcome.week_delta != 0:
            logger.debug("strip: swipe ignored", details=outcome.details, reason=result.reason)

        return result
