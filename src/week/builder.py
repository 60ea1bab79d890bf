"""Week Window Builder — даты видимой недели для reference date.

Порядок:
1. Интервал недели, содержащей reference date
2. Интервал недели, содержащей момент перед концом первого (граница конца)
3. Объединённый интервал [first.start, second.end)
4. Перечисление дней с политикой "next matching time", start добавляется в начало
5. Первые DAYS_IN_WEEK дат

Любая неразрешимая граница даёт пустое окно, а не исключение.
"""

from datetime import datetime, timedelta

from loguru import logger

from src.core.config import DAYS_IN_WEEK
from src.core.datemath.enumeration import generate_dates
from src.core.domain.calendar_system import CalendarSystem
from src.core.domain.week_window import WeekWindow

# Шаг назад от конца первого интервала
_BEFORE_END = timedelta(seconds=1)


def build_week(calendar: CalendarSystem, reference: datetime) -> WeekWindow:
    """Окно из DAYS_IN_WEEK дат недели, содержащей reference.

    Args:
        calendar: Календарная система хоста
        reference: Reference date (aware или naive в поясе календаря)

    Returns:
        WeekWindow из 7 дат или пустое окно
    """
    first_week = calendar.week_interval(reference)
    if first_week is None:
        return WeekWindow.empty()

    last_week = calendar.week_interval(first_week.end - _BEFORE_END)
    if last_week is None:
        return WeekWindow.empty()

    combined = first_week.union(last_week)
    dates = generate_dates(combined, calendar.tzinfo)

    if len(dates) < DAYS_IN_WEEK:
        logger.warning(
            "week_builder: interval yielded too few days",
            reference=str(reference),
            days=len(dates),
            start=combined.start.isoformat(),
            end=combined.end.isoformat(),
        )
        return WeekWindow.empty()

    return WeekWindow(dates=tuple(dates[:DAYS_IN_WEEK]))
