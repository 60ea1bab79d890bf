"""Week navigation — применение сдвига в неделях к reference date.

Ошибка арифметики (переполнение диапазона) не пробрасывается: reference
date остаётся прежней, результат помечается applied=False.
"""

from dataclasses import dataclass
from datetime import datetime

from loguru import logger

from src.core.domain.calendar_system import CalendarSystem
from src.core.errors import DateArithmeticError


@dataclass(frozen=True)
class NavigationResult:
    """Результат навигации по неделям."""

    new_date: datetime
    previous_date: datetime
    week_delta: int

    applied: bool
    reason: str


def apply_week_delta(
    calendar: CalendarSystem,
    reference: datetime,
    week_delta: int,
) -> NavigationResult:
    """Сдвиг reference date на week_delta недель.

    Args:
        calendar: Календарная система (арифметика дат)
        reference: Текущая reference date
        week_delta: Сдвиг в неделях (обычно -1, 0, +1)

    Returns:
        NavigationResult; при переполнении new_date == reference
    """
    if week_delta == 0:
        return NavigationResult(
            new_date=reference,
            previous_date=reference,
            week_delta=0,
            applied=False,
            reason="no_delta",
        )

    try:
        new_date = calendar.date_by_adding_weeks(reference, week_delta)
    except DateArithmeticError as e:
        logger.warning(
            "navigation: week shift dropped",
            reference=str(reference),
            week_delta=week_delta,
            error=str(e),
        )
        return NavigationResult(
            new_date=reference,
            previous_date=reference,
            week_delta=week_delta,
            applied=False,
            reason="date_arithmetic_overflow",
        )

    logger.debug(
        "navigation: week shifted",
        previous=str(reference),
        new=str(new_date),
        week_delta=week_delta,
    )
    return NavigationResult(
        new_date=new_date,
        previous_date=reference,
        week_delta=week_delta,
        applied=True,
        reason="week_shifted",
    )
