"""Strip — встраиваемый компонент недельной полосы."""

from .binding import DateBinding, ReferenceDateState
from .component import WeeklyCalendarStrip
from .formatting import (
    DateFormatter,
    default_cell,
    default_header,
    month_title,
    weekday_symbol,
)
from .views import DayCell, StripView

__all__ = [
    "DateBinding",
    "ReferenceDateState",
    "WeeklyCalendarStrip",
    "DateFormatter",
    "default_cell",
    "default_header",
    "month_title",
    "weekday_symbol",
    "DayCell",
    "StripView",
]
