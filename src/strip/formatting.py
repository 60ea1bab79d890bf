"""
Форматирование дат для header и ячеек (локаль "en").

DateFormatter понимает подмножество LDML шаблонов (как dateFormat у
платформенных форматтеров):

    yyyy yy y   год
    MMMM MMM MM M   месяц (название / сокращение / число)
    dd d      день месяца
    EEEE EEE E   день недели
    HH H hh h mm ss a   время
    'text'    литерал ('' даёт одиночную кавычку)

Остальные символы выводятся как есть.
"""

import re
from datetime import datetime
from typing import Any, Callable, Dict, Final, List, Optional

from src.core.config import DEFAULT_LOCALE
from src.core.domain.calendar_system import CalendarSystem


# =============================================================================
# ЛОКАЛЬ "en"
# =============================================================================

MONTH_NAMES: Final[List[str]] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

WEEKDAY_NAMES: Final[List[str]] = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|yyyy|yy|y|MMMM|MMM|MM|M|dd|d|EEEE|EEE|E|HH|H|hh|h|mm|ss|a")


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


_FIELDS: Final[Dict[str, Callable[[datetime], str]]] = {
    "yyyy": lambda m: f"{m.year:04d}",
    "yy": lambda m: f"{m.year % 100:02d}",
    "y": lambda m: str(m.year),
    "MMMM": lambda m: MONTH_NAMES[m.month - 1],
    "MMM": lambda m: MONTH_NAMES[m.month - 1][:3],
    "MM": lambda m: f"{m.month:02d}",
    "M": lambda m: str(m.month),
    "dd": lambda m: f"{m.day:02d}",
    "d": lambda m: str(m.day),
    "EEEE": lambda m: WEEKDAY_NAMES[m.weekday()],
    "EEE": lambda m: WEEKDAY_NAMES[m.weekday()][:3],
    "E": lambda m: WEEKDAY_NAMES[m.weekday()][:3],
    "HH": lambda m: f"{m.hour:02d}",
    "H": lambda m: str(m.hour),
    "hh": lambda m: f"{_hour12(m):02d}",
    "h": lambda m: str(_hour12(m)),
    "mm": lambda m: f"{m.minute:02d}",
    "ss": lambda m: f"{m.second:02d}",
    "a": lambda m: "AM" if m.hour < 12 else "PM",
}


class DateFormatter:
    """Форматтер дат по шаблону в поясе календаря."""

    def __init__(self, pattern: str, calendar: CalendarSystem):
        self.pattern = pattern
        self.calendar = calendar
        self.locale = DEFAULT_LOCALE

    def format(self, moment: datetime) -> str:
        local = self.calendar.localize(moment)

        def substitute(match: "re.Match[str]") -> str:
            token = match.group(0)
            if token == "''":
                return "'"
            if token.startswith("'"):
                return token[1:-1].replace("''", "'")
            return _FIELDS[token](local)

        return _TOKEN_RE.sub(substitute, self.pattern)


# =============================================================================
# RENDERERS ПО УМОЛЧАНИЮ
# =============================================================================


def month_title(moment: datetime, calendar: CalendarSystem) -> str:
    """Заголовок месяца: "October 2026"."""
    return DateFormatter("MMMM yyyy", calendar).format(moment)


def weekday_symbol(moment: datetime, calendar: CalendarSystem) -> str:
    """Сокращённый день недели: "Wed"."""
    return DateFormatter("EEE", calendar).format(moment)


def default_header(calendar: CalendarSystem) -> Callable[[datetime], str]:
    """Header callback: заголовок месяца reference date."""

    def header(reference: datetime) -> str:
        return month_title(reference, calendar)

    return header


def default_cell(
    calendar: CalendarSystem, selected: Optional[Callable[[], datetime]] = None
) -> Callable[[datetime], Dict[str, Any]]:
    """
    Cell callback: день недели, число и признак выбранного дня.

    Args:
        calendar: Календарная система
        selected: Источник текущей reference date для подсветки
    """

    def cell(moment: datetime) -> Dict[str, Any]:
        return {
            "weekday": weekday_symbol(moment, calendar),
            "day": calendar.localize(moment).day,
            "selected": selected is not None and calendar.is_same_day(moment, selected()),
        }

    return cell
