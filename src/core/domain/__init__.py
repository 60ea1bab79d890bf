"""
Domain models and value objects.

Contains the calendar system, date intervals and the derived week window.
"""

from src.core.domain.calendar_system import CalendarSystem, Weekday
from src.core.domain.date_interval import DateInterval
from src.core.domain.week_window import WeekWindow

__all__ = [
    # Calendar system
    "CalendarSystem",
    "Weekday",
    # Intervals
    "DateInterval",
    # Week window
    "WeekWindow",
]
