"""
Contract Validation Module

Модуль для валидации JSON контрактов weekstrip.
"""

from .loaders import load_calendar_system
from .validators import (
    CalendarSystemValidator,
    ContractValidator,
    SchemaLoader,
    WeekStripViewValidator,
    validate_calendar_system,
    validate_week_strip_view,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalendarSystemValidator",
    "WeekStripViewValidator",
    # Functions
    "validate_calendar_system",
    "validate_week_strip_view",
    "load_calendar_system",
]
