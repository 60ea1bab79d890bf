"""
Исключения weekstrip.

Все ошибки библиотеки наследуются от WeekStripError. Наружу из компонента
(render / drag handling) они не выходят: builder и navigation деградируют
до пустого окна или неизменной даты.
"""


class WeekStripError(Exception):
    """Базовое исключение библиотеки."""


class DateArithmeticError(WeekStripError):
    """Результат календарной арифметики вне представимого диапазона."""


class WeekResolutionError(WeekStripError):
    """Календарь не смог определить границы недели для даты."""
