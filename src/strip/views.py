"""
View tree weekly strip.

Результат render() не зависит от UI toolkit: хост отображает header,
ряд ячеек и разделитель своими средствами.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, Tuple, TypeVar

H = TypeVar("H")
C = TypeVar("C")


@dataclass(frozen=True)
class DayCell(Generic[C]):
    """Ячейка дня: дата и вывод cell callback."""

    date: datetime
    content: C


@dataclass(frozen=True)
class StripView(Generic[H, C]):
    """
    Вертикальный стек: header, горизонтальный ряд ячеек, разделитель.

    cells содержит 7 ячеек или ни одной (пустое окно недели).
    """

    reference_date: datetime
    header: H
    cells: Tuple[DayCell[C], ...] = field(default_factory=tuple)
    divider: bool = True

    @property
    def dates(self) -> Tuple[datetime, ...]:
        return tuple(cell.date for cell in self.cells)

    def to_dict(self) -> Dict[str, Any]:
        """
        Сериализация в форму контракта week_strip_view.

        header и content передаются как есть; для JSON они должны быть
        сериализуемы хостом.
        """
        return {
            "reference_date": self.reference_date.isoformat(),
            "header": self.header,
            "cells": [
                {"date": cell.date.isoformat(), "content": cell.content} for cell in self.cells
            ],
            "divider": self.divider,
        }
