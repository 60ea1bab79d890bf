"""
WeekWindow — упорядоченные даты видимой недели

Производное значение: пересчитывается при каждой смене reference date и
нигде не хранится. Равенство по значению.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, List, Tuple

from src.core.config import DAYS_IN_WEEK


@dataclass(frozen=True)
class WeekWindow:
    """
    Ровно DAYS_IN_WEEK aware моментов в хронологическом порядке, либо пусто.

    Пустое окно — деградированное (но не фатальное) состояние, когда
    календарь не смог определить границы недели.
    """

    dates: Tuple[datetime, ...] = ()

    def __post_init__(self) -> None:
        if len(self.dates) not in (0, DAYS_IN_WEEK):
            raise ValueError(
                f"WeekWindow must hold 0 or {DAYS_IN_WEEK} dates, got {len(self.dates)}"
            )
        for earlier, later in zip(self.dates, self.dates[1:]):
            if not earlier < later:
                raise ValueError(
                    f"WeekWindow dates must be strictly increasing: "
                    f"{earlier.isoformat()} >= {later.isoformat()}"
                )

    @classmethod
    def empty(cls) -> "WeekWindow":
        return cls(dates=())

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[datetime]:
        return iter(self.dates)

    def __getitem__(self, index: int) -> datetime:
        return self.dates[index]

    @property
    def is_empty(self) -> bool:
        return not self.dates

    @property
    def days(self) -> List[date]:
        """Локальные календарные даты окна."""
        return [moment.date() for moment in self.dates]

    def contains_day(self, day: date) -> bool:
        """True если локальная дата day входит в окно."""
        return day in self.days
