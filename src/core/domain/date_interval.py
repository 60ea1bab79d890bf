"""
DateInterval — полуоткрытый интервал времени [start, end)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class DateInterval:
    """
    Интервал [start, end) между двумя aware моментами.

    Immutable: комбинирование интервалов создаёт новый экземпляр.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("DateInterval requires timezone-aware datetimes")
        if self.end < self.start:
            raise ValueError(
                f"Interval end {self.end.isoformat()} precedes start {self.start.isoformat()}"
            )

    @property
    def duration(self) -> timedelta:
        """Абсолютная длительность (с учётом переводов часов)."""
        return self.end.astimezone(timezone.utc) - self.start.astimezone(timezone.utc)

    def contains(self, moment: datetime) -> bool:
        """True если start <= moment < end."""
        return self.start <= moment < self.end

    def union(self, other: "DateInterval") -> "DateInterval":
        """Интервал от раннего start до позднего end."""
        return DateInterval(start=min(self.start, other.start), end=max(self.end, other.end))
