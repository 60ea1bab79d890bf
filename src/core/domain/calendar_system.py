"""
CalendarSystem — календарь, определяющий границы недели

Immutable Pydantic модель. Хранит только конфигурацию (первый день недели,
часовой пояс, локаль, представимый диапазон дат); вся арифметика выполняется
в настенном времени пояса через src.core.datemath.

Поддерживается только григорианский календарь.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum
from functools import lru_cache
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.config import DEFAULT_LOCALE, DAYS_IN_WEEK
from src.core.datemath.wall_clock import resolve_wall_time
from src.core.domain.date_interval import DateInterval
from src.core.errors import DateArithmeticError, WeekResolutionError


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(str, Enum):
    """День недели."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def python_weekday(self) -> int:
        """Номер дня в нумерации date.weekday() (Monday=0 ... Sunday=6)."""
        return _PYTHON_WEEKDAY[self]


_PYTHON_WEEKDAY = {
    Weekday.MONDAY: 0,
    Weekday.TUESDAY: 1,
    Weekday.WEDNESDAY: 2,
    Weekday.THURSDAY: 3,
    Weekday.FRIDAY: 4,
    Weekday.SATURDAY: 5,
    Weekday.SUNDAY: 6,
}


@lru_cache(maxsize=None)
def _zone(key: str) -> ZoneInfo:
    return ZoneInfo(key)


# =============================================================================
# CALENDAR SYSTEM MODEL
# =============================================================================


class CalendarSystem(BaseModel):
    """
    Календарная система: границы недели и арифметика дат.

    Immutable модель (frozen=True). Передаётся хостом и рассматривается
    компонентом как неизменяемая конфигурация.
    """

    identifier: Literal["gregorian"] = Field(
        "gregorian", description="Тип календаря (только gregorian)"
    )
    first_weekday: Weekday = Field(Weekday.SUNDAY, description="Первый день недели")
    timezone: str = Field("UTC", min_length=1, description="IANA ключ часового пояса")
    locale: str = Field(DEFAULT_LOCALE, min_length=1, description="Локаль форматирования")

    # Представимый диапазон локальных дат
    min_date: date = Field(date.min, description="Минимальная представимая дата")
    max_date: date = Field(date.max, description="Максимальная представимая дата")

    model_config = {"frozen": True}  # Immutable

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ключ должен разрешаться в tzdata."""
        try:
            _zone(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v!r}") from e
        return v

    @model_validator(mode="after")
    def validate_date_range(self) -> "CalendarSystem":
        if self.min_date > self.max_date:
            raise ValueError(
                f"min_date {self.min_date.isoformat()} is after max_date {self.max_date.isoformat()}"
            )
        return self

    # -------------------------------------------------------------------------
    # Часовой пояс
    # -------------------------------------------------------------------------

    @property
    def tzinfo(self) -> tzinfo:
        return _zone(self.timezone)

    def localize(self, moment: datetime) -> datetime:
        """
        Перевод момента в пояс календаря.

        Aware datetime конвертируется; naive трактуется как настенное время
        в поясе календаря.

        Raises:
            DateArithmeticError: Если конвертация выходит за диапазон datetime
        """
        if moment.tzinfo is None:
            return resolve_wall_time(moment, self.tzinfo)
        try:
            return moment.astimezone(self.tzinfo)
        except OverflowError as e:
            raise DateArithmeticError(f"Cannot localize {moment.isoformat()}") from e

    def _in_range(self, day: date) -> bool:
        return self.min_date <= day <= self.max_date

    # -------------------------------------------------------------------------
    # Границы дня / недели / месяца
    # -------------------------------------------------------------------------

    def start_of_day(self, day: date) -> datetime:
        """
        Первый момент локального дня.

        Если полночь пропущена переводом часов, это первый существующий
        момент после разрыва.
        """
        return resolve_wall_time(datetime.combine(day, time.min), self.tzinfo)

    def start_of_month(self, moment: datetime) -> datetime:
        """Первый момент месяца, содержащего moment."""
        local = self.localize(moment)
        return self.start_of_day(local.date().replace(day=1))

    def is_same_day(self, a: datetime, b: datetime) -> bool:
        """True если оба момента приходятся на один локальный день."""
        return self.localize(a).date() == self.localize(b).date()

    def week_interval(self, moment: datetime) -> Optional[DateInterval]:
        """
        Интервал недели, содержащей moment.

        Неделя начинается в первый момент дня first_weekday, не позже
        локальной даты moment, и длится до того же дня следующей недели.

        Returns:
            DateInterval или None, если границы недели вне представимого
            диапазона (не исключение)
        """
        try:
            local = self.localize(moment)
            offset = (local.weekday() - self.first_weekday.python_weekday) % DAYS_IN_WEEK
            start_day = local.date() - timedelta(days=offset)
            end_day = start_day + timedelta(days=DAYS_IN_WEEK)
            if not (self._in_range(start_day) and self._in_range(end_day)):
                raise DateArithmeticError(
                    f"Week {start_day.isoformat()}..{end_day.isoformat()} is out of range"
                )
            return DateInterval(start=self.start_of_day(start_day), end=self.start_of_day(end_day))
        except (OverflowError, DateArithmeticError) as e:
            logger.debug(
                "calendar: week interval unresolvable",
                moment=str(moment),
                timezone=self.timezone,
                reason=str(e),
            )
            return None

    def require_week_interval(self, moment: datetime) -> DateInterval:
        """
        Строгий вариант week_interval.

        Raises:
            WeekResolutionError: Если интервал не определяется
        """
        interval = self.week_interval(moment)
        if interval is None:
            raise WeekResolutionError(f"Cannot resolve week for {moment.isoformat()}")
        return interval

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def date_by_adding_weeks(self, moment: datetime, weeks: int) -> datetime:
        """
        Сдвиг на N недель в настенном времени.

        Время суток сохраняется при переходе через смену смещения пояса
        (10:00 EST + 1 неделя = 10:00 EDT).

        Args:
            moment: Исходный момент
            weeks: Количество недель (может быть отрицательным)

        Returns:
            Aware datetime в поясе календаря

        Raises:
            DateArithmeticError: Если результат вне представимого диапазона
        """
        # Naive moment уже настенное время: без промежуточной конвертации в UTC
        wall = moment if moment.tzinfo is None else self.localize(moment).replace(tzinfo=None)
        try:
            shifted = wall + timedelta(weeks=weeks)
        except OverflowError as e:
            raise DateArithmeticError(
                f"Adding {weeks} week(s) to {wall.isoformat()} overflows"
            ) from e

        if not self._in_range(shifted.date()):
            raise DateArithmeticError(
                f"Date {shifted.date().isoformat()} is outside "
                f"{self.min_date.isoformat()}..{self.max_date.isoformat()}"
            )

        return resolve_wall_time(shifted, self.tzinfo)
