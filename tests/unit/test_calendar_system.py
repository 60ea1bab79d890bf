"""
Тесты для CalendarSystem

Покрывает:
- Валидацию конфигурации (часовой пояс, диапазон дат, immutability)
- Границы недели для разных first_weekday
- Календарную арифметику недель (сохранение настенного времени, переполнение)
- Вспомогательные операции (start_of_day, start_of_month, is_same_day)
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from src.core.domain import CalendarSystem, DateInterval, Weekday
from src.core.errors import DateArithmeticError, WeekResolutionError

UTC = ZoneInfo("UTC")


@pytest.fixture
def sunday_utc() -> CalendarSystem:
    return CalendarSystem(first_weekday=Weekday.SUNDAY, timezone="UTC")


@pytest.fixture
def monday_new_york() -> CalendarSystem:
    return CalendarSystem(first_weekday=Weekday.MONDAY, timezone="America/New_York")


class TestConfiguration:
    """Тесты конфигурации модели"""

    def test_defaults(self) -> None:
        calendar = CalendarSystem()
        assert calendar.identifier == "gregorian"
        assert calendar.first_weekday == Weekday.SUNDAY
        assert calendar.timezone == "UTC"
        assert calendar.locale == "en"
        assert calendar.min_date == date.min
        assert calendar.max_date == date.max

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CalendarSystem(timezone="Mars/Olympus_Mons")

    def test_unsupported_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CalendarSystem(identifier="hebrew")

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CalendarSystem(min_date=date(2030, 1, 1), max_date=date(2020, 1, 1))

    def test_frozen(self, sunday_utc: CalendarSystem) -> None:
        with pytest.raises(ValidationError):
            sunday_utc.first_weekday = Weekday.MONDAY

    def test_weekday_from_string(self) -> None:
        calendar = CalendarSystem(first_weekday="saturday")
        assert calendar.first_weekday == Weekday.SATURDAY
        assert calendar.first_weekday.python_weekday == 5


class TestWeekInterval:
    """Тесты week_interval"""

    def test_sunday_first_week(self, sunday_utc: CalendarSystem) -> None:
        """Среда 14.10.2026 → неделя с воскресенья 11.10 по воскресенье 18.10"""
        interval = sunday_utc.week_interval(datetime(2026, 10, 14, 15, 30, tzinfo=UTC))

        assert interval == DateInterval(
            start=datetime(2026, 10, 11, tzinfo=UTC),
            end=datetime(2026, 10, 18, tzinfo=UTC),
        )

    def test_monday_first_week(self, monday_new_york: CalendarSystem) -> None:
        interval = monday_new_york.week_interval(datetime(2026, 10, 14, 12))

        assert interval is not None
        assert interval.start.replace(tzinfo=None) == datetime(2026, 10, 12)
        assert interval.end.replace(tzinfo=None) == datetime(2026, 10, 19)

    def test_first_weekday_itself_starts_week(self, sunday_utc: CalendarSystem) -> None:
        interval = sunday_utc.week_interval(datetime(2026, 10, 18, tzinfo=UTC))
        assert interval is not None
        assert interval.start == datetime(2026, 10, 18, tzinfo=UTC)

    def test_aware_input_converted_to_calendar_zone(self, monday_new_york: CalendarSystem) -> None:
        """Понедельник 02:00 UTC — это ещё воскресенье в Нью-Йорке"""
        interval = monday_new_york.week_interval(datetime(2026, 10, 19, 2, tzinfo=timezone.utc))
        assert interval is not None
        assert interval.start.date() == date(2026, 10, 12)

    def test_dst_week_is_shorter(self, monday_new_york: CalendarSystem) -> None:
        """Неделя перехода на летнее время длится 7 дней минус час"""
        interval = monday_new_york.week_interval(datetime(2026, 3, 4, 12))
        assert interval is not None
        assert interval.duration == timedelta(days=7, hours=-1)

    def test_week_beyond_max_date_unresolvable(self, sunday_utc: CalendarSystem) -> None:
        assert sunday_utc.week_interval(datetime(9999, 12, 31, tzinfo=UTC)) is None

    def test_week_outside_configured_range_unresolvable(self) -> None:
        calendar = CalendarSystem(min_date=date(2026, 1, 1), max_date=date(2026, 12, 31))
        assert calendar.week_interval(datetime(2026, 1, 1, tzinfo=UTC)) is None
        assert calendar.week_interval(datetime(2026, 6, 10, tzinfo=UTC)) is not None

    def test_require_week_interval_raises(self, sunday_utc: CalendarSystem) -> None:
        with pytest.raises(WeekResolutionError):
            sunday_utc.require_week_interval(datetime(9999, 12, 31, tzinfo=UTC))


class TestDateByAddingWeeks:
    """Тесты календарной арифметики"""

    def test_add_one_week(self, sunday_utc: CalendarSystem) -> None:
        result = sunday_utc.date_by_adding_weeks(datetime(2026, 10, 14, 9, tzinfo=UTC), 1)
        assert result == datetime(2026, 10, 21, 9, tzinfo=UTC)

    def test_subtract_one_week(self, sunday_utc: CalendarSystem) -> None:
        result = sunday_utc.date_by_adding_weeks(datetime(2026, 10, 14, 9, tzinfo=UTC), -1)
        assert result == datetime(2026, 10, 7, 9, tzinfo=UTC)

    def test_wall_clock_preserved_across_dst(self, monday_new_york: CalendarSystem) -> None:
        """10:00 EST + 1 неделя = 10:00 EDT"""
        result = monday_new_york.date_by_adding_weeks(datetime(2026, 3, 5, 10), 1)
        assert result.replace(tzinfo=None) == datetime(2026, 3, 12, 10)
        assert result.utcoffset() == timedelta(hours=-4)

    def test_overflow_raises(self, sunday_utc: CalendarSystem) -> None:
        with pytest.raises(DateArithmeticError):
            sunday_utc.date_by_adding_weeks(datetime(9999, 12, 31, 12, tzinfo=UTC), 1)

    def test_underflow_raises(self, sunday_utc: CalendarSystem) -> None:
        with pytest.raises(DateArithmeticError):
            sunday_utc.date_by_adding_weeks(datetime(1, 1, 3, tzinfo=UTC), -1)

    def test_configured_range_enforced(self) -> None:
        calendar = CalendarSystem(max_date=date(2026, 12, 31))
        with pytest.raises(DateArithmeticError):
            calendar.date_by_adding_weeks(datetime(2026, 12, 28, tzinfo=UTC), 1)


class TestDayHelpers:
    """Тесты start_of_day / start_of_month / is_same_day"""

    def test_start_of_day(self, monday_new_york: CalendarSystem) -> None:
        start = monday_new_york.start_of_day(date(2026, 3, 8))
        assert start.replace(tzinfo=None) == datetime(2026, 3, 8)
        assert start.utcoffset() == timedelta(hours=-5)

    def test_start_of_month(self, sunday_utc: CalendarSystem) -> None:
        result = sunday_utc.start_of_month(datetime(2026, 10, 14, 18, tzinfo=UTC))
        assert result == datetime(2026, 10, 1, tzinfo=UTC)

    def test_is_same_day_uses_calendar_zone(self, monday_new_york: CalendarSystem) -> None:
        late_evening = datetime(2026, 10, 14, 23, tzinfo=ZoneInfo("America/New_York"))
        next_utc_day = datetime(2026, 10, 15, 2, tzinfo=timezone.utc)
        assert monday_new_york.is_same_day(late_evening, next_utc_day)


class TestDateInterval:
    """Тесты DateInterval"""

    def test_contains_is_half_open(self) -> None:
        start = datetime(2026, 10, 11, tzinfo=UTC)
        interval = DateInterval(start=start, end=start + timedelta(days=7))

        assert interval.contains(start)
        assert interval.contains(start + timedelta(days=6, hours=23))
        assert not interval.contains(start + timedelta(days=7))

    def test_union(self) -> None:
        start = datetime(2026, 10, 11, tzinfo=UTC)
        first = DateInterval(start=start, end=start + timedelta(days=7))
        second = DateInterval(start=start + timedelta(days=7), end=start + timedelta(days=14))

        assert first.union(second) == DateInterval(start=start, end=start + timedelta(days=14))

    def test_rejects_naive_and_inverted(self) -> None:
        with pytest.raises(ValueError):
            DateInterval(start=datetime(2026, 1, 2), end=datetime(2026, 1, 3))
        with pytest.raises(ValueError):
            DateInterval(
                start=datetime(2026, 1, 3, tzinfo=UTC), end=datetime(2026, 1, 2, tzinfo=UTC)
            )
