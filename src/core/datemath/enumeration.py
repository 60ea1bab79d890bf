"""
Перечисление моментов с дневной гранулярностью.

Для каждого следующего календарного дня берётся момент с тем же настенным
временем (час/минута/секунда), что и у стартового. Если это время пропущено
переводом часов, используется следующий существующий момент.
"""

from datetime import datetime, timedelta, tzinfo
from typing import Iterator, List

from src.core.datemath.wall_clock import resolve_wall_time
from src.core.domain.date_interval import DateInterval
from src.core.errors import DateArithmeticError


def iter_matching_times(start: datetime, tz: tzinfo) -> Iterator[datetime]:
    """
    Итератор по моментам следующих дней с настенным временем start.

    Каждый yield строго позже предыдущего. Итерация останавливается на
    границе представимого диапазона datetime.

    Args:
        start: Aware стартовый момент (не включается)
        tz: Часовой пояс, в котором сравнивается настенное время
    """
    local_start = start.astimezone(tz)
    wall = local_start.time().replace(microsecond=0, fold=0)
    day = local_start.date()
    previous = local_start

    while True:
        try:
            day = day + timedelta(days=1)
            candidate = resolve_wall_time(datetime.combine(day, wall), tz)
        except (OverflowError, DateArithmeticError):
            return

        if candidate > previous:
            previous = candidate
            yield candidate


def generate_dates(interval: DateInterval, tz: tzinfo) -> List[datetime]:
    """
    Даты интервала с дневной гранулярностью.

    Args:
        interval: Полуоткрытый интервал [start, end)
        tz: Часовой пояс календаря

    Returns:
        [interval.start, затем моменты строго после start и строго до end]
    """
    dates = [interval.start.astimezone(tz)]

    for moment in iter_matching_times(interval.start, tz):
        if moment >= interval.end:
            break
        dates.append(moment)

    return dates
