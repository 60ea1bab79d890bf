"""
Wall Clock — разрешение локального времени в часовом поясе

Локальное "настенное" время может не существовать (переход на летнее время,
gap) или встречаться дважды (переход на зимнее время, fold). Модуль
переводит naive datetime в aware по политике "next matching time":

- существующее время → оно же
- неоднозначное время → первое вхождение (fold=0)
- пропущенное время → первый момент после разрыва (02:30 → 03:00)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда существующий момент в поясе tz
2. Результат никогда не раньше запрошенного настенного времени
3. Переполнение datetime → DateArithmeticError, не OverflowError
"""

from datetime import datetime, timedelta, timezone, tzinfo

from src.core.errors import DateArithmeticError


def _utc_candidates(naive: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """UTC-моменты для обеих интерпретаций (fold=0, fold=1) настенного времени."""
    try:
        first = naive.replace(tzinfo=tz, fold=0).astimezone(timezone.utc)
        second = naive.replace(tzinfo=tz, fold=1).astimezone(timezone.utc)
    except OverflowError as e:
        raise DateArithmeticError(f"Wall time {naive.isoformat()} is out of range") from e
    return first, second


def is_nonexistent(naive: datetime, tz: tzinfo) -> bool:
    """
    Проверка, что настенное время пропущено переводом часов.

    Args:
        naive: Локальное время без tzinfo
        tz: Часовой пояс

    Returns:
        True если такого момента в поясе tz не существует
    """
    first, _ = _utc_candidates(naive, tz)
    return first.astimezone(tz).replace(tzinfo=None) != naive


def is_ambiguous(naive: datetime, tz: tzinfo) -> bool:
    """True если настенное время встречается в поясе tz дважды."""
    first, second = _utc_candidates(naive, tz)
    if first == second:
        return False
    return not is_nonexistent(naive, tz)


def resolve_wall_time(naive: datetime, tz: tzinfo) -> datetime:
    """
    Перевод настенного времени в aware datetime по политике "next matching time".

    Args:
        naive: Локальное время без tzinfo
        tz: Часовой пояс

    Returns:
        Aware datetime в поясе tz

    Raises:
        DateArithmeticError: Если момент вне диапазона datetime

    Examples:
        >>> ny = ZoneInfo("America/New_York")
        >>> resolve_wall_time(datetime(2026, 3, 8, 2, 30), ny)
        datetime.datetime(2026, 3, 8, 3, 0, tzinfo=zoneinfo.ZoneInfo(key='America/New_York'))
    """
    if naive.tzinfo is not None:
        raise ValueError(f"Expected naive datetime, got {naive.isoformat()}")

    first, second = _utc_candidates(naive, tz)
    resolved = first.astimezone(tz)
    if resolved.replace(tzinfo=None) == naive:
        return resolved

    # Gap: fold=0 берёт смещение до перехода, fold=1 после.
    # Момент перехода лежит между двумя интерпретациями.
    lo, hi = sorted((first, second))
    lo = lo.replace(microsecond=0)
    target_offset = hi.astimezone(tz).utcoffset()

    lo_s, hi_s = 0, int((hi - lo).total_seconds()) + 1
    while hi_s - lo_s > 1:
        mid_s = (lo_s + hi_s) // 2
        if (lo + timedelta(seconds=mid_s)).astimezone(tz).utcoffset() == target_offset:
            hi_s = mid_s
        else:
            lo_s = mid_s

    return (lo + timedelta(seconds=hi_s)).astimezone(tz)
