"""
Proration — дробные дни, месяцы и годы между двумя instant

Общий алгоритм bracket-and-interpolate:

1. Нормализация: start <= end, знак запоминается
2. Грубая оценка целых единиц n по календарным полям
3. floor_end = advance(start, n)
   - floor_end <= end → пара (n, n + 1)
   - иначе → пара (n, n - 1)
4. ceil_end = advance(start, n ± 1)
5. Интерполяция по прогрессу end внутри [floor_end, ceil_end):
       result = sign * (n * (total - part) + (n ± 1) * part) / total

Веса:
- дни: точные микросекунды (длина дня 23/24/25 часов через DST)
- месяцы/годы: дробные дни (part = days(floor_end, end),
  total = part + days(end, ceil_end))

Грубые оценки:
- дни: целые wall-clock дни
- месяцы: разница year * 12 + month, минус 1 если строковый ключ
  положения end внутри месяца меньше ключа start
- годы: поле years календарной разницы relativedelta
  (корректно для границ Feb 29)
"""

import logging
from datetime import datetime
from typing import Callable

from calendiff.core.domain.instants import (
    add_days,
    add_months,
    calendar_difference,
    intra_month_key,
    is_before,
    microseconds_between,
    month_index,
    whole_wall_days,
)

logger = logging.getLogger(__name__)

Advance = Callable[[datetime, int], datetime]
Estimate = Callable[[datetime, datetime], int]
Weigh = Callable[[datetime, datetime, datetime], tuple[float, float]]


# =============================================================================
# ОБЩИЙ АЛГОРИТМ
# =============================================================================


def interpolate(whole: int, neighbour: int, part: float, total: float) -> float:
    """
    Взвешенное среднее двух целых границ.

    Args:
        whole: Граница n (advance(start, n) = floor_end)
        neighbour: Соседняя граница n ± 1
        part: Прогресс end от floor_end
        total: Длина интервала [floor_end, ceil_end)

    Returns:
        (whole * (total - part) + neighbour * part) / total
    """
    return (whole * (total - part) + neighbour * part) / total


def prorate(
    from_: datetime,
    to: datetime,
    estimate: Estimate,
    advance: Advance,
    weigh: Weigh,
) -> float:
    """
    Дробное количество единиц от from_ до to.

    Args:
        from_: Начало Span
        to: Конец Span (может быть раньше from_)
        estimate: Грубая оценка целых единиц для нормализованной пары
        advance: Календарный шаг единицы
        weigh: (floor_end, end, ceil_end) → (part, total)

    Returns:
        Дробное количество единиц, знак следует to - from_
    """
    negative = is_before(to, from_)
    start, end = (to, from_) if negative else (from_, to)

    whole = estimate(start, end)
    floor_end = advance(start, whole)
    neighbour = whole - 1 if is_before(end, floor_end) else whole + 1
    ceil_end = advance(start, neighbour)

    part, total = weigh(floor_end, end, ceil_end)

    logger.debug(
        "Proration bracket (%d, %d) for %s..%s: part=%r total=%r",
        whole,
        neighbour,
        start.isoformat(),
        end.isoformat(),
        part,
        total,
    )

    sign = -1 if negative else 1
    return sign * interpolate(whole, neighbour, part, total)


# =============================================================================
# ОЦЕНКИ И ВЕСА
# =============================================================================


def estimate_whole_months(start: datetime, end: datetime) -> int:
    """
    Грубая оценка целых месяцев.

    Сравнение положений внутри месяца идёт строковыми ключами
    day+hour+minute+second+microsecond, а не датами.
    """
    months = month_index(end) - month_index(start)

    if intra_month_key(end) < intra_month_key(start):
        months -= 1

    return months


def estimate_whole_years(start: datetime, end: datetime) -> int:
    return calendar_difference(start, end).years


def _microsecond_weights(
    floor_end: datetime, end: datetime, ceil_end: datetime
) -> tuple[float, float]:
    part = float(microseconds_between(floor_end, end))
    total = float(microseconds_between(floor_end, ceil_end))
    return part, total


def _day_count_weights(
    floor_end: datetime, end: datetime, ceil_end: datetime
) -> tuple[float, float]:
    part = prorate_days(floor_end, end)
    return part, part + prorate_days(end, ceil_end)


def _add_years(moment: datetime, amount: int) -> datetime:
    return add_months(moment, amount * 12)


# =============================================================================
# ДНИ / МЕСЯЦЫ / ГОДЫ
# =============================================================================


def prorate_days(from_: datetime, to: datetime) -> float:
    """
    Дробные календарные дни.

    Через DST-переход длина дня не 24 часа: сутки 2024-11-03 01:24 →
    2024-11-04 01:24 в America/Toronto дают 25 часов, но ровно 1.0 день.
    """
    return prorate(from_, to, whole_wall_days, add_days, _microsecond_weights)


def prorate_months(from_: datetime, to: datetime) -> float:
    """Дробные календарные месяцы (вес — доля дней в месяце-окне)"""
    return prorate(from_, to, estimate_whole_months, add_months, _day_count_weights)


def prorate_years(from_: datetime, to: datetime) -> float:
    """Дробные календарные годы (вес — доля дней в году-окне)"""
    return prorate(from_, to, estimate_whole_years, _add_years, _day_count_weights)
