"""
Instants — адаптер zoned timestamp поверх datetime/zoneinfo

Календарный движок пакета:
- datetime + zoneinfo (stdlib) для instant и часовых поясов
- dateutil.relativedelta для месячной/годовой арифметики и календарной разницы

Модуль — единственное место, где пакет касается арифметики datetime напрямую.
Span, proration и decomposition работают только через функции отсюда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точная разница и сравнение instant всегда выполняются в UTC
   (Python вычитает datetime с общим tzinfo по wall-clock, без учёта DST)
2. Календарные шаги (день/месяц/год) выполняются по wall-clock и затем
   разрешаются через UTC в реальный instant
3. Несуществующее wall-время (DST gap) разрешается по offset до перехода,
   неоднозначное (DST overlap) после ненулевого шага берёт первое вхождение
   (fold=0); шаг на 0 единиц возвращает исходный instant без изменений
4. relativedelta прижимает день к последнему дню целевого месяца:
   Jan 31 + 1 month = Feb 28 (Feb 29 в високосный год)
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final, Optional

from dateutil.relativedelta import relativedelta

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ONE_MICROSECOND: Final[timedelta] = timedelta(microseconds=1)

# Ключ положения внутри месяца: день, час, минута, секунда, микросекунда.
# Сравнивается лексикографически как строка.
INTRA_MONTH_KEY_FORMAT: Final[str] = "%02d%02d%02d%02d%06d"


# =============================================================================
# ЧАСОВЫЕ ПОЯСА
# =============================================================================


def zone_identifier(zone: Optional[tzinfo]) -> Optional[str]:
    """
    Идентификатор часового пояса.

    Args:
        zone: tzinfo или None

    Returns:
        - ZoneInfo.key для IANA зон ('America/Toronto')
        - str(zone) для прочих tzinfo ('UTC', 'UTC+02:00')
        - None если пояс не определён (naive datetime)
    """
    if zone is None:
        return None

    key = getattr(zone, "key", None)
    if key:
        return key

    return str(zone)


def timezone_name(moment: datetime) -> Optional[str]:
    """Идентификатор часового пояса instant (None для naive datetime)"""
    return zone_identifier(moment.tzinfo)


# =============================================================================
# ТОЧНАЯ АРИФМЕТИКА INSTANT
# =============================================================================


def to_utc(moment: datetime) -> datetime:
    return moment.astimezone(timezone.utc)


def microseconds_between(start: datetime, end: datetime) -> int:
    """
    Точное число микросекунд от start до end.

    Вычисляется на UTC instant, поэтому DST-переходы учитываются:
    сутки через fall-back дают 25 часов, через spring-forward 23 часа.

    Args:
        start: Начальный instant
        end: Конечный instant

    Returns:
        Целое число микросекунд (отрицательное если end раньше start)
    """
    return (to_utc(end) - to_utc(start)) // ONE_MICROSECOND


def is_before(a: datetime, b: datetime) -> bool:
    """a строго раньше b (сравнение instant, не wall-clock)"""
    return to_utc(a) < to_utc(b)


def resolve(moment: datetime) -> datetime:
    """
    Разрешение wall-clock времени в реальный instant своей зоны.

    Несуществующее время (DST gap) сдвигается вперёд на длину gap,
    неоднозначное разрешается по fold значения (после сложения с
    timedelta/relativedelta это fold=0, первое вхождение).
    """
    return to_utc(moment).astimezone(moment.tzinfo)


def add_microseconds(moment: datetime, amount: int) -> datetime:
    """Сдвиг instant на точное число микросекунд (без учёта wall-clock)"""
    return (to_utc(moment) + timedelta(microseconds=amount)).astimezone(moment.tzinfo)


# =============================================================================
# КАЛЕНДАРНАЯ АРИФМЕТИКА
# =============================================================================


def add_days(moment: datetime, amount: int) -> datetime:
    """
    Календарный сдвиг на amount дней.

    Wall-clock время сохраняется, длина каждого дня может быть 23/24/25 часов.
    Нулевой шаг возвращает moment как есть (fold не сбрасывается).
    """
    if amount == 0:
        return moment

    return resolve(moment + timedelta(days=amount))


def add_months(moment: datetime, amount: int) -> datetime:
    """
    Календарный сдвиг на amount месяцев (правило relativedelta).

    Examples:
        2024-01-31 + 1 month = 2024-02-29
        2023-01-31 + 1 month = 2023-02-28
        2024-02-29 + 12 months = 2025-02-28
    """
    if amount == 0:
        return moment

    return resolve(moment + relativedelta(months=amount))


def wall_clock(moment: datetime) -> datetime:
    """Naive wall-clock представление instant в его зоне"""
    return moment.replace(tzinfo=None)


def whole_wall_days(start: datetime, end: datetime) -> int:
    """Число целых wall-clock дней от start до end (floor)"""
    return (wall_clock(end) - wall_clock(start)).days


def calendar_difference(start: datetime, end: datetime) -> relativedelta:
    """
    Календарная разница полей (years, months, days, time) от start до end.

    Считается по wall-clock, как это делает календарь пользователя:
    2024-07-28 → 2024-08-30 = 1 month 2 days.
    """
    return relativedelta(wall_clock(end), wall_clock(start))


def month_index(moment: datetime) -> int:
    """Сквозной номер месяца: year * 12 + month"""
    return moment.year * 12 + moment.month


def intra_month_key(moment: datetime) -> str:
    """
    Строковый ключ положения instant внутри месяца.

    Формат INTRA_MONTH_KEY_FORMAT: '%02d%02d%02d%02d%06d'
    (day, hour, minute, second, microsecond).
    """
    return INTRA_MONTH_KEY_FORMAT % (
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.microsecond,
    )
