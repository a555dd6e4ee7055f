"""
Difference — Span между двумя zoned instant

Immutable пара (from_, to) в одном часовом поясе. Все производные значения —
чистые функции пары и кэшируются лениво в self._cache.

Кэш без блокировок: при одновременном первом доступе значение может быть
вычислено дважды, результат детерминирован и одинаков.

Единицы:
- microseconds..hours: точная разница instant (UTC) / фиксированный делитель
- days: proration по календарным дням (длина дня через DST 23/25 часов)
- weeks: days / 7
- months, years: proration по дням внутри календарного окна
- quarters = months / 3, decades/centuries/millennia = years / 10/100/1000
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Final, Iterable, Mapping

from dateutil.relativedelta import relativedelta

from calendiff.core.contracts import validate_unit_amounts
from calendiff.core.domain.instants import (
    calendar_difference,
    is_before,
    microseconds_between,
    timezone_name,
)
from calendiff.core.domain.units import Unit, UnitAmount, ensure_exhaustive
from calendiff.core.math.proration import prorate_days, prorate_months, prorate_years
from calendiff.difference.decomposition import decompose
from calendiff.difference.exceptions import TimezoneMismatch

if TYPE_CHECKING:
    from calendiff.difference.builders import FromBuilder, ToBuilder


# =============================================================================
# ДЕЛИТЕЛИ
# =============================================================================

MICROSECONDS_PER_MILLISECOND: Final[float] = 1_000.0
MICROSECONDS_PER_SECOND: Final[float] = 1_000_000.0
MICROSECONDS_PER_MINUTE: Final[float] = 60_000_000.0
MICROSECONDS_PER_HOUR: Final[float] = 3_600_000_000.0

DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_QUARTER: Final[int] = 3
YEARS_PER_DECADE: Final[int] = 10
YEARS_PER_CENTURY: Final[int] = 100
YEARS_PER_MILLENNIUM: Final[int] = 1_000


# =============================================================================
# DIFFERENCE
# =============================================================================


@dataclass(frozen=True)
class Difference:
    """
    Span от from_ до to.

    Raises (при создании):
        TimezoneMismatch: Если пояс любой из дат не определён или пояса различны
    """

    from_: datetime
    to: datetime
    _cache: dict[str, object] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        from_zone = timezone_name(self.from_)
        to_zone = timezone_name(self.to)

        if from_zone is None or to_zone is None or from_zone != to_zone:
            raise TimezoneMismatch.from_timezones(self.from_.tzinfo, self.to.tzinfo)

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def between(cls, from_: datetime, to: datetime) -> "Difference":
        return cls(from_, to)

    @staticmethod
    def starting_at(date: datetime) -> "ToBuilder":
        """Fluent: Difference.starting_at(a).to(b)"""
        from calendiff.difference.builders import ToBuilder

        return ToBuilder(date)

    @staticmethod
    def ending_at(date: datetime) -> "FromBuilder":
        """Fluent: Difference.ending_at(b).from_(a)"""
        from calendiff.difference.builders import FromBuilder

        return FromBuilder(date)

    def with_start(self, moment: datetime) -> "Difference":
        """Span с тем же to и новым началом"""
        return Difference.between(moment, self.to)

    def _cached(self, key: str, compute: Callable[[], object]):
        if key in self._cache:
            return self._cache[key]

        value = compute()
        self._cache[key] = value
        return value

    # -------------------------------------------------------------------------
    # Календарная разница полей
    # -------------------------------------------------------------------------

    def to_interval(self, absolute: bool = False) -> relativedelta:
        """
        Календарная разница полей (years..microseconds) по wall-clock.

        Args:
            absolute: Если True, разница берётся между упорядоченной парой
                (все поля неотрицательны)
        """
        if absolute and is_before(self.to, self.from_):
            start, end = self.to, self.from_
        else:
            start, end = self.from_, self.to

        key = "interval_absolute" if absolute else "interval_relative"
        return self._cached(key, lambda: calendar_difference(start, end))

    # -------------------------------------------------------------------------
    # Точные единицы
    # -------------------------------------------------------------------------

    def to_microseconds(self) -> float:
        return self._cached(
            "microseconds", lambda: float(microseconds_between(self.from_, self.to))
        )

    def to_milliseconds(self) -> float:
        return self.to_microseconds() / MICROSECONDS_PER_MILLISECOND

    def to_seconds(self) -> float:
        return self.to_microseconds() / MICROSECONDS_PER_SECOND

    def to_minutes(self) -> float:
        return self.to_microseconds() / MICROSECONDS_PER_MINUTE

    def to_hours(self) -> float:
        return self.to_microseconds() / MICROSECONDS_PER_HOUR

    # -------------------------------------------------------------------------
    # Календарные единицы
    # -------------------------------------------------------------------------

    def to_days(self) -> float:
        return self._cached("days", lambda: prorate_days(self.from_, self.to))

    def to_weeks(self) -> float:
        return self.to_days() / DAYS_PER_WEEK

    def to_months(self) -> float:
        return self._cached("months", lambda: prorate_months(self.from_, self.to))

    def to_quarters(self) -> float:
        return self.to_months() / MONTHS_PER_QUARTER

    def to_years(self) -> float:
        return self._cached("years", lambda: prorate_years(self.from_, self.to))

    def to_decades(self) -> float:
        return self.to_years() / YEARS_PER_DECADE

    def to_centuries(self) -> float:
        return self.to_years() / YEARS_PER_CENTURY

    def to_millennia(self) -> float:
        return self.to_years() / YEARS_PER_MILLENNIUM

    # -------------------------------------------------------------------------
    # Диспетчеризация и разложение
    # -------------------------------------------------------------------------

    def to_unit(self, unit: Unit) -> float:
        """Дробное количество unit в Span"""
        return getattr(self, _ACCESSORS[unit])()

    def to_units(self, units: Iterable[Unit]) -> list[UnitAmount]:
        """
        Разложение Span на целые количества запрошенных единиц.

        Returns:
            UnitAmount от большей единицы к меньшей (порядок запроса не важен)

        Raises:
            InvalidUnit: Если запрос содержит не-Unit элемент
        """
        return decompose(self, units)

    def to_units_payload(self, units: Iterable[Unit]) -> list[dict]:
        """Разложение в виде payload контракта unit_amounts (валидируется)"""
        payload = [amount.to_payload() for amount in self.to_units(units)]
        validate_unit_amounts(payload)
        return payload

    # -------------------------------------------------------------------------
    # Статические shortcut'ы: Difference.<unit>(from_, to)
    # -------------------------------------------------------------------------

    @staticmethod
    def microseconds(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_microseconds()

    @staticmethod
    def milliseconds(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_milliseconds()

    @staticmethod
    def seconds(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_seconds()

    @staticmethod
    def minutes(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_minutes()

    @staticmethod
    def hours(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_hours()

    @staticmethod
    def days(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_days()

    @staticmethod
    def weeks(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_weeks()

    @staticmethod
    def months(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_months()

    @staticmethod
    def quarters(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_quarters()

    @staticmethod
    def years(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_years()

    @staticmethod
    def decades(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_decades()

    @staticmethod
    def centuries(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_centuries()

    @staticmethod
    def millennia(from_: datetime, to: datetime) -> float:
        return Difference.between(from_, to).to_millennia()


_ACCESSORS: Final[Mapping[Unit, str]] = {
    Unit.MICROSECOND: "to_microseconds",
    Unit.MILLISECOND: "to_milliseconds",
    Unit.SECOND: "to_seconds",
    Unit.MINUTE: "to_minutes",
    Unit.HOUR: "to_hours",
    Unit.DAY: "to_days",
    Unit.WEEK: "to_weeks",
    Unit.MONTH: "to_months",
    Unit.QUARTER: "to_quarters",
    Unit.YEAR: "to_years",
    Unit.DECADE: "to_decades",
    Unit.CENTURY: "to_centuries",
    Unit.MILLENNIUM: "to_millennia",
}

ensure_exhaustive(_ACCESSORS, "Difference.to_unit")


def between(from_: datetime, to: datetime) -> Difference:
    """Span от from_ до to (см. Difference.between)"""
    return Difference.between(from_, to)
