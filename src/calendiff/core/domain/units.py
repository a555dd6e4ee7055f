"""
Unit Ladder — упорядоченный набор единиц времени

13 единиц от микросекунды до тысячелетия (порядок: от меньшей к большей).
Каждая единица знает:
- свой шаг advance(moment, amount) по календарю
- фиксированное отношение к следующей меньшей единице (если оно постоянно)

Правила шага:
- MICROSECOND..HOUR: точная арифметика на instant (UTC)
- DAY, WEEK: календарные дни по wall-clock (WEEK = 7 дней)
- MONTH..MILLENNIUM: календарные месяцы через relativedelta
  (QUARTER = 3, YEAR = 12, DECADE = 120, CENTURY = 1200, MILLENNIUM = 12000)

ИНВАРИАНТ: каждая таблица диспетчеризации покрывает все 13 единиц,
иначе импорт модуля падает (ensure_exhaustive).
"""

from datetime import datetime
from enum import Enum
from typing import Final, Mapping, Optional

from pydantic import BaseModel, Field

from calendiff.core.domain.instants import add_days, add_microseconds, add_months


# =============================================================================
# ENUMS
# =============================================================================


class Unit(str, Enum):
    """Единица времени (порядок объявления: от меньшей к большей)"""

    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    @property
    def smaller(self) -> Optional["Unit"]:
        """Следующая меньшая единица (None для MICROSECOND)"""
        position = UNIT_LADDER.index(self)
        return UNIT_LADDER[position - 1] if position > 0 else None

    @property
    def ratio_to_smaller(self) -> Optional[int]:
        """
        Постоянное отношение к следующей меньшей единице.

        None если отношение зависит от календаря:
        DAY → HOUR (23/24/25 часов), MONTH → WEEK (28..31 дней),
        MICROSECOND (меньшей единицы нет).
        """
        return RATIO_TO_SMALLER[self]

    @property
    def is_calendar_relative(self) -> bool:
        """Шаг единицы зависит от календаря (длина дня/месяца/года)"""
        return self not in MICROSECONDS_PER_UNIT

    def advance(self, moment: datetime, amount: int) -> datetime:
        """
        Сдвиг moment на amount единиц.

        Args:
            moment: Исходный zoned timestamp
            amount: Целое число единиц (может быть отрицательным)

        Returns:
            Новый zoned timestamp в той же зоне
        """
        if self in MICROSECONDS_PER_UNIT:
            return add_microseconds(moment, amount * MICROSECONDS_PER_UNIT[self])

        if self in DAYS_PER_UNIT:
            return add_days(moment, amount * DAYS_PER_UNIT[self])

        return add_months(moment, amount * MONTHS_PER_UNIT[self])


# Порядок от меньшей к большей
UNIT_LADDER: Final[tuple[Unit, ...]] = tuple(Unit)


# =============================================================================
# ТАБЛИЦЫ ЕДИНИЦ
# =============================================================================

MICROSECONDS_PER_UNIT: Final[Mapping[Unit, int]] = {
    Unit.MICROSECOND: 1,
    Unit.MILLISECOND: 1_000,
    Unit.SECOND: 1_000_000,
    Unit.MINUTE: 60_000_000,
    Unit.HOUR: 3_600_000_000,
}

DAYS_PER_UNIT: Final[Mapping[Unit, int]] = {
    Unit.DAY: 1,
    Unit.WEEK: 7,
}

MONTHS_PER_UNIT: Final[Mapping[Unit, int]] = {
    Unit.MONTH: 1,
    Unit.QUARTER: 3,
    Unit.YEAR: 12,
    Unit.DECADE: 120,
    Unit.CENTURY: 1_200,
    Unit.MILLENNIUM: 12_000,
}

RATIO_TO_SMALLER: Final[Mapping[Unit, Optional[int]]] = {
    Unit.MICROSECOND: None,
    Unit.MILLISECOND: 1_000,
    Unit.SECOND: 1_000,
    Unit.MINUTE: 60,
    Unit.HOUR: 60,
    Unit.DAY: None,
    Unit.WEEK: 7,
    Unit.MONTH: None,
    Unit.QUARTER: 3,
    Unit.YEAR: 4,
    Unit.DECADE: 10,
    Unit.CENTURY: 10,
    Unit.MILLENNIUM: 10,
}


def ensure_exhaustive(table: Mapping[Unit, object], name: str) -> None:
    """
    Проверка, что таблица диспетчеризации покрывает все единицы.

    Raises:
        RuntimeError: Если хотя бы одна единица не покрыта
    """
    missing = [unit.value for unit in Unit if unit not in table]
    if missing:
        raise RuntimeError(f"{name} does not cover units: {', '.join(missing)}")


ensure_exhaustive(
    {**MICROSECONDS_PER_UNIT, **DAYS_PER_UNIT, **MONTHS_PER_UNIT}, "Unit.advance"
)
ensure_exhaustive(RATIO_TO_SMALLER, "RATIO_TO_SMALLER")


# =============================================================================
# UNIT AMOUNT
# =============================================================================


class UnitAmount(BaseModel):
    """
    Целое количество одной единицы — элемент разложения Span.

    Immutable модель (frozen=True). Знак amount совпадает со знаком
    остатка Span в момент извлечения единицы.
    """

    unit: Unit = Field(..., description="Единица времени")
    amount: int = Field(..., description="Целое количество единиц (со знаком)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, unit: Unit, amount: int) -> "UnitAmount":
        return cls(unit=unit, amount=amount)

    @classmethod
    def microseconds(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.MICROSECOND, amount=amount)

    @classmethod
    def milliseconds(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.MILLISECOND, amount=amount)

    @classmethod
    def seconds(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.SECOND, amount=amount)

    @classmethod
    def minutes(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.MINUTE, amount=amount)

    @classmethod
    def hours(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.HOUR, amount=amount)

    @classmethod
    def days(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.DAY, amount=amount)

    @classmethod
    def weeks(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.WEEK, amount=amount)

    @classmethod
    def months(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.MONTH, amount=amount)

    @classmethod
    def quarters(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.QUARTER, amount=amount)

    @classmethod
    def years(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.YEAR, amount=amount)

    @classmethod
    def decades(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.DECADE, amount=amount)

    @classmethod
    def centuries(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.CENTURY, amount=amount)

    @classmethod
    def millennia(cls, amount: int) -> "UnitAmount":
        return cls(unit=Unit.MILLENNIUM, amount=amount)

    def advance(self, moment: datetime) -> datetime:
        """Применение количества к moment: unit.advance(moment, amount)"""
        return self.unit.advance(moment, self.amount)

    def to_payload(self) -> dict:
        """
        Сериализация для контракта unit_amounts.

        Returns:
            {"unit": "<значение Unit>", "amount": <int>}
        """
        return {"unit": self.unit.value, "amount": self.amount}

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.value}"
