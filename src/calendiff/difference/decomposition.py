"""
Decomposition — разложение Span на целые количества единиц

Алгоритм:
1. Все элементы запроса проверяются до начала вычислений (all-or-nothing)
2. Лестница единиц обходится от большей к меньшей (MILLENNIUM → MICROSECOND),
   порядок в запросе не важен, дубликаты игнорируются
3. Для каждой запрошенной единицы:
   - amount = truncate_toward_zero(span.to_unit(unit))
   - если advance(span.from_, amount) выходит за span.to (прижим конца
     месяца при шаге назад), amount сдвигается на 1 к нулю
   - span = Span(unit.advance(span.from_, amount), span.to)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательный advance исходного from_ на каждое извлечённое
   количество (в порядке выдачи) даёт ровно исходный to, если запрошена
   MICROSECOND
2. Усечение к нулю: для отрицательного Span все количества <= 0
3. span.to не меняется, сжимается только from_
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Iterable

from calendiff.core.domain.instants import is_before, microseconds_between
from calendiff.core.domain.units import UNIT_LADDER, Unit, UnitAmount
from calendiff.core.math.rounding import truncate_toward_zero
from calendiff.difference.exceptions import InvalidUnit

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from calendiff.difference.span import Difference


def validate_units(units: Iterable[object]) -> list[Unit]:
    """
    Проверка запроса единиц.

    Raises:
        InvalidUnit: Если хотя бы один элемент не Unit (None → 'NULL')
    """
    requested = list(units)

    for candidate in requested:
        if not isinstance(candidate, Unit):
            raise InvalidUnit.from_value(candidate)

    return requested


def extract_amount(span: "Difference", unit: Unit) -> int:
    """
    Целое количество unit в span (усечение к нулю).

    Микросекунды берутся точным целым, без прохода через float.
    """
    if unit is Unit.MICROSECOND:
        return microseconds_between(span.from_, span.to)

    return truncate_toward_zero(span.to_unit(unit))


def _overshoots(span: "Difference", moment: datetime) -> bool:
    """moment лежит за span.to в направлении span"""
    if is_before(span.to, span.from_):
        return is_before(moment, span.to)

    return is_before(span.to, moment)


def decompose(span: "Difference", units: Iterable[object]) -> list[UnitAmount]:
    """
    Разложение span на непересекающиеся целые количества единиц.

    Args:
        span: Исходный Span
        units: Запрошенные единицы (любой порядок)

    Returns:
        UnitAmount от большей единицы к меньшей

    Raises:
        InvalidUnit: Если запрос содержит не-Unit элемент
    """
    wanted = set(validate_units(units))
    amounts: list[UnitAmount] = []
    current = span

    for unit in reversed(UNIT_LADDER):
        if unit not in wanted:
            continue

        amount = extract_amount(current, unit)
        moment = unit.advance(current.from_, amount)

        # Шаг не выходит за to: иначе остаток меняет знак
        while amount and _overshoots(current, moment):
            amount -= 1 if amount > 0 else -1
            moment = unit.advance(current.from_, amount)

        amounts.append(UnitAmount(unit=unit, amount=amount))
        current = current.with_start(moment)

        logger.debug("Extracted %d %s, remaining from %s", amount, unit.value, current.from_)

    return amounts
