"""Fluent builders: Difference.starting_at(a).to(b) и Difference.ending_at(b).from_(a)"""

from dataclasses import dataclass
from datetime import datetime

from calendiff.difference.span import Difference


@dataclass(frozen=True)
class ToBuilder:
    """Начало Span известно, ожидается конец."""

    from_: datetime

    def to(self, date: datetime) -> Difference:
        return Difference.between(self.from_, date)


@dataclass(frozen=True)
class FromBuilder:
    """Конец Span известен, ожидается начало."""

    to: datetime

    def from_(self, date: datetime) -> Difference:
        return Difference.between(date, self.to)
