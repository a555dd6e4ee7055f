"""Difference — Span между двумя zoned instant и его разложение на единицы.

- Difference: immutable пара (from_, to) в одном часовом поясе
- Дробные количества от микросекунд до тысячелетий
- Разложение на целые количества единиц (от большей к меньшей)
"""

from .span import Difference, between
from .builders import FromBuilder, ToBuilder
from .decomposition import decompose, validate_units
from .exceptions import InvalidUnit, TimezoneMismatch

__all__ = [
    "Difference",
    "between",
    "FromBuilder",
    "ToBuilder",
    "decompose",
    "validate_units",
    "InvalidUnit",
    "TimezoneMismatch",
]
