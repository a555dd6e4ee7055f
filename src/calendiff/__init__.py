"""
calendiff — календарная разница между двумя zoned datetime.

    >>> from calendiff import Difference, Unit
    >>> span = Difference.between(start, end)
    >>> span.to_months()
    >>> span.to_units([Unit.YEAR, Unit.MONTH, Unit.DAY])
"""

from calendiff.core.domain.units import Unit, UnitAmount
from calendiff.difference import (
    Difference,
    FromBuilder,
    InvalidUnit,
    TimezoneMismatch,
    ToBuilder,
    between,
)

__version__ = "0.1.0"

__all__ = [
    "Difference",
    "between",
    "FromBuilder",
    "ToBuilder",
    "Unit",
    "UnitAmount",
    "InvalidUnit",
    "TimezoneMismatch",
]
