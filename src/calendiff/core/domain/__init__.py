"""
Domain models and value objects.

Contains the zoned instant adapter, the Unit ladder and UnitAmount.
"""

from calendiff.core.domain.instants import (
    INTRA_MONTH_KEY_FORMAT,
    add_days,
    add_microseconds,
    add_months,
    calendar_difference,
    intra_month_key,
    is_before,
    microseconds_between,
    month_index,
    timezone_name,
    zone_identifier,
)
from calendiff.core.domain.units import (
    DAYS_PER_UNIT,
    MICROSECONDS_PER_UNIT,
    MONTHS_PER_UNIT,
    UNIT_LADDER,
    Unit,
    UnitAmount,
    ensure_exhaustive,
)

__all__ = [
    # Instants
    "INTRA_MONTH_KEY_FORMAT",
    "add_days",
    "add_microseconds",
    "add_months",
    "calendar_difference",
    "intra_month_key",
    "is_before",
    "microseconds_between",
    "month_index",
    "timezone_name",
    "zone_identifier",
    # Unit ladder
    "DAYS_PER_UNIT",
    "MICROSECONDS_PER_UNIT",
    "MONTHS_PER_UNIT",
    "UNIT_LADDER",
    "Unit",
    "UnitAmount",
    "ensure_exhaustive",
]
