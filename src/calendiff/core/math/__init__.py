"""
Core math modules для calendiff

Proration дробных календарных единиц и целочисленное усечение.
"""

# Rounding
from calendiff.core.math.rounding import (
    is_valid_float,
    truncate_toward_zero,
)

# Proration
from calendiff.core.math.proration import (
    estimate_whole_months,
    estimate_whole_years,
    interpolate,
    prorate,
    prorate_days,
    prorate_months,
    prorate_years,
)

__all__ = [
    # Rounding
    "is_valid_float",
    "truncate_toward_zero",
    # Proration
    "estimate_whole_months",
    "estimate_whole_years",
    "interpolate",
    "prorate",
    "prorate_days",
    "prorate_months",
    "prorate_years",
]
