"""
Core domain models, calendar primitives, and invariants.

This module contains the foundational building blocks of calendiff:
zoned instant arithmetic, the unit ladder, proration and rounding.
"""
