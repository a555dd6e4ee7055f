"""
Contract Validation Module

Модуль для валидации JSON контрактов пакета calendiff.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    UnitAmountsValidator,
    load_schema,
    validate_unit_amounts,
)

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "load_schema",
    # Classes
    "ContractValidator",
    "UnitAmountsValidator",
    # Functions
    "validate_unit_amounts",
]
