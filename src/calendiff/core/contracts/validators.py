"""
JSON Schema Contract Validators

Валидация сериализованных разложений Span против JSON Schema (jsonschema).

Схемы (calendiff/core/contracts/schema/):
- unit_amounts.json — список {"unit": ..., "amount": ...}
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, SchemaError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы (кэшируется).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной Draft 2020-12 схемой
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


class ContractValidator:
    """Валидатор данных против одной схемы из SCHEMA_DIR."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)


class UnitAmountsValidator(ContractValidator):
    def __init__(self):
        super().__init__("unit_amounts")


def validate_unit_amounts(data: List[Dict[str, Any]]) -> None:
    """
    Валидация сериализованного разложения Span.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UnitAmountsValidator().validate(data)
