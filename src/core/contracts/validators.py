"""
CalculationResult JSON contract

Сериализованный CalculationResult должен соответствовать
contracts/schema/calculation_result.json (JSON Schema Draft 2020-12).

Контракт строже pydantic модели:
- FIB_ITER: операнд целый >= 1, результат целый >= 0
- value должен быть JSON-числом (NaN/Inf сериализуются в null и не проходят)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator, SchemaError, ValidationError

from src.core.domain.calculation import CalculationResult

CALCULATION_RESULT_SCHEMA = "calculation_result"

# contracts/schema/ в корне проекта (src/core/contracts → корень)
SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (кэшируется).

    Raises:
        FileNotFoundError: если файла схемы нет
        ValueError: если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


class CalculationResultContract:
    """
    Контракт сериализованного CalculationResult.

    serialize(): единственный путь превращения результата в JSON-payload:
    payload, не прошедший схему, наружу не отдаётся.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._validator = Draft202012Validator(
            load_schema(CALCULATION_RESULT_SCHEMA, schema_dir)
        )

    def validate(self, payload: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первое (наиболее релевантное) нарушение схемы
        """
        self._validator.validate(payload)

    def is_valid(self, payload: Dict[str, Any]) -> bool:
        return self._validator.is_valid(payload)

    def describe_errors(self, payload: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде 'path: message', отсортированные по пути."""
        errors = sorted(self._validator.iter_errors(payload), key=lambda e: e.json_path)
        return [f"{e.json_path}: {e.message}" for e in errors]

    def serialize(self, result: CalculationResult) -> Dict[str, Any]:
        """
        CalculationResult → JSON-совместимый dict, проверенный по схеме.

        Raises:
            ValidationError: если результат не представим контрактом (NaN/Inf)
        """
        payload = json.loads(result.model_dump_json())
        self.validate(payload)
        return payload

    def parse(self, payload: Dict[str, Any]) -> CalculationResult:
        """JSON-payload → CalculationResult; сначала схема, затем модель."""
        self.validate(payload)
        return CalculationResult.model_validate(payload)


def validate_calculation_result(payload: Dict[str, Any]) -> None:
    """
    Валидация сериализованного CalculationResult.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalculationResultContract().validate(payload)
