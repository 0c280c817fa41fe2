"""
JSON Schema Contract Validators

Модуль для валидации экспортируемых записей согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия
данных схемам.

Схемы:
- calendar_metadata.json (запись cal_info)
- date_breakdown.json (запись cal_from_sdn)

Записи валидируются в JSON-представлении (ключи месяцев — строки):
    model.model_dump(mode="json", by_alias=True, exclude_none=True)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'date_breakdown')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый валидатор: данные против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class CalendarMetadataValidator(ContractValidator):
    """Валидатор записи calendar_metadata (cal_info)."""

    def __init__(self):
        super().__init__("calendar_metadata")


class DateBreakdownValidator(ContractValidator):
    """Валидатор записи date_breakdown (cal_from_sdn)."""

    def __init__(self):
        super().__init__("date_breakdown")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_calendar_metadata(data: Dict[str, Any]) -> None:
    """
    Валидация calendar_metadata записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalendarMetadataValidator().validate(data)


def validate_date_breakdown(data: Dict[str, Any]) -> None:
    """
    Валидация date_breakdown записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DateBreakdownValidator().validate(data)
