"""
JSON Schema Contract Validators

Модуль для валидации payload-запросов к тулкиту (то, что передаёт слой
представления: формы матриц и таблиц точек) согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- linear_system.json     (прямые методы)
- iterative_system.json  (Гаусс-Зейдель)
- point_set.json         (интерполяция, регрессия, квадратуры)

Контракт проверяет только форму payload. Согласованность размерностей
(квадратность, длина b) остаётся за алгоритмами: это штатный отказ
DIMENSION_MISMATCH, а не ошибка контракта.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'point_set')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Все ошибки валидации в человекочитаемом виде.

        Формат: "<json path>: <message>", отсортировано по пути.
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(e.path))
        return [f"{e.json_path}: {e.message}" for e in errors]


class LinearSystemValidator(ContractValidator):
    """Валидатор запроса к прямым методам."""

    schema_name = "linear_system"


class IterativeSystemValidator(ContractValidator):
    """Валидатор запроса к методу Гаусса-Зейделя."""

    schema_name = "iterative_system"


class PointSetValidator(ContractValidator):
    """Валидатор запроса с таблицей точек."""

    schema_name = "point_set"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_linear_system(data: Dict[str, Any]) -> None:
    """
    Валидация запроса к прямым методам.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LinearSystemValidator().validate(data)


def validate_iterative_system(data: Dict[str, Any]) -> None:
    """
    Валидация запроса к методу Гаусса-Зейделя.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IterativeSystemValidator().validate(data)


def validate_point_set(data: Dict[str, Any]) -> None:
    """
    Валидация запроса с таблицей точек.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PointSetValidator().validate(data)

