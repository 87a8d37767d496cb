"""
JSON Schema Contract Validators

Модуль для валидации JSON данных (API payload, экспорт) согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- client.json  — email проверяется форматом "client-email" (is_valid_email)
- invoice.json — даты форматом "date"; due_date >= issue_date проверяется
  InvoiceValidator поверх схемы
- payment.json

Контракт принимает ровно то, что принимают pydantic-модели src.core.domain.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, FormatChecker, ValidationError

from src.core.money.email import is_valid_email


# =============================================================================
# FORMATS
# =============================================================================

CLIENT_EMAIL_FORMAT: Final[str] = "client-email"

# Все стандартные форматы (включая "date") + форматы домена
FORMAT_CHECKER: Final[FormatChecker] = FormatChecker()


@FORMAT_CHECKER.checks(CLIENT_EMAIL_FORMAT)
def is_client_email(instance: object) -> bool:
    """Формат client-email: тот же шаблон, что и у модели Client."""
    if not isinstance(instance, str):
        return True
    return is_valid_email(instance)


def _parse_date(value: object) -> Optional[date]:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в contracts/schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'invoice')

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

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

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

    Валидация в два шага:
    1. JSON Schema (с проверкой форматов через FORMAT_CHECKER)
    2. Межполевые правила домена (check_rules), которые схема не выражает
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, format_checker=FORMAT_CHECKER)

    def check_rules(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Межполевые правила контракта. По умолчанию правил нет."""
        return iter(())

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы и правил домена.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        self.validator.validate(data)
        for error in self.check_rules(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return next(self.iter_errors(data), None) is None

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты: сначала ошибки схемы, затем правил домена
        """
        yield from self.validator.iter_errors(data)
        yield from self.check_rules(data)


class ClientValidator(ContractValidator):
    """Валидатор для client контракта."""

    def __init__(self):
        super().__init__("client")


class InvoiceValidator(ContractValidator):
    """
    Валидатор для invoice контракта.

    Дополнительно к схеме: due_date не раньше issue_date (как в модели Invoice).
    """

    def __init__(self):
        super().__init__("invoice")

    def check_rules(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        if not isinstance(data, dict):
            return
        issue_date = _parse_date(data.get("issue_date"))
        due_date = _parse_date(data.get("due_date"))
        # Некорректные даты уже отклонены форматом "date"
        if issue_date is None or due_date is None:
            return
        if due_date < issue_date:
            yield ValidationError(
                f"due_date {due_date} must not be before issue_date {issue_date}",
                validator="dueDateOrder",
                path=("due_date",),
                instance=data["due_date"],
            )


class PaymentValidator(ContractValidator):
    """Валидатор для payment контракта."""

    def __init__(self):
        super().__init__("payment")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_client(data: Dict[str, Any]) -> None:
    """
    Валидация client данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    ClientValidator().validate(data)


def validate_invoice(data: Dict[str, Any]) -> None:
    """
    Валидация invoice данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    InvoiceValidator().validate(data)


def validate_payment(data: Dict[str, Any]) -> None:
    """
    Валидация payment данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    PaymentValidator().validate(data)
