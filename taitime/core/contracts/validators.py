"""
Instant/Span JSON Contracts

JSON представление Instant и Span проверяется по JSON Schema (draft 2020-12)
в обоих направлениях:
- dump_instant / dump_span: модель -> dict, результат проверяется по схеме
- load_instant / load_span: dict -> модель, вход проверяется до pydantic

Схемы лежат в schema/ рядом с модулем (span.json, instant.json).
Нарушение контракта поднимает jsonschema.ValidationError (лучшее совпадение
из всех ошибок); полный список доступен через contract_errors.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.exceptions import best_match

from taitime.core.domain.instant import Instant
from taitime.core.domain.span import Span

logger = logging.getLogger("taitime.contracts")

# Каталог схем в пакете
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

SPAN_SCHEMA: Final[str] = "span"
INSTANT_SCHEMA: Final[str] = "instant"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Кэш валидаторов JSON Schema по имени схемы.

    Схема читается и проходит meta-validation один раз, при первом запросе.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise FileNotFoundError(f"Schema directory not found: {schema_dir}")
        self.schema_dir = schema_dir
        self._validators: dict[str, Draft202012Validator] = {}

    def validator(self, schema_name: str) -> Draft202012Validator:
        """
        Валидатор для схемы schema_name.json.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    """Загрузчик схем пакета (один на процесс)"""
    return SchemaLoader()


# =============================================================================
# CHECKS
# =============================================================================


def _as_payload(value: Instant | Span | dict[str, Any]) -> dict[str, Any]:
    if isinstance(value, (Instant, Span)):
        return value.model_dump(mode="json")
    return value


def contract_errors(schema_name: str, value: Instant | Span | dict[str, Any]) -> list[str]:
    """
    Все нарушения контракта в виде "<путь>: <сообщение>".

    Returns:
        Пустой список, если данные соответствуют схеме
    """
    validator = default_loader().validator(schema_name)
    errors = sorted(validator.iter_errors(_as_payload(value)), key=lambda e: list(e.absolute_path))
    return [f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}" for e in errors]


def _check(schema_name: str, value: Instant | Span | dict[str, Any]) -> dict[str, Any]:
    payload = _as_payload(value)
    validator = default_loader().validator(schema_name)
    error = best_match(validator.iter_errors(payload))
    if error is not None:
        logger.debug("%s contract violation: %s", schema_name, error.message)
        raise error
    return payload


def validate_span(value: Span | dict[str, Any]) -> None:
    """
    Проверка Span (или его JSON представления) по схеме span.json.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _check(SPAN_SCHEMA, value)


def validate_instant(value: Instant | dict[str, Any]) -> None:
    """
    Проверка Instant (или его JSON представления) по схеме instant.json.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _check(INSTANT_SCHEMA, value)


# =============================================================================
# DUMP / LOAD
# =============================================================================


def dump_span(span: Span) -> dict[str, Any]:
    return _check(SPAN_SCHEMA, span)


def dump_instant(instant: Instant) -> dict[str, Any]:
    """
    Instant -> {"polarity": ..., "magnitude": {"seconds": ..., "nanos": ...}}

    Returns:
        JSON-совместимый dict, соответствующий instant.json
    """
    return _check(INSTANT_SCHEMA, instant)


def load_span(data: dict[str, Any]) -> Span:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    return Span.model_validate(_check(SPAN_SCHEMA, data))


def load_instant(data: dict[str, Any]) -> Instant:
    """
    JSON представление -> Instant.

    Контракт строже модели: наносекунды >= 1e9 и лишние поля отклоняются
    до pydantic, без нормализации.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    return Instant.model_validate(_check(INSTANT_SCHEMA, data))
