"""
JSON Schema контракты Frobenius solver

Схемы лежат в package data (src/core/contracts/schema/) и читаются через
importlib.resources при первом обращении, затем кэшируются.

Контракты:
- generator_set: вход решателя (GeneratorSet)
- frobenius_report: результат решателя (FrobeniusReport)
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

GENERATOR_SET_CONTRACT: Final[str] = "generator_set"
FROBENIUS_REPORT_CONTRACT: Final[str] = "frobenius_report"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def parse_schema(schema_name: str, text: str) -> Dict[str, Any]:
    """
    Разбор и meta-валидация JSON Schema.

    Raises:
        ValueError: если text не JSON или не валидная Draft 2020-12 схема
    """
    try:
        schema = json.loads(text)
        Draft202012Validator.check_schema(schema)
    except (json.JSONDecodeError, jsonschema.SchemaError) as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
    return schema


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка схемы из package data.

    Raises:
        FileNotFoundError: если схемы с таким именем нет
    """
    resource = resources.files(__package__).joinpath("schema").joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_name}.json")
    return parse_schema(schema_name, resource.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Кэшированный validator для контракта."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_contract(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Проверка данных против контракта.

    Raises:
        jsonschema.ValidationError: наиболее релевантная ошибка
    """
    get_validator(schema_name).validate(data)


def contract_errors(schema_name: str, data: Dict[str, Any]) -> list[str]:
    """
    Все нарушения контракта в виде "path: message", отсортированные по пути.

    Пустой список означает, что данные валидны.
    """
    errors = sorted(
        get_validator(schema_name).iter_errors(data),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    return [
        f"{'/'.join(str(part) for part in e.absolute_path) or '<root>'}: {e.message}"
        for e in errors
    ]
