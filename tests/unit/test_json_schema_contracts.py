"""
Tests for JSON Schema contracts

Комплексное тестирование контрактов:
- Загрузка схем из package data и meta-валидация
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Согласованность Pydantic моделей и контрактов (to_contract / from_contract)
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    FROBENIUS_REPORT_CONTRACT,
    GENERATOR_SET_CONTRACT,
    contract_errors,
    get_validator,
    load_schema,
    parse_schema,
    validate_contract,
)
from src.core.domain import FrobeniusReport, GeneratorSet
from src.core.math.frobenius import frobenius_number


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_generator_set():
    """Валидный generator_set для тестирования."""
    return {"schema_version": "1", "generators": [6, 9, 20]}


@pytest.fixture
def valid_frobenius_report():
    """Валидный frobenius_report для тестирования."""
    return {
        "schema_version": "1",
        "generators": [6, 9, 20],
        "gcd": 1,
        "status": "OK",
        "method": "RESIDUE_DP",
        "frobenius_number": 43,
        "details": "Residue DP over 6 residues",
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схем из package data."""

    @pytest.mark.parametrize("name", [GENERATOR_SET_CONTRACT, FROBENIUS_REPORT_CONTRACT])
    def test_schemas_load(self, name):
        schema = load_schema(name)
        assert schema["title"] == name

    def test_schema_cached(self):
        assert load_schema(GENERATOR_SET_CONTRACT) is load_schema(GENERATOR_SET_CONTRACT)
        assert get_validator(GENERATOR_SET_CONTRACT) is get_validator(GENERATOR_SET_CONTRACT)

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_invalid_schema_rejected(self):
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            parse_schema("broken", '{"type": 12}')

    def test_invalid_json_rejected(self):
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            parse_schema("broken", "{not json")


# =============================================================================
# GENERATOR SET CONTRACT
# =============================================================================


class TestGeneratorSetContract:
    """Тесты generator_set контракта."""

    def test_valid(self, valid_generator_set):
        validate_contract(GENERATOR_SET_CONTRACT, valid_generator_set)
        assert contract_errors(GENERATOR_SET_CONTRACT, valid_generator_set) == []

    def test_missing_generators(self, valid_generator_set):
        del valid_generator_set["generators"]
        with pytest.raises(ValidationError):
            validate_contract(GENERATOR_SET_CONTRACT, valid_generator_set)

    def test_empty_generators(self, valid_generator_set):
        valid_generator_set["generators"] = []
        errors = contract_errors(GENERATOR_SET_CONTRACT, valid_generator_set)
        assert len(errors) == 1
        assert errors[0].startswith("generators:")

    def test_non_integer_generator(self, valid_generator_set):
        valid_generator_set["generators"] = [6, 9.5, 20]
        errors = contract_errors(GENERATOR_SET_CONTRACT, valid_generator_set)
        assert errors and errors[0].startswith("generators/1:")

    def test_unknown_field(self, valid_generator_set):
        valid_generator_set["extra"] = 1
        with pytest.raises(ValidationError):
            validate_contract(GENERATOR_SET_CONTRACT, valid_generator_set)

    def test_errors_collects_all(self):
        errors = contract_errors(GENERATOR_SET_CONTRACT, {"schema_version": "9"})
        assert len(errors) == 2
        assert any(e.startswith("<root>:") for e in errors)
        assert any(e.startswith("schema_version:") for e in errors)

    def test_model_round_trip(self, valid_generator_set):
        gs = GeneratorSet.from_contract(valid_generator_set)
        assert gs.solve().value == 43
        assert gs.to_contract() == valid_generator_set

    def test_from_contract_rejects_invalid(self):
        with pytest.raises(ValidationError):
            GeneratorSet.from_contract({"schema_version": "1", "generators": ["6"]})


# =============================================================================
# FROBENIUS REPORT CONTRACT
# =============================================================================


class TestFrobeniusReportContract:
    """Тесты frobenius_report контракта."""

    def test_valid(self, valid_frobenius_report):
        validate_contract(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

    def test_unknown_status(self, valid_frobenius_report):
        valid_frobenius_report["status"] = "MAYBE"
        with pytest.raises(ValidationError):
            validate_contract(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

    def test_defined_status_requires_number(self, valid_frobenius_report):
        valid_frobenius_report["frobenius_number"] = None
        with pytest.raises(ValidationError):
            validate_contract(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

    def test_defined_status_requires_method(self, valid_frobenius_report):
        valid_frobenius_report["method"] = None
        assert contract_errors(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

    def test_undefined_status_requires_null(self, valid_frobenius_report):
        valid_frobenius_report["status"] = "NON_COPRIME"
        assert contract_errors(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

        valid_frobenius_report["frobenius_number"] = None
        valid_frobenius_report["method"] = None
        validate_contract(FROBENIUS_REPORT_CONTRACT, valid_frobenius_report)

    @pytest.mark.parametrize(
        "generators", [[6, 9, 20], [3, 5], [1, 4], [2, 4, 6], [0, 3, 5]]
    )
    def test_report_to_contract(self, generators):
        report = FrobeniusReport.from_result(frobenius_number(generators))
        data = report.to_contract()
        assert contract_errors(FROBENIUS_REPORT_CONTRACT, data) == []
        assert FrobeniusReport.from_contract(data) == report

    def test_from_contract_rejects_invalid(self, valid_frobenius_report):
        valid_frobenius_report["method"] = None
        with pytest.raises(ValidationError):
            FrobeniusReport.from_contract(valid_frobenius_report)
