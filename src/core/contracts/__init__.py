"""
Contract Validation Module

JSON Schema контракты для GeneratorSet и FrobeniusReport.
"""

from .validators import (
    FROBENIUS_REPORT_CONTRACT,
    GENERATOR_SET_CONTRACT,
    contract_errors,
    get_validator,
    load_schema,
    parse_schema,
    validate_contract,
)

__all__ = [
    # Contract names
    "GENERATOR_SET_CONTRACT",
    "FROBENIUS_REPORT_CONTRACT",
    # Schema loading
    "load_schema",
    "parse_schema",
    "get_validator",
    # Validation
    "validate_contract",
    "contract_errors",
]
