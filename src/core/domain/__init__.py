"""
Domain models and value objects.

Contains the JSON boundary models: GeneratorSet (request) and
FrobeniusReport (outcome).
"""

from src.core.domain.frobenius_report import FrobeniusReport
from src.core.domain.generator_set import GENERATOR_SET_SCHEMA_VERSION, GeneratorSet

__all__ = [
    "GENERATOR_SET_SCHEMA_VERSION",
    "GeneratorSet",
    "FrobeniusReport",
]
