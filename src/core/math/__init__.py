"""
Core math modules для Frobenius solver

Целочисленные примитивы (НОД) и residue DP для числа Фробениуса.
"""

# GCD primitives
from src.core.math.gcd import (
    gcd_many,
    gcd_pair,
)

# Frobenius number
from src.core.math.frobenius import (
    FROBENIUS_ALL_REPRESENTABLE,
    FrobeniusResult,
    FrobeniusSolver,
    FrobeniusStatus,
    FrobeniusUndefined,
    InvalidGenerator,
    NonCoprimeInput,
    SolveMethod,
    SolverConfig,
    UnreachableResidue,
    frobenius_number,
    frobenius_number_strict,
    is_representable,
    raise_for_result,
    residue_table,
)

__all__ = [
    # GCD
    "gcd_pair",
    "gcd_many",
    # Frobenius — Constants
    "FROBENIUS_ALL_REPRESENTABLE",
    # Frobenius — Exceptions
    "FrobeniusUndefined",
    "NonCoprimeInput",
    "InvalidGenerator",
    "UnreachableResidue",
    # Frobenius — Types
    "FrobeniusStatus",
    "SolveMethod",
    "SolverConfig",
    "FrobeniusResult",
    "FrobeniusSolver",
    # Frobenius — Functions
    "frobenius_number",
    "frobenius_number_strict",
    "residue_table",
    "is_representable",
    "raise_for_result",
]
