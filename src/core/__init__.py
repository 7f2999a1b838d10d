"""
Core numeric primitives, domain models, and contracts.

Frobenius number of a coprime generator set: GCD utilities, residue-table
solver, and the pydantic / JSON Schema boundary around them.
"""
