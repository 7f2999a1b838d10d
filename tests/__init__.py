"""
Test suite for Frobenius core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
