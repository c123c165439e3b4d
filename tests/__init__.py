"""
Test suite for number-tower

Contains:
- tests/unit/          : Unit tests for ℕ, ℤ, ℚ, literals and JSON contracts
"""
