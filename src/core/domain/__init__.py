"""
Domain models башни точных чисел ℕ → ℤ → ℚ.

Natural, Integer, Rational — immutable value objects; результаты с promotion
(Exact / Promoted) и таксономия ожидаемых ошибок.
"""

from src.core.domain.errors import (
    DivideByZero,
    InvalidBase,
    InvalidDegree,
    NoSolution,
    NumberSystemError,
    ParseError,
    UndefinedForZero,
    Unimplemented,
)
from src.core.domain.integer import INTEGER_ONE, INTEGER_ZERO, Integer, define_integer
from src.core.domain.natural import ONE, ZERO, Natural
from src.core.domain.rational import Rational, define_rational, greatest_common_divisor
from src.core.domain.results import (
    DivisionWithRemainder,
    Exact,
    IntegerPower,
    IntegerQuotient,
    NaturalDifference,
    NaturalQuotient,
    Promoted,
)

__all__ = [
    # Natural
    "Natural",
    "ZERO",
    "ONE",
    # Integer
    "Integer",
    "INTEGER_ZERO",
    "INTEGER_ONE",
    "define_integer",
    # Rational
    "Rational",
    "define_rational",
    "greatest_common_divisor",
    # Results
    "Exact",
    "Promoted",
    "DivisionWithRemainder",
    "NaturalDifference",
    "NaturalQuotient",
    "IntegerQuotient",
    "IntegerPower",
    # Errors
    "NumberSystemError",
    "DivideByZero",
    "NoSolution",
    "InvalidDegree",
    "InvalidBase",
    "UndefinedForZero",
    "Unimplemented",
    "ParseError",
]
