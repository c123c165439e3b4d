"""
Results — tagged union результатов с promotion

Операция, у которой может не быть точного ответа в текущей системе,
возвращает либо Exact (ответ того же уровня), либо Promoted (ответ,
переопределённый в следующей, более богатой системе).

    ℕ.subtract  → Exact[Natural] | Promoted[Integer]
    ℕ.divide    → Exact[Natural] | Promoted[Rational]
    ℤ.divide    → Exact[Integer] | Promoted[Rational]
    ℤ.power     → Exact[Integer] | Promoted[Rational]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, NamedTuple, TypeVar, Union

if TYPE_CHECKING:
    from src.core.domain.integer import Integer
    from src.core.domain.natural import Natural
    from src.core.domain.rational import Rational


T = TypeVar("T")


# =============================================================================
# TAGGED RESULTS
# =============================================================================


@dataclass(frozen=True)
class Exact(Generic[T]):
    """Точный ответ в системе операнда."""

    value: T

    is_exact: ClassVar[bool] = True


@dataclass(frozen=True)
class Promoted(Generic[T]):
    """Ответ в следующей системе башни (ℕ→ℤ или ℕ/ℤ→ℚ)."""

    value: T

    is_exact: ClassVar[bool] = False


NaturalDifference = Union[Exact["Natural"], Promoted["Integer"]]
NaturalQuotient = Union[Exact["Natural"], Promoted["Rational"]]
IntegerQuotient = Union[Exact["Integer"], Promoted["Rational"]]
IntegerPower = Union[Exact["Integer"], Promoted["Rational"]]


# =============================================================================
# DIVISION WITH REMAINDER
# =============================================================================


class DivisionWithRemainder(NamedTuple):
    """
    Результат деления с остатком: dividend = quotient * divisor + remainder.

    ℕ: 0 <= remainder < divisor
    ℤ: |remainder| < |divisor|, знак remainder = знак делимого
    """

    quotient: Natural | Integer
    remainder: Natural | Integer
