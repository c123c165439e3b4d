"""
Rational — рациональные числа ℚ, "ℤ делённое на ℤ"

ℚ нужно, чтобы деление и отрицательная степень в ℤ (и ℕ) были тотальными.
ℚ — точка замыкания башни: дальнейшего promotion нет, поэтому деление на
ноль здесь — жёсткая ошибка, а нулевой знаменатель — нарушение precondition.

Каноническая форма (reduce): числитель и знаменатель делятся на НОД,
знак переносится в числитель (знаменатель всегда > 0). Отображение,
равенство и hash всегда работают с канонической формой.

НОД по алгоритму Евклида через деление с остатком в ℤ:
    A  = Q0 * B  + R0
    B  = Q1 * R0 + R1
    R0 = Q2 * R1 + R2
    ...
последний ненулевой остаток (делитель в момент R = 0) и есть НОД.
"""

from __future__ import annotations

import logging
from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.domain.integer import INTEGER_ONE, Integer
from src.core.math.derivation import NATIVE_ARITHMETIC_CONFIG, ArithmeticConfig

logger = logging.getLogger(__name__)


# =============================================================================
# GCD
# =============================================================================


def greatest_common_divisor(
    a: Integer, b: Integer, *, config: ArithmeticConfig | None = None
) -> Integer:
    """
    НОД(|a|, |b|) по алгоритму Евклида.

    Соглашение НОД(x, 0) = 1 защищает вырожденный случай.

    Examples:
        НОД(56, 8) = 8, НОД(140, 11) = 1, НОД(0, 5) = 5
    """
    r0 = Integer.from_natural(a.magnitude)
    r1 = Integer.from_natural(b.magnitude)
    if r1.value == 0:
        return INTEGER_ONE

    while True:
        remainder = r0.divide_with_remainder(r1, config=config).remainder
        if remainder.value == 0:
            return r1
        r0, r1 = r1, remainder


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Рациональное число ℚ = numerator / denominator.

    Immutable модель (frozen=True). Свежесозданное значение канонично только
    после reduce(); str, == и hash приводят к канонической форме сами
    (через canonical(), в режиме closed form).
    """

    numerator: Integer = Field(..., description="Числитель")
    denominator: Integer = Field(..., description="Знаменатель, не ноль")

    model_config = {"frozen": True}

    @field_validator("denominator")
    @classmethod
    def validate_denominator(cls, v: Integer) -> Integer:
        """Нулевой знаменатель — ошибка программиста, не результат запроса."""
        if v.value == 0:
            raise ValueError("ℚ denominator must be non-zero")
        return v

    @classmethod
    def from_integer(cls, z: Integer) -> Rational:
        return cls(numerator=z, denominator=INTEGER_ONE)

    def reduce(self, *, config: ArithmeticConfig | None = None) -> Rational:
        """
        Каноническая форма: деление на НОД и нормализация знака.

        Returns:
            Rational с НОД(|num|, |den|) = 1 и den > 0
        """
        gcd = greatest_common_divisor(self.numerator, self.denominator, config=config)
        numerator = self.numerator.divide_with_remainder(gcd, config=config).quotient
        denominator = self.denominator.divide_with_remainder(
            gcd, config=config
        ).quotient

        if denominator.is_negative:
            numerator, denominator = numerator.negate(), denominator.negate()

        return Rational(numerator=numerator, denominator=denominator)

    @property
    def is_canonical(self) -> bool:
        if self.denominator.is_negative:
            return False
        gcd = greatest_common_divisor(
            self.numerator, self.denominator, config=NATIVE_ARITHMETIC_CONFIG
        )
        return gcd == INTEGER_ONE

    def canonical(self) -> Rational:
        """
        Каноническая форма для наблюдения: str, ==, hash, payload.

        Результат reduce одинаков в обоих режимах; наблюдение всегда
        идёт через closed form.
        """
        return self.reduce(config=NATIVE_ARITHMETIC_CONFIG)

    def as_tuple(self) -> Tuple[int, int]:
        """(numerator, denominator) канонической формы."""
        canonical = self.canonical()
        return canonical.numerator.value, canonical.denominator.value

    def negate(self) -> Rational:
        return Rational(
            numerator=self.numerator.negate(), denominator=self.denominator
        )

    def __neg__(self) -> Rational:
        return self.negate()

    def __str__(self) -> str:
        numerator, denominator = self.as_tuple()
        return f"{numerator}/{denominator}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())


# =============================================================================
# DEFINITION
# =============================================================================


def define_rational(
    a: Integer, b: Integer, *, config: ArithmeticConfig | None = None
) -> Rational:
    """
    Определение ℚ через деление двух ℤ: A / B в канонической форме.

    Используется всеми promotion из ℕ.divide и ℤ.divide.
    """
    rational = Rational(numerator=a, denominator=b).reduce(config=config)
    logger.debug("ℚ defined from %s / %s as %s", a, b, rational)
    return rational

