"""
Integer — целые числа ℤ: натуральные, ZERO и аддитивные обратные к натуральным

ℤ определяется как "ℕ минус ℕ" (define_integer): если A < B, то A - B
есть (0 - (B - A)), и такое число называется отрицательным целым.

Имея ℤ и правила ℕ, каждую бинарную операцию ℤ выводим разбором знаков
операндов (++, +-, -+, --): беззнаковая часть делегируется в ℕ, знак
восстанавливается по алгебраическим тождествам.

ИНВАРИАНТЫ:
1. subtract в ℤ тотален (promotion ℕ.subtract никогда не покидает ℤ)
2. divide и power с отрицательной степенью могут перейти в ℚ (Promoted)
3. root/logarithm в ℤ не определены (Unimplemented)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Union

from pydantic import BaseModel

from src.core.domain.errors import DivideByZero, Unimplemented
from src.core.domain.natural import Natural
from src.core.domain.results import (
    DivisionWithRemainder,
    Exact,
    IntegerPower,
    IntegerQuotient,
    Promoted,
)
from src.core.math.derivation import ArithmeticConfig

if TYPE_CHECKING:
    from src.core.domain.rational import Rational

logger = logging.getLogger(__name__)


# =============================================================================
# DEFINITION
# =============================================================================


def define_integer(
    a: Natural, b: Natural, *, config: ArithmeticConfig | None = None
) -> Integer:
    """
    Определение ℤ через вычитание двух ℕ: результат A - B.

    Если A < B, разность B - A существует в ℕ, и A - B = (0 - (B - A)):
    ставим "-" перед натуральным числом.

    Args:
        a: уменьшаемое
        b: вычитаемое

    Returns:
        Integer со значением A - B
    """
    if a >= b:
        return Integer.from_natural(a.subtract(b, config=config).value)
    return Integer.from_natural(b.subtract(a, config=config).value).negate()


# =============================================================================
# INTEGER MODEL
# =============================================================================


class Integer(BaseModel):
    """
    Целое число ℤ.

    Immutable модель (frozen=True). 0 не имеет знака.
    """

    value: int

    model_config = {"frozen": True}

    @classmethod
    def from_natural(cls, n: Natural) -> Integer:
        return cls(value=n.value)

    def __str__(self) -> str:
        return f"{self.value}"

    def __int__(self) -> int:
        return self.value

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    @property
    def magnitude(self) -> Natural:
        """|A| как ℕ: убираем "-" у отрицательного целого."""
        return Natural(value=-self.value if self.value < 0 else self.value)

    def negate(self) -> Integer:
        """Аддитивное обратное: 0 - A."""
        return Integer(value=-self.value)

    # -------------------------------------------------------------------------
    # Total operations
    # -------------------------------------------------------------------------

    def add(self, arg: Integer, *, config: ArithmeticConfig | None = None) -> Integer:
        """
        A + B:
          - A >= 0, B >= 0: как в ℕ
          - A >= 0, B < 0: A + (0 - |B|) = x -> A = |B| + x -> x = A - |B|
          - A < 0, B >= 0: B + (0 - |A|) = x -> x = B - |A|
          - A < 0, B < 0: (0 - |A|) + (0 - |B|) = x -> x = -(|A| + |B|)
        """
        a, b = self.magnitude, arg.magnitude
        if not self.is_negative and not arg.is_negative:
            return Integer.from_natural(a.add(b, config=config))
        elif not self.is_negative and arg.is_negative:
            return define_integer(a, b, config=config)
        elif self.is_negative and not arg.is_negative:
            return define_integer(b, a, config=config)
        else:
            return Integer.from_natural(a.add(b, config=config)).negate()

    def multiply(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> Integer:
        """
        A * B:
          - A >= 0, B >= 0: как в ℕ
          - A >= 0, B < 0: A * ((0 - |B|) + |B|) = 0 -> x = -(A * |B|)
          - A < 0, B >= 0: -(|A| * B), аналогично
          - A < 0, B < 0: -1 * -1 = 1 -> x = |A| * |B|
        """
        product = Integer.from_natural(
            self.magnitude.multiply(arg.magnitude, config=config)
        )
        if self.is_negative != arg.is_negative:
            return product.negate()
        return product

    def subtract(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> Integer:
        """
        A - B, тотально в ℤ:
          - A >= 0, B >= 0: define_integer (ℕ.subtract с promotion)
          - A >= 0, B < 0: x = A + |B|
          - A < 0, B >= 0: x = -(|A| + B)
          - A < 0, B < 0: (0 - |A|) - (0 - |B|) = x -> x = |B| - |A|
        """
        a, b = self.magnitude, arg.magnitude
        if not self.is_negative and not arg.is_negative:
            return define_integer(a, b, config=config)
        elif not self.is_negative and arg.is_negative:
            return Integer.from_natural(a.add(b, config=config))
        elif self.is_negative and not arg.is_negative:
            return Integer.from_natural(a.add(b, config=config)).negate()
        else:
            return define_integer(b, a, config=config)

    def power(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> IntegerPower:
        """
        A ^ B:
          - A >= 0, B >= 0: как в ℕ
          - A < 0, B >= 0: как в ℕ, но через ℤ.multiply (знак по правилам умножения)
          - B < 0: A^B * A^|B| = A^0 = 1 -> A^B = 1 / A^|B| (может перейти в ℚ)

        Raises:
            DivideByZero: 0 в отрицательной степени
        """
        if not arg.is_negative:
            if not self.is_negative:
                return Exact(
                    Integer.from_natural(
                        self.magnitude.power(arg.magnitude, config=config)
                    )
                )
            res = INTEGER_ONE
            for _ in range(arg.value):
                res = res.multiply(self, config=config)
            return Exact(res)

        denominator = self.power(arg.negate(), config=config).value
        return INTEGER_ONE.divide(denominator, config=config)

    # -------------------------------------------------------------------------
    # Division
    # -------------------------------------------------------------------------

    def divide(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> IntegerQuotient:
        """
        A / B: нормализуем к неотрицательным, делим в ℕ, восстанавливаем знак.

        При разных знаках отрицается либо точный результат, либо числитель ℚ.

        Raises:
            DivideByZero: если B = 0
        """
        if arg.value == 0:
            raise DivideByZero(f"can't divide {self} by ZERO in ℤ")

        negative = self.is_negative != arg.is_negative
        result = self.magnitude.divide(arg.magnitude, config=config)

        if isinstance(result, Exact):
            quotient = Integer.from_natural(result.value)
            return Exact(quotient.negate() if negative else quotient)

        rational = result.value
        if negative:
            rational = rational.negate()
        logger.debug("ℤ divide %s / %s promoted to ℚ %s", self, arg, rational)
        return Promoted(rational)

    def divide_with_remainder(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> DivisionWithRemainder:
        """
        Деление с остатком в ℤ: A = Q*B + R, |R| < |B|.

        Знак Q — XOR знаков операндов, R берёт знак делимого.

        Raises:
            DivideByZero: если B = 0
        """
        if arg.value == 0:
            raise DivideByZero(f"can't divide {self} by ZERO in ℤ")

        quotient, remainder = self.magnitude.divide_with_remainder(
            arg.magnitude, config=config
        )
        q = Integer.from_natural(quotient)
        r = Integer.from_natural(remainder)
        if self.is_negative != arg.is_negative:
            q = q.negate()
        if self.is_negative:
            r = r.negate()
        return DivisionWithRemainder(q, r)

    # -------------------------------------------------------------------------
    # Not defined in ℤ
    # -------------------------------------------------------------------------

    def root(self, arg: Integer, *, config: ArithmeticConfig | None = None) -> Integer:
        raise Unimplemented("root is not defined in ℤ")

    def logarithm(
        self, arg: Integer, *, config: ArithmeticConfig | None = None
    ) -> Integer:
        raise Unimplemented("logarithm is not defined in ℤ")

    # -------------------------------------------------------------------------
    # Ordering & operators
    # -------------------------------------------------------------------------

    def __lt__(self, other: Integer) -> bool:
        return self.value < other.value

    def __le__(self, other: Integer) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Integer) -> bool:
        return self.value > other.value

    def __ge__(self, other: Integer) -> bool:
        return self.value >= other.value

    def __neg__(self) -> Integer:
        return self.negate()

    def __add__(self, other: Integer) -> Integer:
        return self.add(other)

    def __mul__(self, other: Integer) -> Integer:
        return self.multiply(other)

    def __sub__(self, other: Integer) -> Integer:
        return self.subtract(other)

    def __pow__(self, other: Integer) -> Union[Integer, Rational]:
        return self.power(other).value

    def __truediv__(self, other: Integer) -> Union[Integer, Rational]:
        return self.divide(other).value

    def __divmod__(self, other: Integer) -> DivisionWithRemainder:
        return self.divide_with_remainder(other)


INTEGER_ZERO: Final[Integer] = Integer(value=0)

INTEGER_ONE: Final[Integer] = Integer(value=1)
