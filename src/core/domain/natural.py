"""
Natural — натуральные числа ℕ (включая ZERO)

Предполагаем, что мы знаем, что такое ноль и что значит увеличить число на
одну единицу. Всё остальное выводится из этого единственного примитива:

    successor(a)        = a + 1
    add(a, b)           = successor, применённый к a b раз
    multiply(a, b)      = ZERO, к которому b раз прибавлено a
    power(a, b)         = ONE, умноженное на a b раз
    subtract(a, b)      = x такое, что b + x = a          (иначе → ℤ)
    divide(a, b)        = x такое, что b * x = a          (иначе → ℚ)
    root(k, a)          = x такое, что x ^ k = a          (иначе NoSolution)
    logarithm(k, a)     = x такое, что k ^ x = a          (иначе NoSolution)

Базовые правила (следуют из определений):
  - a+b = b+a,  a+(b+c) = (a+b)+c,  a+0 = a
  - a*b = b*a,  (a*b)*c = a*(b*c),  a*(b+c) = a*b + a*c,  a*1 = a
  - (a*b)^c = a^c * b^c,  a^b * a^c = a^(b+c),  (a^b)^c = a^(b*c),  a^1 = a

Поиски (subtract, divide, divide_with_remainder, root, logarithm) — монотонные
линейные сканирования: переменная поиска строго растёт, пробная функция не
убывает, цикл прерывается как только проба достигает или превышает цель.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Union

from pydantic import BaseModel, Field

from src.core.domain.errors import (
    DivideByZero,
    InvalidBase,
    InvalidDegree,
    NoSolution,
    UndefinedForZero,
)
from src.core.domain.results import (
    DivisionWithRemainder,
    Exact,
    NaturalDifference,
    NaturalQuotient,
    Promoted,
)
from src.core.math.closed_form import euclidean_divmod, exact_log, exact_root
from src.core.math.derivation import ArithmeticConfig, resolve_config

if TYPE_CHECKING:
    from src.core.domain.integer import Integer
    from src.core.domain.rational import Rational

logger = logging.getLogger(__name__)


# =============================================================================
# NATURAL MODEL
# =============================================================================


class Natural(BaseModel):
    """
    Натуральное число ℕ.

    Immutable модель (frozen=True): каждая операция возвращает новый экземпляр.
    """

    value: int = Field(..., ge=0, description="Неотрицательная величина")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.value}"

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Primitive
    # -------------------------------------------------------------------------

    def successor(self) -> Natural:
        """Следующее число. Единственный примитив ℕ."""
        return Natural(value=self.value + 1)

    # -------------------------------------------------------------------------
    # Total operations
    # -------------------------------------------------------------------------

    def add(self, arg: Natural, *, config: ArithmeticConfig | None = None) -> Natural:
        """Сложение: начать с A и увеличить на 1 B раз, получим A + B."""
        if resolve_config(config).is_native:
            return Natural(value=self.value + arg.value)

        res = self
        for _ in range(arg.value):
            res = res.successor()
        return res

    def multiply(
        self, arg: Natural, *, config: ArithmeticConfig | None = None
    ) -> Natural:
        """Умножение: начать с ZERO и прибавить к нему A B раз, получим A * B."""
        if resolve_config(config).is_native:
            return Natural(value=self.value * arg.value)

        res = ZERO
        for _ in range(arg.value):
            res = res.add(self, config=config)
        return res

    def power(self, arg: Natural, *, config: ArithmeticConfig | None = None) -> Natural:
        """
        "Возведение в степень": начать с ONE и умножить на A B раз.

        0^0 = 1 по определению (пустое произведение).
        """
        if resolve_config(config).is_native:
            return Natural(value=self.value**arg.value)

        res = ONE
        for _ in range(arg.value):
            res = res.multiply(self, config=config)
        return res

    # -------------------------------------------------------------------------
    # Search-based operations
    # -------------------------------------------------------------------------

    def subtract(
        self, arg: Natural, *, config: ArithmeticConfig | None = None
    ) -> NaturalDifference:
        """
        "Вычитание": ищем X такое, что B + X = A. Тогда X = A - B.

        Args:
            arg: вычитаемое B

        Returns:
            Exact[Natural] если A >= B,
            Promoted[Integer] (отрицательное A - B) если решения в ℕ нет
        """
        if self.value < arg.value:
            # нет решения в ℕ: переходим в ℤ по определению ℤ
            from src.core.domain.integer import define_integer

            promoted = define_integer(self, arg, config=config)
            logger.debug("ℕ subtract %s - %s promoted to ℤ %s", self, arg, promoted)
            return Promoted(promoted)

        if resolve_config(config).is_native:
            return Exact(Natural(value=self.value - arg.value))

        res = ZERO
        while arg.add(res, config=config) != self:
            res = res.successor()
        return Exact(res)

    def divide(
        self, arg: Natural, *, config: ArithmeticConfig | None = None
    ) -> NaturalQuotient:
        """
        "Деление": ищем X такое, что B * X = A. Тогда X = A / B.

        Args:
            arg: делитель B

        Returns:
            Exact[Natural] при точном делении,
            Promoted[Rational] (A/B в lowest terms) при неточном

        Raises:
            DivideByZero: если B = 0
        """
        if arg.value == 0:
            raise DivideByZero(f"can't divide {self} by ZERO in ℕ")

        if resolve_config(config).is_native:
            quotient, remainder = euclidean_divmod(self.value, arg.value)
            if remainder == 0:
                return Exact(Natural(value=quotient))
        else:
            res = ZERO
            while True:
                probe = arg.multiply(res, config=config)
                if probe == self:
                    return Exact(res)
                if probe.value > self.value:
                    break
                res = res.successor()

        # немедленно делегируем в ℚ
        from src.core.domain.integer import Integer
        from src.core.domain.rational import define_rational

        promoted = define_rational(
            Integer.from_natural(self), Integer.from_natural(arg), config=config
        )
        logger.debug("ℕ divide %s / %s promoted to ℚ %s", self, arg, promoted)
        return Promoted(promoted)

    def divide_with_remainder(
        self, arg: Natural, *, config: ArithmeticConfig | None = None
    ) -> DivisionWithRemainder:
        """
        Деление с остатком: A = Q*B + R, 0 <= R < B.

        Согласовано с divide: при R = 0 частное совпадает с точным divide.

        Raises:
            DivideByZero: если B = 0
        """
        if arg.value == 0:
            raise DivideByZero(f"can't divide {self} by ZERO in ℕ")

        if resolve_config(config).is_native:
            quotient, remainder = euclidean_divmod(self.value, arg.value)
            return DivisionWithRemainder(
                Natural(value=quotient), Natural(value=remainder)
            )

        res = ZERO
        while True:
            probe = arg.multiply(res, config=config)
            if probe == self:
                return DivisionWithRemainder(res, ZERO)
            if probe.value > self.value:
                break
            res = res.successor()

        # res — первое X с B*X > A, частное на единицу меньше
        quotient = res.subtract(ONE, config=config).value
        covered = quotient.multiply(arg, config=config)
        remainder = self.subtract(covered, config=config).value
        return DivisionWithRemainder(quotient, remainder)

    def root(self, arg: Natural, *, config: ArithmeticConfig | None = None) -> Natural:
        """
        "Корень": ищем X такое, что X ^ self = arg.

        self — степень корня, arg — подкоренное выражение.
        Иррациональные результаты вне scope: promotion в ℚ нет.

        Raises:
            InvalidDegree: если self = 0
            NoSolution: если точного X в ℕ нет
        """
        if self.value == 0:
            raise InvalidDegree(f"can't take ZEROth root of {arg}")

        if resolve_config(config).is_native:
            found = exact_root(arg.value, self.value)
            if found is not None:
                return Natural(value=found)
        else:
            res = ZERO
            while True:
                probe = res.power(self, config=config)
                if probe == arg:
                    return res
                if probe.value > arg.value:
                    break
                res = res.successor()

        logger.debug("ℕ root of degree %s of %s: no exact solution", self, arg)
        raise NoSolution(f"no solution in ℕ for root of degree {self} of {arg}")

    def logarithm(
        self, arg: Natural, *, config: ArithmeticConfig | None = None
    ) -> Natural:
        """
        "Логарифм": ищем X такое, что self ^ X = arg.

        self — основание, arg — аргумент.

        Raises:
            UndefinedForZero: если arg = 0 (проверяется первым)
            InvalidBase: если основание 0 или 1
            NoSolution: если точного X в ℕ нет
        """
        if arg.value == 0:
            raise UndefinedForZero(f"can't take logarithm of ZERO (base {self})")
        if self.value == 0:
            raise InvalidBase("can't take logarithm with base ZERO")
        if self.value == 1:
            raise InvalidBase("can't take logarithm with base ONE")

        if resolve_config(config).is_native:
            found = exact_log(arg.value, self.value)
            if found is not None:
                return Natural(value=found)
        else:
            res = ZERO
            while True:
                probe = self.power(res, config=config)
                if probe == arg:
                    return res
                if probe.value > arg.value:
                    break
                res = res.successor()

        logger.debug("ℕ logarithm base %s of %s: no exact solution", self, arg)
        raise NoSolution(f"no solution in ℕ for logarithm base {self} of {arg}")

    # -------------------------------------------------------------------------
    # Ordering & operators
    # -------------------------------------------------------------------------

    def __lt__(self, other: Natural) -> bool:
        return self.value < other.value

    def __le__(self, other: Natural) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Natural) -> bool:
        return self.value > other.value

    def __ge__(self, other: Natural) -> bool:
        return self.value >= other.value

    def __add__(self, other: Natural) -> Natural:
        return self.add(other)

    def __mul__(self, other: Natural) -> Natural:
        return self.multiply(other)

    def __pow__(self, other: Natural) -> Natural:
        return self.power(other)

    def __sub__(self, other: Natural) -> Union[Natural, Integer]:
        return self.subtract(other).value

    def __truediv__(self, other: Natural) -> Union[Natural, Rational]:
        return self.divide(other).value

    def __floordiv__(self, other: Natural) -> Natural:
        return self.divide_with_remainder(other).quotient

    def __mod__(self, other: Natural) -> Natural:
        return self.divide_with_remainder(other).remainder

    def __divmod__(self, other: Natural) -> DivisionWithRemainder:
        return self.divide_with_remainder(other)


# =============================================================================
# CONSTANTS
# =============================================================================

# единственное число, известное изначально
ZERO: Final[Natural] = Natural(value=0)

ONE: Final[Natural] = ZERO.successor()
