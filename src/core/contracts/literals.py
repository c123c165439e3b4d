"""
Literals — десятичные литералы ℕ/ℤ/ℚ на границе системы

Разбор внешних строк во внутреннее представление и обратное отображение.

Форматы:
- ℕ: "42"           (только цифры)
- ℤ: "-42", "+7"    (необязательный знак и цифры)
- ℚ: "-3/4", "6/-8" (знаковый ℤ "/" знаковый ℤ)

Окружающие пробелы допускаются. Любой другой ввод → ParseError
(в том числе для ℕ/ℤ: молча превращать мусор в ноль нельзя).
"""

import re
from typing import Final, Union

from src.core.domain.errors import ParseError
from src.core.domain.integer import Integer
from src.core.domain.natural import ZERO, Natural
from src.core.domain.rational import Rational, define_rational
from src.core.math.derivation import ArithmeticConfig, resolve_config

NATURAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*([0-9]+)\s*$")

INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?)([0-9]+)\s*$")

RATIONAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*([+-]?[0-9]+)\s*/\s*([+-]?[0-9]+)\s*$"
)

Number = Union[Natural, Integer, Rational]


# =============================================================================
# PARSING
# =============================================================================


def parse_natural(text: str, *, config: ArithmeticConfig | None = None) -> Natural:
    """
    Разбор ℕ из десятичной строки.

    В режиме PEANO число порождается из ZERO применением successor,
    как и любое другое натуральное число.

    Raises:
        ParseError: если строка не является неотрицательным десятичным числом
    """
    match = NATURAL_PATTERN.match(text)
    if match is None:
        raise ParseError(f"not a natural number literal: {text!r}")

    value = int(match.group(1))
    if resolve_config(config).is_native:
        return Natural(value=value)

    res = ZERO
    for _ in range(value):
        res = res.successor()
    return res


def parse_integer(text: str, *, config: ArithmeticConfig | None = None) -> Integer:
    """
    Разбор ℤ из десятичной строки с необязательным знаком.

    Величина разбирается как ℕ (в режиме config), знак восстанавливается
    отрицанием.

    Raises:
        ParseError: если строка не является десятичным целым
    """
    match = INTEGER_PATTERN.match(text)
    if match is None:
        raise ParseError(f"not an integer literal: {text!r}")

    sign, digits = match.group(1), match.group(2)
    magnitude = Integer.from_natural(parse_natural(digits, config=config))
    return magnitude.negate() if sign == "-" else magnitude


def parse_rational(text: str, *, config: ArithmeticConfig | None = None) -> Rational:
    """
    Разбор ℚ из строки "<signed-int>/<signed-int>" в каноническую форму.

    Нулевой знаменатель во внешнем вводе — ошибка разбора, а не fault.

    Raises:
        ParseError: если строка не соответствует формату или знаменатель 0
    """
    match = RATIONAL_PATTERN.match(text)
    if match is None:
        raise ParseError(f"not a rational literal: {text!r}")

    numerator = parse_integer(match.group(1), config=config)
    denominator = parse_integer(match.group(2), config=config)
    if denominator.value == 0:
        raise ParseError(f"rational literal with zero denominator: {text!r}")
    return define_rational(numerator, denominator, config=config)


# =============================================================================
# FORMATTING
# =============================================================================


def format_number(value: Number, *, config: ArithmeticConfig | None = None) -> str:
    """
    Каноническое отображение значения башни.

    ℕ/ℤ — десятичная запись, ℚ — "num/den" после reduce (56/8 → "7/1").
    Без config ℚ приводится так же, как в str(); с config — reduce в этом режиме.
    """
    if isinstance(value, Rational):
        canonical = value.canonical() if config is None else value.reduce(config=config)
        return f"{canonical.numerator}/{canonical.denominator}"
    if not isinstance(value, (Natural, Integer)):
        raise TypeError(f"not a tower number: {type(value).__name__}")
    return str(value)
