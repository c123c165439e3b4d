"""
Errors — таксономия ожидаемых исходов башни ℕ → ℤ → ℚ

Все ошибки здесь — штатные, recoverable результаты корректно поставленного
вопроса к системе, у которой нет ответа (например, "есть ли у 8 точный
квадратный корень в ℕ"). Вызывающий код ловит их как обычный control flow.

Promotion (ℕ→ℤ, ℕ/ℤ→ℚ) ошибкой НЕ является: это успешный результат
другого типа (см. src.core.domain.results).

Единственный неустранимый fault — ℚ с нулевым знаменателем: это нарушение
precondition, pydantic отвергает его через ValidationError.
"""


class NumberSystemError(Exception):
    """Базовая ошибка операций над числовой башней."""

    pass


class DivideByZero(NumberSystemError, ZeroDivisionError):
    """
    Деление на ноль.

    Деление не определено в основании башни, и ℚ как точка замыкания
    не имеет более богатой системы для promotion.
    """

    pass


class NoSolution(NumberSystemError):
    """Поиск root/logarithm исчерпан без точного совпадения."""

    pass


class InvalidDegree(NumberSystemError):
    """Корень нулевой степени."""

    pass


class InvalidBase(NumberSystemError):
    """Логарифм по основанию 0 или 1."""

    pass


class UndefinedForZero(NumberSystemError):
    """Логарифм от нуля."""

    pass


class Unimplemented(NumberSystemError, NotImplementedError):
    """Операция не поддерживается на данном уровне башни (root/logarithm в ℤ)."""

    pass


class ParseError(NumberSystemError, ValueError):
    """Некорректный десятичный литерал ℕ/ℤ/ℚ."""

    pass
