"""
Closed Form — эквиваленты поисковых операций ℕ без развёртки до successor

Используется в режиме DerivationMode.NATIVE. Функции работают на неотрицательных
машинных int и возвращают None там, где линейный поиск завершился бы без
точного совпадения. Классификация ошибок (InvalidDegree, InvalidBase, ...)
остаётся на стороне доменных типов, здесь только вычисление.

ИНВАРИАНТЫ:
1. floor_root(x, k) = max{b : b^k <= x}
2. floor_log(x, base) = max{e : base^e <= x}
3. exact_* возвращают значение только при точном совпадении
"""

from typing import Optional


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# ROOT
# =============================================================================


def floor_root(x: int, degree: int) -> int:
    """
    Целочисленный корень степени degree (округление вниз).

    Бинарный поиск по b в [0, x]: монотонность b^degree сохраняется,
    поэтому результат совпадает с линейным поиском от нуля.

    Args:
        x: подкоренное выражение (>= 0)
        degree: степень корня (>= 1)

    Returns:
        max{b : b^degree <= x}

    Examples:
        >>> floor_root(16, 4)
        2
        >>> floor_root(8, 2)
        2
        >>> floor_root(0, 3)
        0
    """
    _require_non_negative("x", x)
    if degree < 1:
        raise ValueError(f"degree must be positive, got {degree}")

    if x < 2 or degree == 1:
        return x

    # b^degree <= x  =>  b < 2^(bit_length(x) / degree + 1)
    low, high = 0, 1 << (x.bit_length() // degree + 1)
    while low < high:
        mid = (low + high + 1) // 2
        if mid**degree <= x:
            low = mid
        else:
            high = mid - 1
    return low


def exact_root(x: int, degree: int) -> Optional[int]:
    """
    Точный корень: b такое, что b^degree == x, иначе None.

    Examples:
        >>> exact_root(65536, 16)
        2
        >>> exact_root(9, 2)
        3
        >>> exact_root(8, 2) is None
        True
    """
    candidate = floor_root(x, degree)
    if candidate**degree == x:
        return candidate
    return None


# =============================================================================
# LOGARITHM
# =============================================================================


def floor_log(x: int, base: int) -> int:
    """
    Целочисленный логарифм по основанию base (округление вниз).

    Args:
        x: аргумент (>= 1)
        base: основание (>= 2)

    Returns:
        max{e : base^e <= x}

    Examples:
        >>> floor_log(65536, 2)
        16
        >>> floor_log(9, 2)
        3
        >>> floor_log(1, 4)
        0
    """
    if x < 1:
        raise ValueError(f"x must be positive, got {x}")
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")

    exponent = 0
    probe = base
    while probe <= x:
        probe *= base
        exponent += 1
    return exponent


def exact_log(x: int, base: int) -> Optional[int]:
    """
    Точный логарифм: e такое, что base^e == x, иначе None.

    Examples:
        >>> exact_log(65536, 16)
        4
        >>> exact_log(9, 2) is None
        True
    """
    candidate = floor_log(x, base)
    if base**candidate == x:
        return candidate
    return None


# =============================================================================
# EUCLIDEAN DIVISION
# =============================================================================


def euclidean_divmod(a: int, b: int) -> tuple[int, int]:
    """
    Деление с остатком на неотрицательных: a = q*b + r, 0 <= r < b.

    Args:
        a: делимое (>= 0)
        b: делитель (> 0)

    Returns:
        (quotient, remainder)

    Examples:
        >>> euclidean_divmod(140, 11)
        (12, 8)
        >>> euclidean_divmod(3, 10)
        (0, 3)
    """
    _require_non_negative("a", a)
    if b <= 0:
        raise ValueError(f"b must be positive, got {b}")
    return divmod(a, b)
