"""
Тесты для closed-form эквивалентов поисковых операций ℕ

Проверяемые инварианты:
1. floor_root / floor_log совпадают с линейным поиском от нуля
2. exact_* возвращают None без точного совпадения
3. Конфигурация derivation immutable, default — PEANO
"""

import dataclasses

import pytest

from src.core.math import (
    DEFAULT_ARITHMETIC_CONFIG,
    NATIVE_ARITHMETIC_CONFIG,
    ArithmeticConfig,
    DerivationMode,
    euclidean_divmod,
    exact_log,
    exact_root,
    floor_log,
    floor_root,
    resolve_config,
)


def linear_floor_root(x: int, degree: int) -> int:
    b = 0
    while (b + 1) ** degree <= x:
        b += 1
    return b


def linear_floor_log(x: int, base: int) -> int:
    e = 0
    while base ** (e + 1) <= x:
        e += 1
    return e


# =============================================================================
# ТЕСТЫ: Root
# =============================================================================


class TestRoot:
    @pytest.mark.parametrize("x", range(0, 130))
    @pytest.mark.parametrize("degree", [1, 2, 3, 5])
    def test_matches_linear_search(self, x, degree):
        assert floor_root(x, degree) == linear_floor_root(x, degree)

    def test_large_values(self):
        assert floor_root(2**128, 2) == 2**64
        assert floor_root(2**128 - 1, 2) == 2**64 - 1
        assert exact_root(3**60, 20) == 27

    def test_exact(self):
        assert exact_root(65536, 2) == 256
        assert exact_root(65536, 16) == 2
        assert exact_root(8, 2) is None

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            floor_root(-1, 2)
        with pytest.raises(ValueError):
            floor_root(4, 0)


# =============================================================================
# ТЕСТЫ: Logarithm
# =============================================================================


class TestLogarithm:
    @pytest.mark.parametrize("x", range(1, 130))
    @pytest.mark.parametrize("base", [2, 3, 10])
    def test_matches_linear_search(self, x, base):
        assert floor_log(x, base) == linear_floor_log(x, base)

    def test_exact(self):
        assert exact_log(65536, 2) == 16
        assert exact_log(1, 7) == 0
        assert exact_log(9, 2) is None

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            floor_log(0, 2)
        with pytest.raises(ValueError):
            floor_log(4, 1)


# =============================================================================
# ТЕСТЫ: Euclidean divmod
# =============================================================================


class TestEuclideanDivmod:
    def test_values(self):
        assert euclidean_divmod(140, 11) == (12, 8)
        assert euclidean_divmod(0, 5) == (0, 0)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            euclidean_divmod(-1, 2)
        with pytest.raises(ValueError):
            euclidean_divmod(1, 0)


# =============================================================================
# ТЕСТЫ: Config
# =============================================================================


class TestArithmeticConfig:
    def test_default_is_peano(self):
        assert DEFAULT_ARITHMETIC_CONFIG.mode is DerivationMode.PEANO
        assert not DEFAULT_ARITHMETIC_CONFIG.is_native
        assert NATIVE_ARITHMETIC_CONFIG.is_native

    def test_resolve(self):
        assert resolve_config(None) is DEFAULT_ARITHMETIC_CONFIG
        assert resolve_config(NATIVE_ARITHMETIC_CONFIG) is NATIVE_ARITHMETIC_CONFIG

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ARITHMETIC_CONFIG.mode = DerivationMode.NATIVE  # type: ignore

    def test_mode_from_string(self):
        assert ArithmeticConfig(mode=DerivationMode("native")).is_native
