"""Общие fixtures для unit тестов башни ℕ → ℤ → ℚ."""

import pytest

from src.core.math.derivation import (
    DEFAULT_ARITHMETIC_CONFIG,
    NATIVE_ARITHMETIC_CONFIG,
    ArithmeticConfig,
)


@pytest.fixture(
    params=[DEFAULT_ARITHMETIC_CONFIG, NATIVE_ARITHMETIC_CONFIG],
    ids=["peano", "native"],
)
def config(request) -> ArithmeticConfig:
    """Оба режима вычисления: результаты обязаны совпадать."""
    return request.param
