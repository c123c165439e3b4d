"""
Derivation — режим вычисления операций башни ℕ → ℤ → ℚ

Каждая операция над ℕ определена через единственный примитив successor
("прибавить единицу"). Режим PEANO буквально разворачивает операцию до
successor и линейных монотонных поисков; режим NATIVE вычисляет тот же
результат в closed form на машинных целых.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба режима дают идентичные результаты на всех входах
2. Оба режима дают идентичную классификацию ошибок
3. Конфигурация immutable, глобального изменяемого состояния нет
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class DerivationMode(str, Enum):
    """Способ вычисления производных операций."""

    PEANO = "peano"  # через successor и линейный поиск
    NATIVE = "native"  # closed form


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики.

    PEANO — референсная семантика, стоимость пропорциональна величине чисел.
    NATIVE — эффективный путь с той же наблюдаемой семантикой.
    """

    mode: DerivationMode = DerivationMode.PEANO

    @property
    def is_native(self) -> bool:
        return self.mode is DerivationMode.NATIVE


DEFAULT_ARITHMETIC_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()

NATIVE_ARITHMETIC_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig(
    mode=DerivationMode.NATIVE
)


def resolve_config(config: ArithmeticConfig | None) -> ArithmeticConfig:
    """
    Конфигурация для вызова операции.

    Args:
        config: явная конфигурация или None

    Returns:
        config, либо DEFAULT_ARITHMETIC_CONFIG если config не задан
    """
    return config or DEFAULT_ARITHMETIC_CONFIG
