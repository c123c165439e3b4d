"""
Core math modules

Режимы вычисления (PEANO / NATIVE) и closed-form эквиваленты поисковых
операций ℕ.
"""

from src.core.math.closed_form import (
    euclidean_divmod,
    exact_log,
    exact_root,
    floor_log,
    floor_root,
)
from src.core.math.derivation import (
    DEFAULT_ARITHMETIC_CONFIG,
    NATIVE_ARITHMETIC_CONFIG,
    ArithmeticConfig,
    DerivationMode,
    resolve_config,
)

__all__ = [
    # Derivation — Config
    "ArithmeticConfig",
    "DerivationMode",
    "DEFAULT_ARITHMETIC_CONFIG",
    "NATIVE_ARITHMETIC_CONFIG",
    "resolve_config",
    # Closed form
    "euclidean_divmod",
    "exact_log",
    "exact_root",
    "floor_log",
    "floor_root",
]
