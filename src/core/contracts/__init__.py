"""
Contract Module

Граница системы: десятичные литералы и JSON контракты значений ℕ/ℤ/ℚ.
"""

from .literals import (
    format_number,
    parse_integer,
    parse_natural,
    parse_rational,
)
from .validators import (
    KINDS,
    SchemaLoader,
    default_schema_loader,
    from_payload,
    is_valid_payload,
    iter_payload_errors,
    to_payload,
    validate_integer,
    validate_natural,
    validate_payload,
    validate_rational,
)

__all__ = [
    # Literals
    "parse_natural",
    "parse_integer",
    "parse_rational",
    "format_number",
    # Schema registry
    "KINDS",
    "SchemaLoader",
    "default_schema_loader",
    # Validation
    "validate_payload",
    "is_valid_payload",
    "iter_payload_errors",
    "validate_natural",
    "validate_integer",
    "validate_rational",
    # Serialization
    "to_payload",
    "from_payload",
]
