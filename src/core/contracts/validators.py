"""
JSON Schema Contract Validators

JSON представление значений башни ℕ/ℤ/ℚ и его валидация по формальным
JSON Schema контрактам (jsonschema, Draft 2020-12).

Схемы лежат внутри пакета (src/core/contracts/schema/), по одной на kind:
- natural.json   {"kind": "natural", "value": 42}
- integer.json   {"kind": "integer", "value": -42}
- rational.json  {"kind": "rational", "numerator": -3, "denominator": 4}

Каждая схема читается, проходит meta-validation и компилируется в
Draft202012Validator один раз, при первом обращении к своему kind.
Payload ℚ всегда сериализуется в канонической форме.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional, Tuple, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.integer import Integer
from src.core.domain.natural import Natural
from src.core.domain.rational import Rational
from src.core.math.derivation import ArithmeticConfig

logger = logging.getLogger(__name__)

Number = Union[Natural, Integer, Rational]

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

KINDS: Final[Tuple[str, ...]] = ("natural", "integer", "rational")


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaLoader:
    """
    Реестр схем по kind: JSON файл → meta-validation → скомпилированный validator.

    Ничего не читает с диска до первого запроса.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, kind: str) -> Dict[str, Any]:
        """
        Схема для kind (кэшируется).

        Raises:
            FileNotFoundError: схемы для kind нет
            ValueError: схема не проходит meta-validation
        """
        cached = self._schemas.get(kind)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{kind}.json"
        if not path.is_file():
            raise FileNotFoundError(f"no schema for kind {kind!r}: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"invalid JSON Schema for kind {kind!r}: {e.message}") from e

        logger.debug("loaded schema for kind %s from %s", kind, path)
        self._schemas[kind] = schema
        return schema

    def validator(self, kind: str) -> Draft202012Validator:
        """Скомпилированный validator для kind (кэшируется)."""
        compiled = self._validators.get(kind)
        if compiled is None:
            compiled = Draft202012Validator(self.load_schema(kind))
            self._validators[kind] = compiled
        return compiled


@lru_cache(maxsize=1)
def default_schema_loader() -> SchemaLoader:
    """Общий реестр пакета, создаётся при первом использовании."""
    return SchemaLoader()


def _validator_for(data: Any, kind: Optional[str]) -> Tuple[str, Draft202012Validator]:
    if kind is None:
        kind = data.get("kind") if isinstance(data, dict) else None
    if kind not in KINDS:
        raise ValidationError(f"unknown number kind: {kind!r}")
    return kind, default_schema_loader().validator(kind)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_payload(data: Any, kind: Optional[str] = None) -> str:
    """
    Валидация payload по схеме его kind.

    Args:
        data: JSON payload
        kind: ожидаемый kind; по умолчанию берётся из data["kind"]

    Returns:
        kind, по схеме которого прошла валидация

    Raises:
        ValidationError: kind неизвестен или payload не соответствует схеме
    """
    kind, validator = _validator_for(data, kind)
    validator.validate(data)
    return kind


def is_valid_payload(data: Any, kind: Optional[str] = None) -> bool:
    """Проверка payload без exception."""
    try:
        _, validator = _validator_for(data, kind)
    except ValidationError:
        return False
    return validator.is_valid(data)


def iter_payload_errors(data: Any, kind: str) -> Iterator[ValidationError]:
    """Все нарушения схемы kind, без остановки на первом."""
    _, validator = _validator_for(data, kind)
    return validator.iter_errors(data)


def validate_natural(data: Dict[str, Any]) -> None:
    validate_payload(data, "natural")


def validate_integer(data: Dict[str, Any]) -> None:
    validate_payload(data, "integer")


def validate_rational(data: Dict[str, Any]) -> None:
    validate_payload(data, "rational")


# =============================================================================
# SERIALIZATION
# =============================================================================


def to_payload(value: Number) -> Dict[str, Any]:
    """
    Сериализация значения башни в JSON payload.

    ℚ сериализуется в канонической форме.

    Raises:
        TypeError: если value не ℕ/ℤ/ℚ
    """
    if isinstance(value, Natural):
        return {"kind": "natural", "value": value.value}
    if isinstance(value, Integer):
        return {"kind": "integer", "value": value.value}
    if isinstance(value, Rational):
        numerator, denominator = value.as_tuple()
        return {"kind": "rational", "numerator": numerator, "denominator": denominator}
    raise TypeError(f"not a tower number: {type(value).__name__}")


def from_payload(
    data: Dict[str, Any], *, config: ArithmeticConfig | None = None
) -> Number:
    """
    Десериализация JSON payload в значение башни.

    Payload валидируется по схеме своего kind до построения значения;
    ℚ приводится к канонической форме (reduce в режиме config).

    Raises:
        ValidationError: kind неизвестен или payload не соответствует схеме
    """
    kind = validate_payload(data)

    if kind == "natural":
        return Natural(value=data["value"])
    if kind == "integer":
        return Integer(value=data["value"])
    return Rational(
        numerator=Integer(value=data["numerator"]),
        denominator=Integer(value=data["denominator"]),
    ).reduce(config=config)
