"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema контрактов:
- Валидность самих схем и их размещение внутри пакета
- Ленивая загрузка и кэш скомпилированных validators
- Детекция нарушений required полей, типов и constraints
- Сериализация/десериализация значений башни
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

import src.core.contracts.validators as validators_module
from src.core.contracts import (
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
from src.core.domain import Integer, Natural, Rational
from src.core.math import NATIVE_ARITHMETIC_CONFIG


def rational(numerator: int, denominator: int) -> Rational:
    return Rational(
        numerator=Integer(value=numerator), denominator=Integer(value=denominator)
    )


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class TestSchemaLoader:
    @pytest.mark.parametrize("kind", KINDS)
    def test_schemas_are_valid(self, kind):
        schema = SchemaLoader().load_schema(kind)
        Draft202012Validator.check_schema(schema)
        assert schema["title"].lower() == kind
        assert schema["properties"]["kind"] == {"const": kind}

    def test_schemas_ship_inside_package(self):
        """Схемы лежат рядом с модулем и попадают в установленный пакет."""
        package_dir = Path(validators_module.__file__).parent
        assert SchemaLoader().schema_dir == package_dir / "schema"
        for kind in KINDS:
            assert (package_dir / "schema" / f"{kind}.json").is_file()

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("natural") is loader.load_schema("natural")

    def test_validator_compiled_once(self):
        loader = SchemaLoader()
        assert isinstance(loader.validator("rational"), Draft202012Validator)
        assert loader.validator("rational") is loader.validator("rational")

    def test_default_loader_is_shared(self):
        assert default_schema_loader() is default_schema_loader()

    def test_missing_directory_is_lazy(self, tmp_path):
        """Отсутствие каталога проявляется только при запросе схемы."""
        loader = SchemaLoader(tmp_path / "absent")
        with pytest.raises(FileNotFoundError):
            loader.load_schema("natural")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("real")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "natural.json").write_text(
            json.dumps({"type": 42}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("natural")


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidation:
    def test_valid_payloads(self):
        validate_natural({"kind": "natural", "value": 42})
        validate_integer({"kind": "integer", "value": -42})
        validate_rational({"kind": "rational", "numerator": -3, "denominator": 4})

    def test_kind_taken_from_payload(self):
        assert validate_payload({"kind": "integer", "value": 5}) == "integer"

    @pytest.mark.parametrize(
        "payload",
        [
            {"kind": "natural", "value": -1},
            {"kind": "natural", "value": "42"},
            {"kind": "natural", "value": True},
            {"kind": "natural"},
            {"kind": "integer", "value": 1},
            {"kind": "natural", "value": 1, "extra": 0},
        ],
    )
    def test_invalid_natural(self, payload):
        assert not is_valid_payload(payload, "natural")
        with pytest.raises(ValidationError):
            validate_natural(payload)

    def test_invalid_integer(self):
        assert not is_valid_payload({"kind": "integer", "value": 1.5})

    def test_unknown_kind(self):
        assert not is_valid_payload({"kind": "real", "value": 1})
        assert not is_valid_payload([1, 2])
        with pytest.raises(ValidationError, match="unknown number kind"):
            validate_payload({"kind": "real", "value": 1})

    def test_zero_denominator_rejected(self):
        payload = {"kind": "rational", "numerator": 1, "denominator": 0}
        errors = list(iter_payload_errors(payload, "rational"))
        assert len(errors) == 1
        with pytest.raises(ValidationError):
            validate_rational(payload)

    def test_all_errors_reported(self):
        payload = {"kind": "rational", "numerator": "1", "denominator": 0, "x": 1}
        assert len(list(iter_payload_errors(payload, "rational"))) == 3


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestPayloads:
    def test_to_payload(self):
        assert to_payload(Natural(value=7)) == {"kind": "natural", "value": 7}
        assert to_payload(Integer(value=-7)) == {"kind": "integer", "value": -7}

    def test_rational_payload_is_canonical(self):
        payload = to_payload(rational(6, -8))
        assert payload == {"kind": "rational", "numerator": -3, "denominator": 4}
        validate_rational(payload)

    @pytest.mark.parametrize(
        "value",
        [Natural(value=0), Natural(value=65536), Integer(value=-1), rational(140, 11)],
    )
    def test_round_trip(self, value):
        assert from_payload(to_payload(value)) == value

    def test_from_payload_reduces(self, config):
        value = from_payload(
            {"kind": "rational", "numerator": 56, "denominator": 8}, config=config
        )
        assert (value.numerator.value, value.denominator.value) == (7, 1)

    def test_large_rational_payload(self):
        payload = {"kind": "rational", "numerator": 6 * 10**20, "denominator": -9}
        value = from_payload(payload, config=NATIVE_ARITHMETIC_CONFIG)
        assert (value.numerator.value, value.denominator.value) == (-2 * 10**20, 3)
        assert to_payload(value)["numerator"] == -2 * 10**20

    @pytest.mark.parametrize(
        "payload",
        [
            {"kind": "real", "value": 1},
            {"value": 1},
            {"kind": "rational", "numerator": 1, "denominator": 0},
        ],
    )
    def test_from_payload_rejects(self, payload):
        with pytest.raises(ValidationError):
            from_payload(payload)

    def test_to_payload_rejects_foreign_values(self):
        with pytest.raises(TypeError):
            to_payload(1.5)  # type: ignore
