"""Tests for BigUint validation and serialization in Pydantic models."""

from typing import Any

import pytest
from hypothesis import given
from pydantic import BaseModel, ValidationError, create_model

from biguint import BigUint
from tests.biguint.helpers import biguints, make_biguint


class Factorial(BaseModel):
    """A model holding an exact result."""

    n: int
    value: BigUint


def test_accepts_biguint_and_native_int() -> None:
    """Instances pass through unchanged and native ints of any size are converted."""
    big = make_biguint(10**30)
    assert Factorial(n=1, value=big).value is big

    model = Factorial(n=3, value=6)
    assert isinstance(model.value, BigUint)
    assert model.value == BigUint(6)

    wide = Factorial(n=30, value=2**200)
    assert isinstance(wide.value, BigUint)
    assert int(wide.value) == 2**200


@pytest.mark.parametrize("invalid_value", [-1, True, 1.5, "12", None])
def test_rejects_invalid_values(invalid_value: Any) -> None:
    """Anything other than a BigUint or a non-negative int fails validation."""
    model = create_model("Model", value=(BigUint, ...))
    with pytest.raises(ValidationError):
        model(value=invalid_value)


def test_serializes_as_integer() -> None:
    """Both python and JSON dumps emit the integer value."""
    model = Factorial(n=25, value=make_biguint(15511210043330985984000000))
    assert model.model_dump() == {"n": 25, "value": 15511210043330985984000000}
    assert model.model_dump_json() == '{"n":25,"value":15511210043330985984000000}'


@pytest.mark.parametrize("payload", ['{"n": 1, "value": "5"}', '{"n": 1, "value": -5}'])
def test_json_rejects_strings_and_negatives(payload: str) -> None:
    """JSON input must be a non-negative integer."""
    with pytest.raises(ValidationError):
        Factorial.model_validate_json(payload)


@given(pair=biguints())
def test_json_round_trip(pair: tuple[BigUint, int]) -> None:
    """Dumped JSON validates back to an equal value."""
    value, expected = pair
    model = Factorial(n=0, value=value)
    restored = Factorial.model_validate_json(model.model_dump_json())
    assert isinstance(restored.value, BigUint)
    assert restored.value == value
    assert int(restored.value) == expected


def test_json_schema_matches_validation_and_serialization() -> None:
    """Both schema modes describe a non-negative integer."""
    for mode in ("validation", "serialization"):
        schema = Factorial.model_json_schema(mode=mode)["properties"]["value"]
        assert schema["type"] == "integer"
        assert schema["format"] == "biguint"
    assert Factorial.model_json_schema()["properties"]["value"]["minimum"] == 0
