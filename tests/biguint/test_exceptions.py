"""Tests for the BigUint exception hierarchy."""

import pytest

from biguint import (
    BigUint,
    BigUintDomainError,
    BigUintError,
    BigUintPreconditionError,
    DivisionByZeroError,
    ExponentTooLargeError,
    InternalConsistencyError,
    LimbOverflowError,
    NegativeResultError,
    ZeroToZeroError,
)


@pytest.mark.parametrize(
    "error, bases",
    [
        (DivisionByZeroError(), (BigUintPreconditionError, ZeroDivisionError, ArithmeticError)),
        (NegativeResultError(BigUint(1), BigUint(2)), (BigUintPreconditionError,)),
        (InternalConsistencyError("division", "bad"), (BigUintPreconditionError,)),
        (ZeroToZeroError(), (BigUintDomainError, ValueError)),
        (ExponentTooLargeError(2), (BigUintDomainError, ValueError)),
        (LimbOverflowError(-1), (OverflowError,)),
    ],
)
def test_hierarchy(error: BigUintError, bases: tuple[type, ...]) -> None:
    """Every error is a BigUintError and a matching builtin exception."""
    assert isinstance(error, BigUintError)
    for base in bases:
        assert isinstance(error, base)


def test_fatal_and_recoverable_are_disjoint() -> None:
    """Callers can tell precondition violations from domain errors."""
    assert not isinstance(ZeroToZeroError(), BigUintPreconditionError)
    assert not isinstance(DivisionByZeroError(), BigUintDomainError)


def test_message_and_repr() -> None:
    """Errors expose their message and a readable repr."""
    error = ZeroToZeroError()
    assert error.message == "zero to the power of zero is undefined"
    assert str(error) == error.message
    assert repr(error) == "ZeroToZeroError('zero to the power of zero is undefined')"


def test_structured_attributes() -> None:
    """Errors carry the values that caused them."""
    negative = NegativeResultError(BigUint(3), BigUint(5))
    assert str(negative) == (
        "subtraction would be less than 0: 2-bit minuend is smaller than 3-bit subtrahend"
    )

    too_large = ExponentTooLargeError(4)
    assert too_large.limb_count == 4
    assert "4 limbs" in str(too_large)

    overflow = LimbOverflowError(2**64)
    assert overflow.value == 2**64
    assert "out of range for a limb" in str(overflow)

    inconsistent = InternalConsistencyError("subtraction", "final borrow is 1")
    assert inconsistent.operation == "subtraction"
    assert str(inconsistent) == "Inconsistent subtraction: final borrow is 1"
