"""Exception hierarchy for the arbitrary-precision engine."""

from __future__ import annotations

from typing import Any


class BigUintError(Exception):
    """
    Base exception for all BigUint errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class BigUintPreconditionError(BigUintError, ArithmeticError):
    """
    Base class for fatal precondition violations.

    The operation is aborted and no value is produced. Callers that want to
    avoid these must validate operands before calling.
    """


class DivisionByZeroError(BigUintPreconditionError, ZeroDivisionError):
    """Raised when the divisor of a division or remainder is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


class NegativeResultError(BigUintPreconditionError):
    """
    Raised when a subtraction would produce a value below zero.

    Attributes:
        minuend: The left operand.
        subtrahend: The right operand, strictly greater than the minuend.

    The message reports operand bit lengths, never their decimal values.
    """

    def __init__(self, minuend: Any, subtrahend: Any) -> None:
        self.minuend = minuend
        self.subtrahend = subtrahend

        super().__init__(
            f"subtraction would be less than 0: {minuend.bit_length()}-bit minuend "
            f"is smaller than {subtrahend.bit_length()}-bit subtrahend"
        )


class InternalConsistencyError(BigUintPreconditionError):
    """
    Raised when an internal arithmetic check fails.

    Attributes:
        operation: The operation whose result failed the check.
        detail: Description of the violated condition.
    """

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail

        super().__init__(f"Inconsistent {operation}: {detail}")


class BigUintDomainError(BigUintError, ValueError):
    """
    Base class for recoverable domain errors.

    Raised when operands are well-formed but the result is undefined or
    refused, so callers can branch on the condition.
    """


class ZeroToZeroError(BigUintDomainError):
    """Raised for the indeterminate form 0 ** 0."""

    def __init__(self) -> None:
        super().__init__("zero to the power of zero is undefined")


class ExponentTooLargeError(BigUintDomainError):
    """
    Raised when an exponent does not fit in a single limb.

    Attributes:
        limb_count: The number of significant limbs in the exponent.
    """

    def __init__(self, limb_count: int) -> None:
        self.limb_count = limb_count

        super().__init__(f"exponent too large: needs {limb_count} limbs, at most 1 allowed")


class LimbOverflowError(BigUintError, OverflowError):
    """
    Raised when a value does not fit in a single 64-bit limb.

    Attributes:
        value: The offending value.
    """

    def __init__(self, value: int) -> None:
        self.value = value

        super().__init__(f"{value} is out of range for a limb (valid range: [0, {2**64 - 1}])")
