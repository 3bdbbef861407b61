"""Arbitrary-precision unsigned integer type."""

from __future__ import annotations

import logging
from typing import Any, Iterable, NoReturn

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from . import config
from .constants import LIMB_BASE, LIMB_BITS, LIMB_GROWTH_SHIFT, LIMB_MASK, LIMB_TOP_BIT
from .exceptions import (
    DivisionByZeroError,
    InternalConsistencyError,
    LimbOverflowError,
    NegativeResultError,
)

logger = logging.getLogger(__name__)


def _check_limb(value: Any) -> int:
    """
    Validate a native value as a single 64-bit limb.

    Raises:
        TypeError: If `value` is not an `int` (booleans are rejected).
        LimbOverflowError: If `value` is outside [0, 2**64 - 1].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not (0 <= value < LIMB_BASE):
        raise LimbOverflowError(value)
    return value


def as_biguint(value: Any) -> BigUint:
    """
    Accept a BigUint as is, or convert a native int that fits one limb.

    Raises:
        TypeError: If `value` is neither a BigUint nor an int.
        LimbOverflowError: If a native `value` is outside [0, 2**64 - 1].
    """
    if isinstance(value, BigUint):
        return value
    return BigUint(value)


class BigUint:
    """
    An arbitrary-precision unsigned integer.

    The value is held as a list of 64-bit limbs, least significant first.
    Storage is never trimmed: any index past the stored length reads as zero,
    so `[5]` and `[5, 0, 0]` are the same value for every operation.
    """

    __slots__ = ("_limbs",)

    _limbs: list[int]

    def __init__(self, value: int = 0) -> None:
        """
        Create a single-limb value from a native unsigned 64-bit integer.

        Raises:
            TypeError: If `value` is not an `int`.
            LimbOverflowError: If `value` is outside [0, 2**64 - 1].
        """
        self._limbs = [_check_limb(value)]

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> Self:
        """
        Create a value from little-endian limbs.

        Args:
            limbs: At least one limb, each in [0, 2**64 - 1].

        Raises:
            ValueError: If `limbs` is empty.
        """
        checked = [_check_limb(limb) for limb in limbs]
        if not checked:
            raise ValueError("BigUint requires at least one limb")
        return cls._wrap(checked)

    @classmethod
    def _wrap(cls, limbs: list[int]) -> Self:
        """Adopt an already valid limb list without copying it."""
        instance = cls.__new__(cls)
        instance._limbs = limbs
        return instance

    @classmethod
    def _from_native(cls, value: int) -> Self:
        """Split a non-negative native int of any size into limbs."""
        limbs = [value & LIMB_MASK]
        value >>= LIMB_BITS
        while value:
            limbs.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        return cls._wrap(limbs)

    # =================================================================
    # Representation
    # =================================================================

    @property
    def limbs(self) -> tuple[int, ...]:
        """A snapshot of the stored limbs, least significant first."""
        return tuple(self._limbs)

    def get(self, index: int) -> int:
        """Return limb `index`, or 0 past the stored length."""
        if index < len(self._limbs):
            return self._limbs[index]
        return 0

    def _set(self, index: int, value: int) -> None:
        """Write limb `index`, growing storage with zero limbs as needed."""
        while index >= len(self._limbs):
            self._limbs.append(0)
        self._limbs[index] = value

    def _significant_length(self) -> int:
        """Number of limbs up to and including the highest nonzero one (at least 1)."""
        length = len(self._limbs)
        while length > 1 and self._limbs[length - 1] == 0:
            length -= 1
        return length

    def is_zero(self) -> bool:
        """Check whether every stored limb is zero."""
        return not any(self._limbs)

    def bit_length(self) -> int:
        """Number of bits needed to represent the value, 0 for zero."""
        top = self._significant_length() - 1
        return top * LIMB_BITS + self._limbs[top].bit_length()

    def copy(self) -> Self:
        """Return an independent copy of this value."""
        return self._wrap(list(self._limbs))

    def __copy__(self) -> Self:
        """Support `copy.copy`."""
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Support `copy.deepcopy`."""
        return self.copy()

    # =================================================================
    # Comparison
    # =================================================================

    def compare(self, other: BigUint | int) -> int:
        """
        Three-way comparison on the zero-padded logical values.

        Returns:
            -1, 0 or 1 as `self` is less than, equal to or greater than `other`.
        """
        other = self._coerce(other, "compare")
        for i in reversed(range(max(len(self._limbs), len(other._limbs)))):
            a, b = self.get(i), other.get(i)
            if a != b:
                return -1 if a < b else 1
        return 0

    def _raise_type_error(self, other: Any, op_symbol: str) -> NoReturn:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def _coerce(self, other: Any, op_symbol: str) -> BigUint:
        """Accept a BigUint or a native int operand, rejecting other types."""
        if isinstance(other, bool) or not isinstance(other, (BigUint, int)):
            self._raise_type_error(other, op_symbol)
        return as_biguint(other)

    def _order(self, other: object) -> Any:
        """
        Three-way comparison for the rich comparison operators.

        Native ints outside one limb, negative ones included, compare by value.

        Returns:
            -1, 0 or 1, or `NotImplemented` for unsupported operand types.
        """
        if isinstance(other, bool) or not isinstance(other, (BigUint, int)):
            return NotImplemented
        if isinstance(other, int) and not (0 <= other < LIMB_BASE):
            value = int(self)
            return (value > other) - (value < other)
        return self.compare(other)

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)."""
        order = self._order(other)
        return order if order is NotImplemented else order == 0

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)."""
        order = self._order(other)
        return order if order is NotImplemented else order != 0

    def __lt__(self, other: BigUint | int) -> bool:
        """Handle the less-than operator (`<`)."""
        order = self._order(other)
        return order if order is NotImplemented else order < 0

    def __le__(self, other: BigUint | int) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        order = self._order(other)
        return order if order is NotImplemented else order <= 0

    def __gt__(self, other: BigUint | int) -> bool:
        """Handle the greater-than operator (`>`)."""
        order = self._order(other)
        return order if order is NotImplemented else order > 0

    def __ge__(self, other: BigUint | int) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        order = self._order(other)
        return order if order is NotImplemented else order >= 0

    def __hash__(self) -> int:
        """Equal logical values hash alike, and match the hash of the native int."""
        return hash(int(self))

    def __bool__(self) -> bool:
        """True for any nonzero value."""
        return not self.is_zero()

    def __int__(self) -> int:
        """Convert to a native Python integer."""
        result = 0
        for limb in reversed(self._limbs):
            result = (result << LIMB_BITS) | limb
        return result

    # =================================================================
    # Scaled accumulation, addition, subtraction, multiplication
    # =================================================================

    def _add_scaled(self, other: BigUint, digit: int, shift: int) -> None:
        """
        Compute `self += (other * digit) << (64 * shift)` in place.

        Each step forms `limb + other_limb * digit + carry`, which is below
        2**128, keeps the low 64 bits and carries the rest.
        """
        carry = 0
        for i in range(max(len(self._limbs), len(other._limbs) + shift)):
            b = other.get(i - shift) if i >= shift else 0
            total = self.get(i) + b * digit + carry
            self._set(i, total & LIMB_MASK)
            carry = total >> LIMB_BITS
        if carry:
            self._limbs.append(carry)

    def __add__(self, other: BigUint | int) -> BigUint:
        """Handle the addition operator (`+`)."""
        other = self._coerce(other, "+")
        result = self.copy()
        result._add_scaled(other, 1, 0)
        return result

    def __radd__(self, other: int) -> BigUint:
        """Handle the reverse addition operator (`+`)."""
        return self._coerce(other, "+") + self

    def __sub__(self, other: BigUint | int) -> BigUint:
        """
        Handle the subtraction operator (`-`).

        Raises:
            NegativeResultError: If `other` is greater than `self`.
        """
        other = self._coerce(other, "-")
        if self < other:
            raise NegativeResultError(self, other)
        if self == other:
            return BigUint(0)

        borrow = 0
        limbs: list[int] = []
        for i in range(max(len(self._limbs), len(other._limbs))):
            a, b = self.get(i), other.get(i)
            if a >= b + borrow:
                limbs.append(a - b - borrow)
                borrow = 0
            else:
                limbs.append(a + LIMB_BASE - b - borrow)
                borrow = 1

        if config.CHECK_INVARIANTS and borrow != 0:
            raise InternalConsistencyError("subtraction", f"final borrow is {borrow}")
        return BigUint._wrap(limbs)

    def __rsub__(self, other: int) -> BigUint:
        """Handle the reverse subtraction operator (`-`)."""
        return self._coerce(other, "-") - self

    def __mul__(self, other: BigUint | int) -> BigUint:
        """Handle the multiplication operator (`*`)."""
        other = self._coerce(other, "*")
        result = BigUint(0)
        for shift, digit in enumerate(other._limbs):
            result._add_scaled(self, digit, shift)
        return result

    def __rmul__(self, other: int) -> BigUint:
        """Handle the reverse multiplication operator (`*`)."""
        return self._coerce(other, "*") * self

    # =================================================================
    # Shift primitives
    # =================================================================

    def _shl1(self) -> None:
        """Multiply by two in place."""
        limbs = self._limbs
        if limbs[-1] >> LIMB_GROWTH_SHIFT:
            limbs.append(0)
        for i in reversed(range(len(limbs))):
            shifted = (limbs[i] << 1) & LIMB_MASK
            if i:
                shifted |= limbs[i - 1] >> LIMB_TOP_BIT
            limbs[i] = shifted

    def _shr1(self) -> None:
        """Floor-divide by two in place."""
        limbs = self._limbs
        for i in range(len(limbs)):
            limbs[i] = (limbs[i] >> 1) | ((self.get(i + 1) & 1) << LIMB_TOP_BIT)

    # =================================================================
    # Division
    # =================================================================

    def divmod(self, other: BigUint | int) -> tuple[BigUint, BigUint]:
        """
        Compute the quotient and remainder of `self / other`.

        The general case is a doubling/bisection long division: a power of
        two `step` and `step * other` are doubled while the product is below
        the remaining dividend, then halved while it exceeds it. The product
        is subtracted, `step` is added to the quotient, and the search resumes
        from the current `step` until the remainder drops below `other`.

        Returns:
            `(quotient, remainder)` with `quotient * other + remainder == self`
            and `remainder < other`.

        Raises:
            DivisionByZeroError: If `other` is zero.
        """
        other = self._coerce(other, "divmod")
        if other.is_zero():
            raise DivisionByZeroError()
        if other == 1:
            return self.copy(), BigUint(0)
        if self.is_zero():
            return BigUint(0), BigUint(0)
        if self < other:
            return BigUint(0), self.copy()
        if self == other:
            return BigUint(1), BigUint(0)

        remaining = self.copy()
        quotient = BigUint(0)
        step = BigUint(1)
        step_times_other = other.copy()
        rounds = 0
        while remaining >= other:
            while step_times_other < remaining:
                step._shl1()
                step_times_other._shl1()
            while step_times_other > remaining:
                step._shr1()
                step_times_other._shr1()
            remaining = remaining - step_times_other
            quotient._add_scaled(step, 1, 0)
            rounds += 1

        logger.debug(
            "Divided %d-limb dividend by %d-limb divisor in %d rounds",
            self._significant_length(),
            other._significant_length(),
            rounds,
        )

        if config.CHECK_INVARIANTS and (
            remaining >= other or quotient * other + remaining != self
        ):
            raise InternalConsistencyError(
                "division",
                f"{self.bit_length()}-bit dividend by {other.bit_length()}-bit divisor "
                "breaks quotient * divisor + remainder == dividend",
            )
        return quotient, remaining

    def __divmod__(self, other: BigUint | int) -> tuple[BigUint, BigUint]:
        """Handle `divmod(self, other)`."""
        return self.divmod(other)

    def __rdivmod__(self, other: int) -> tuple[BigUint, BigUint]:
        """Handle `divmod(other, self)`."""
        return self._coerce(other, "divmod").divmod(self)

    def __floordiv__(self, other: BigUint | int) -> BigUint:
        """Handle the floor division operator (`//`)."""
        return self.divmod(other)[0]

    def __rfloordiv__(self, other: int) -> BigUint:
        """Handle the reverse floor division operator (`//`)."""
        return self._coerce(other, "//").divmod(self)[0]

    def __mod__(self, other: BigUint | int) -> BigUint:
        """Handle the modulo operator (`%`)."""
        return self.divmod(other)[1]

    def __rmod__(self, other: int) -> BigUint:
        """Handle the reverse modulo operator (`%`)."""
        return self._coerce(other, "%").divmod(self)[1]

    # =================================================================
    # Exponentiation
    # =================================================================

    def __pow__(self, exponent: BigUint | int, modulo: None = None) -> BigUint:
        """Handle the exponentiation operator (`**`) and `pow(self, exp)`."""
        if modulo is not None:
            raise TypeError("pow() 3rd argument not supported for BigUint")
        from .ops import power

        return power(self, exponent)

    def __rpow__(self, base: int) -> BigUint:
        """Handle the reverse exponentiation operator (`**`)."""
        from .ops import power

        return power(self._coerce(base, "**"), self)

    # =================================================================
    # Decimal formatting
    # =================================================================

    def to_decimal(self) -> str:
        """Render the value as a decimal string without leading zeros."""
        if self.is_zero():
            return "0"
        if self._significant_length() == 1:
            return str(self._limbs[0])

        digits: list[str] = []
        n: BigUint = self
        while not n.is_zero():
            n, digit = n.divmod(10)
            digits.append(chr(ord("0") + digit.get(0)))
        return "".join(reversed(digits))

    def __str__(self) -> str:
        """Return the decimal representation."""
        return self.to_decimal()

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({self.to_decimal()})"

    def __format__(self, format_spec: str) -> str:
        """Only the empty format spec is supported; output is always decimal."""
        if format_spec:
            raise TypeError(f"Unsupported format string for BigUint: {format_spec!r}")
        return self.to_decimal()

    # =================================================================
    # Pydantic integration
    # =================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BigUint:
            """Accept a BigUint instance or any non-negative native int."""
            if isinstance(value, BigUint):
                return value
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Expected int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{value} is negative")
            return cls._from_native(value)

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                validate, core_schema.int_schema(ge=0, strict=True)
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance),
                return_schema=core_schema.int_schema(ge=0),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format="biguint")
        return json_schema
