"""Number-theoretic operations over BigUint: gcd, lcm and exponentiation."""

from __future__ import annotations

import logging

from .constants import LIMB_BASE, LIMB_BITS
from .core import BigUint, as_biguint
from .exceptions import ExponentTooLargeError, ZeroToZeroError

logger = logging.getLogger(__name__)


def gcd(a: BigUint | int, b: BigUint | int) -> BigUint:
    """
    Greatest common divisor by the iterative Euclidean algorithm.

    `gcd(a, 0)` is `a`, and `gcd(0, 0)` is 0.
    """
    a, b = as_biguint(a), as_biguint(b)
    while b >= 1:
        a, b = b, a % b
    return a


def lcm(a: BigUint | int, b: BigUint | int) -> BigUint:
    """
    Least common multiple, computed as `a * b // gcd(a, b)`.

    Raises:
        DivisionByZeroError: If both operands are zero.
    """
    a, b = as_biguint(a), as_biguint(b)
    return a * b // gcd(a, b)


def power(base: BigUint | int, exponent: BigUint | int) -> BigUint:
    """
    Raise `base` to `exponent` by binary exponentiation.

    The bits of the exponent are scanned from the least significant end,
    squaring the running base at each step and multiplying it into the result
    whenever the bit is set.

    Args:
        base: The base.
        exponent: The exponent; its value must fit in one 64-bit limb.

    Returns:
        `base ** exponent`.

    Raises:
        ZeroToZeroError: If both `base` and `exponent` are zero.
        ExponentTooLargeError: If `exponent` does not fit in one limb.
    """
    base = as_biguint(base)
    if isinstance(exponent, int) and not isinstance(exponent, bool) and exponent >= LIMB_BASE:
        limb_count = -(-exponent.bit_length() // LIMB_BITS)
        logger.debug("Rejected native exponent spanning %d limbs", limb_count)
        raise ExponentTooLargeError(limb_count)
    exponent = as_biguint(exponent)

    if base.is_zero() and exponent.is_zero():
        logger.debug("Rejected indeterminate 0 ** 0")
        raise ZeroToZeroError()
    if exponent.is_zero():
        return BigUint(1)

    limb_count = -(-exponent.bit_length() // LIMB_BITS)
    if limb_count > 1:
        logger.debug("Rejected exponent spanning %d limbs", limb_count)
        raise ExponentTooLargeError(limb_count)

    remaining = exponent.get(0)
    result = BigUint(1)
    square = base
    while remaining:
        if remaining & 1:
            result = result * square
        remaining >>= 1
        if remaining:
            square = square * square
    return result
