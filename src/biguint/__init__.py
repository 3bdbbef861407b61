"""Arbitrary-precision unsigned integers built on 64-bit limbs."""

from .constants import LIMB_BASE, LIMB_BITS
from .core import BigUint
from .exceptions import (
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
from .ops import gcd, lcm, power

__all__ = [
    # Core type
    "BigUint",
    "LIMB_BITS",
    "LIMB_BASE",
    # Operations
    "gcd",
    "lcm",
    "power",
    # Exceptions
    "BigUintError",
    "BigUintPreconditionError",
    "BigUintDomainError",
    "DivisionByZeroError",
    "NegativeResultError",
    "InternalConsistencyError",
    "ZeroToZeroError",
    "ExponentTooLargeError",
    "LimbOverflowError",
]
