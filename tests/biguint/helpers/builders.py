"""Builders for BigUint test values."""

from __future__ import annotations

from biguint import LIMB_BITS, BigUint

_LIMB_MASK = (1 << LIMB_BITS) - 1


def int_to_limbs(value: int, padding: int = 0) -> list[int]:
    """
    Split a non-negative native int into little-endian 64-bit limbs.

    Args:
        value: The value to split.
        padding: Number of extra high zero limbs to append.
    """
    assert value >= 0
    limbs = []
    while True:
        limbs.append(value & _LIMB_MASK)
        value >>= LIMB_BITS
        if value == 0:
            break
    return limbs + [0] * padding


def make_biguint(value: int, padding: int = 0) -> BigUint:
    """Build a BigUint of any size, optionally with untrimmed zero limbs."""
    return BigUint.from_limbs(int_to_limbs(value, padding))
