"""Test helpers for biguint unit tests."""

from .builders import int_to_limbs, make_biguint
from .strategies import biguints, nonzero_biguints

__all__ = [
    "int_to_limbs",
    "make_biguint",
    "biguints",
    "nonzero_biguints",
]
