"""Limb geometry shared by the arbitrary-precision engine."""

LIMB_BITS: int = 64
"""The number of bits held by a single limb."""

LIMB_BASE: int = 2**LIMB_BITS
"""The radix of the limb representation (2**64)."""

LIMB_MASK: int = LIMB_BASE - 1
"""Mask selecting the low 64 bits of a wide intermediate."""

LIMB_TOP_BIT: int = LIMB_BITS - 1
"""Index of the most significant bit of a limb."""

LIMB_GROWTH_SHIFT: int = LIMB_BITS - 2
"""
Index of bit 62 of a limb.

A left shift appends a fresh zero limb first whenever the stored top limb has
bit 62 or bit 63 set, so that no bit is shifted out.
"""
