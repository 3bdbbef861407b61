"""
Global configuration for the biguint engine.

Settings are read from the environment once, at import time.
"""

import os

_SUPPORTED_BIGUINT_ENVS: list[str] = ["prod", "test"]

BIGUINT_ENV = os.environ.get("BIGUINT_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if BIGUINT_ENV not in _SUPPORTED_BIGUINT_ENVS:
    raise ValueError(
        f"Invalid BIGUINT_ENV environment variable: '{BIGUINT_ENV}'. "
        f"Supported values: {_SUPPORTED_BIGUINT_ENVS}"
    )

CHECK_INVARIANTS: bool = BIGUINT_ENV == "test"
"""Whether internal consistency checks run after subtraction and division."""
