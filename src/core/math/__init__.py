"""
Core math modules

Целочисленные примитивы для рациональных значений.
"""

# Integer Ops (НОД и сокращение дробей)
from src.core.math.integer_ops import (
    # Constants
    ZERO_DENOMINATOR,
    # Exceptions
    InvalidArgumentError,
    # Validation
    validate_denominator,
    validate_integer,
    # Functions
    gcd,
    simplify,
)

__all__ = [
    # Integer Ops — Constants
    "ZERO_DENOMINATOR",
    # Integer Ops — Exceptions
    "InvalidArgumentError",
    # Integer Ops — Validation
    "validate_denominator",
    "validate_integer",
    # Integer Ops — Functions
    "gcd",
    "simplify",
]
