"""
Domain models and value objects.

Contains the rational value variants built on top of src.core.math.
"""

from src.core.domain.rational import (
    FRACTION_SEPARATOR,
    NEGATIVE_SIGN,
    Rational,
    RationalBase,
    SimplifiedRational,
)

__all__ = [
    # Formatting constants
    "FRACTION_SEPARATOR",
    "NEGATIVE_SIGN",
    # Rational models
    "RationalBase",
    "Rational",
    "SimplifiedRational",
]
