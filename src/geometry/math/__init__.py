"""
Core math primitives for plane geometry

Integer validation guards shared by the domain types.
"""

from src.geometry.math.safeguards import (
    MIN_SIDE_LENGTH,
    is_strictly_between,
    is_valid_int,
    validate_positive,
)

__all__ = [
    # Constants
    "MIN_SIDE_LENGTH",
    # Predicates
    "is_valid_int",
    "is_strictly_between",
    # Validation
    "validate_positive",
]
