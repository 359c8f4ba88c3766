"""
Safeguards — integer validation primitives

Guards used by the domain types before a value is accepted:
- Coordinates and sides are plain ints (bool is rejected even though it
  subclasses int)
- Rectangle sides are at least MIN_SIDE_LENGTH
- Split places fall strictly inside the side being cut

INVARIANTS:
1. A failed validation raises ValueError and never mutates anything
2. Messages always name the parameter and the rejected value
"""

from typing import Any, Final

# =============================================================================
# PARAMETERS
# =============================================================================

# Smallest legal width/height on the integer grid
MIN_SIDE_LENGTH: Final[int] = 1


# =============================================================================
# PREDICATES
# =============================================================================


def is_valid_int(value: Any) -> bool:
    """
    Check that value is a plain integer.

    Examples:
        >>> is_valid_int(3)
        True
        >>> is_valid_int(True)
        False
        >>> is_valid_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_strictly_between(value: int, low: int, high: int) -> bool:
    """low < value < high"""
    return low < value < high


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: Any, name: str) -> None:
    """
    Validate a rectangle side length.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value is not an int or is below MIN_SIDE_LENGTH
    """
    if not is_valid_int(value):
        raise ValueError(f"{name} must be an int, got {value!r}")

    if value < MIN_SIDE_LENGTH:
        raise ValueError(f"{name} must be >= {MIN_SIDE_LENGTH}, got {value}")

