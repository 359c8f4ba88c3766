"""
Tests for integer safeguards

Covers:
1. is_valid_int / is_strictly_between predicates
2. validate_positive messages and bounds
"""

import pytest

from src.geometry.math import (
    MIN_SIDE_LENGTH,
    is_strictly_between,
    is_valid_int,
    validate_positive,
)


class TestPredicates:
    """is_valid_int, is_strictly_between"""

    def test_valid_int(self) -> None:
        assert is_valid_int(0)
        assert is_valid_int(-12)
        assert is_valid_int(10**20)

    def test_invalid_int(self) -> None:
        assert not is_valid_int(True)
        assert not is_valid_int(1.0)
        assert not is_valid_int("1")
        assert not is_valid_int(None)

    def test_strictly_between(self) -> None:
        assert is_strictly_between(1, 0, 2)
        assert not is_strictly_between(0, 0, 2)
        assert not is_strictly_between(2, 0, 2)
        assert not is_strictly_between(1, 1, 1)


class TestValidatePositive:
    """validate_positive"""

    def test_accepts_minimum(self) -> None:
        validate_positive(MIN_SIDE_LENGTH, "width")
        validate_positive(1000, "width")

    def test_rejects_zero_and_negative(self) -> None:
        with pytest.raises(ValueError, match=r"width must be >= 1, got 0"):
            validate_positive(0, "width")

        with pytest.raises(ValueError, match=r"height must be >= 1, got -1"):
            validate_positive(-1, "height")

    def test_rejects_non_int(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            validate_positive(2.0, "width")

        with pytest.raises(ValueError, match="must be an int"):
            validate_positive(True, "width")
