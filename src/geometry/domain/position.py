"""
Position — point on the plane

Value model of an absolute point (x, y) on the integer grid.

Position.origin() returns the shared, read-only point (0, 0). The instance
is created once at import and is frozen: assigning its fields or
translating it in place raises pydantic.ValidationError.
"""

from typing import Final

from pydantic import BaseModel, Field

from src.geometry.domain.vector import Vector


# =============================================================================
# PARAMETERS
# =============================================================================

# Coordinates of the shared origin
ORIGIN_X: Final[int] = 0
ORIGIN_Y: Final[int] = 0


# =============================================================================
# POSITION MODEL
# =============================================================================


class Position(BaseModel):
    """
    Point on the plane.

    Translated by a Vector; never added to another Position.
    """

    x: int = Field(..., description="X coordinate")
    y: int = Field(..., description="Y coordinate")

    model_config = {"strict": True, "validate_assignment": True}

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y)

    def reflection(self) -> "Position":
        """
        Reflection across the line x = y.

        Returns:
            New position (y, x)
        """
        return Position(self.y, self.x)

    def accumulate(self, vec: Vector) -> "Position":
        """
        Translate this position by vec in place.

        Args:
            vec: Translation vector

        Returns:
            self, so calls can be chained

        Raises:
            ValidationError: If called on the frozen origin
        """
        self.x = self.x + vec.x
        self.y = self.y + vec.y
        return self

    @staticmethod
    def origin() -> "Position":
        """Shared read-only (0, 0)."""
        return _ORIGIN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: object) -> "Position":
        if not isinstance(other, Vector):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    __radd__ = __add__

    def __iadd__(self, other: object) -> "Position":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.accumulate(other)


class FrozenPosition(Position):
    """
    Position that rejects every mutation.

    Backs Position.origin() and the corner held by Rectangle. Unhashable
    like Position, so equal values behave the same whichever kind is held.
    """

    model_config = {"frozen": True}

    __hash__ = None  # type: ignore[assignment]


# Shared origin instance
_ORIGIN: Final[Position] = FrozenPosition(ORIGIN_X, ORIGIN_Y)
