"""
Rectangle — axis-aligned rectangle

A rectangle is its bottom-left corner plus the diagonal vector running to
the top-right corner.

INVARIANTS:
1. diagonal.x >= MIN_SIDE_LENGTH and diagonal.y >= MIN_SIDE_LENGTH
   (checked at construction and on every field assignment)
2. The rectangle owns its corner and diagonal: they are stored as frozen
   copies, so neither can be changed in place through the fields, and
   readers return mutable copies
3. Translation moves the corner only, width and height never change

SPLIT:
    split_horizontally(place) cuts along a horizontal line:
        lower = (width, place)          at corner
        upper = (width, height - place) at corner + (0, place)
    split_vertically(place) cuts along a vertical line:
        left  = (place, height)         at corner
        right = (width - place, height) at corner + (place, 0)
    In both cases 0 < place < side, otherwise InvalidSplitPlace.
"""

import logging

from pydantic import BaseModel, Field, field_validator

from src.geometry.domain.position import FrozenPosition, Position
from src.geometry.domain.vector import FrozenVector, Vector
from src.geometry.math.safeguards import (
    is_strictly_between,
    is_valid_int,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidSplitPlace(ValueError):
    """
    Split place outside the open interval (0, side).

    Raised before any piece is built; the rectangle is left untouched.
    """


# =============================================================================
# RECTANGLE MODEL
# =============================================================================


class Rectangle(BaseModel):
    """
    Axis-aligned rectangle with strictly positive width and height.

    Construction:
        Rectangle(width, height, pos)   corner at pos
        Rectangle(width, height)        corner at Position.origin()
        Rectangle.from_diagonal(pos, diagonal)
    """

    bottom_left: Position = Field(..., description="Bottom-left corner")
    diag: Vector = Field(..., description="Diagonal from bottom-left to top-right corner")

    model_config = {"strict": True, "validate_assignment": True}

    def __init__(self, width: int, height: int, pos: Position | None = None) -> None:
        if pos is None:
            pos = Position.origin()
        elif not isinstance(pos, Position):
            raise TypeError(f"pos must be a Position, got {type(pos).__name__}")

        super().__init__(bottom_left=pos, diag=Vector(width, height))

    @classmethod
    def from_diagonal(cls, pos: Position, diagonal: Vector) -> "Rectangle":
        """
        Build a rectangle from its corner and diagonal.

        Args:
            pos: Bottom-left corner
            diagonal: Vector to the top-right corner (both components > 0)

        Returns:
            New rectangle
        """
        if not isinstance(diagonal, Vector):
            raise TypeError(f"diagonal must be a Vector, got {type(diagonal).__name__}")
        return cls(diagonal.x, diagonal.y, pos)

    @field_validator("bottom_left")
    @classmethod
    def freeze_corner(cls, v: Position) -> Position:
        """Store a frozen copy, never the caller's instance."""
        return FrozenPosition(v.x, v.y)

    @field_validator("diag")
    @classmethod
    def validate_diagonal_positive(cls, v: Vector) -> Vector:
        """Width and height must both be at least MIN_SIDE_LENGTH."""
        validate_positive(v.x, "width")
        validate_positive(v.y, "height")
        return FrozenVector(v.x, v.y)

    # -------------------------------------------------------------------------
    # Readers
    # -------------------------------------------------------------------------

    def width(self) -> int:
        return self.diag.x

    def height(self) -> int:
        return self.diag.y

    def pos(self) -> Position:
        """Bottom-left corner (independent copy)."""
        return Position(self.bottom_left.x, self.bottom_left.y)

    def diagonal(self) -> Vector:
        """Diagonal vector (independent copy)."""
        return Vector(self.diag.x, self.diag.y)

    def area(self) -> int:
        return self.width() * self.height()

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def reflection(self) -> "Rectangle":
        """
        Reflection across the line x = y.

        Corner and diagonal are reflected independently. If a reflected
        diagonal component comes out negative, the corner is shifted by
        that component on its axis and the component's absolute value is
        used as the side, so the result still has a positive diagonal.

        Returns:
            New rectangle
        """
        diagonal = self.diag.reflection()
        corner = self.bottom_left.reflection()

        # Zero shift while the diagonal is positive, which construction enforces
        corner.accumulate(Vector(min(diagonal.x, 0), min(diagonal.y, 0)))

        reflected = Rectangle(abs(diagonal.x), abs(diagonal.y), corner)
        logger.debug("Rectangle reflection: %r -> %r", self, reflected)
        return reflected

    def accumulate(self, vec: Vector) -> "Rectangle":
        """
        Translate the rectangle by vec in place.

        Args:
            vec: Translation vector

        Returns:
            self, so calls can be chained
        """
        self.bottom_left = self.bottom_left + vec
        return self

    def split_horizontally(self, place: int) -> tuple["Rectangle", "Rectangle"]:
        """
        Cut along a horizontal line at height place.

        Example: Rectangle(100, 200).split_horizontally(20) gives
        Rectangle(100, 20, (0, 0)) and Rectangle(100, 180, (0, 20)).

        Args:
            place: Height of the lower piece, 0 < place < height()

        Returns:
            (lower, upper)

        Raises:
            InvalidSplitPlace: If place is outside (0, height())
        """
        _check_split_place(place, self.height(), "height")

        corner = self.pos()
        lower = Rectangle(self.width(), place, corner)
        upper = Rectangle(self.width(), self.height() - place, corner + Vector(0, place))

        logger.debug("Rectangle split_horizontally at %d: %r -> %r, %r", place, self, lower, upper)
        return lower, upper

    def split_vertically(self, place: int) -> tuple["Rectangle", "Rectangle"]:
        """
        Cut along a vertical line at width place.

        Args:
            place: Width of the left piece, 0 < place < width()

        Returns:
            (left, right)

        Raises:
            InvalidSplitPlace: If place is outside (0, width())
        """
        _check_split_place(place, self.width(), "width")

        corner = self.pos()
        left = Rectangle(place, self.height(), corner)
        right = Rectangle(self.width() - place, self.height(), corner + Vector(place, 0))

        logger.debug("Rectangle split_vertically at %d: %r -> %r, %r", place, self, left, right)
        return left, right

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.bottom_left == other.bottom_left and self.diag == other.diag

    def __add__(self, other: object) -> "Rectangle":
        if not isinstance(other, Vector):
            return NotImplemented
        return Rectangle(self.width(), self.height(), self.bottom_left + other)

    __radd__ = __add__

    def __iadd__(self, other: object) -> "Rectangle":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.accumulate(other)


def _check_split_place(place: int, side: int, side_name: str) -> None:
    if not is_valid_int(place):
        raise InvalidSplitPlace(f"place must be an int, got {place!r}")
    if not is_strictly_between(place, 0, side):
        raise InvalidSplitPlace(f"place must be in (0, {side_name}={side}), got {place}")
