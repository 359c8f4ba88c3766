"""
Vector — displacement on the plane

Value model of a displacement (dx, dy) on the integer grid.
No constraint on sign: zero and negative components are legal.

Vector is the leaf type: Position and Rectangle are translated by it.
"""

from pydantic import BaseModel, Field


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel):
    """
    Displacement vector.

    Mutable only through accumulate() / +=, every other operation
    returns a new instance.
    """

    x: int = Field(..., description="Displacement along the X axis")
    y: int = Field(..., description="Displacement along the Y axis")

    model_config = {"strict": True, "validate_assignment": True}

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y)

    def reflection(self) -> "Vector":
        """
        Reflection across the line x = y.

        Returns:
            New vector (y, x)
        """
        return Vector(self.y, self.x)

    def accumulate(self, other: "Vector") -> "Vector":
        """
        Add other to this vector in place.

        Args:
            other: Vector to add

        Returns:
            self, so calls can be chained
        """
        self.x = self.x + other.x
        self.y = self.y + other.y
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: object) -> "Vector":
        # Vector + Position / Rectangle falls through to their __radd__
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.accumulate(other)


class FrozenVector(Vector):
    """
    Vector that rejects every mutation.

    Held by Rectangle as its diagonal. Unhashable like Vector, so equal
    values behave the same whichever kind is held.
    """

    model_config = {"frozen": True}

    __hash__ = None  # type: ignore[assignment]
