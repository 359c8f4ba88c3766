"""
Domain value types.

Contains the plane geometry values: Vector, Position, Rectangle.
"""

from src.geometry.domain.position import ORIGIN_X, ORIGIN_Y, Position
from src.geometry.domain.rectangle import InvalidSplitPlace, Rectangle
from src.geometry.domain.vector import Vector
from src.geometry.math.safeguards import MIN_SIDE_LENGTH

__all__ = [
    # Vector
    "Vector",
    # Position
    "ORIGIN_X",
    "ORIGIN_Y",
    "Position",
    # Rectangle
    "MIN_SIDE_LENGTH",
    "Rectangle",
    "InvalidSplitPlace",
]
