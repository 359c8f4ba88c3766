"""
Plane geometry core: value types and structural transforms.

Integer points, displacement vectors and axis-aligned rectangles,
independent of any I/O, rendering or persistence layer.
"""

from src.geometry.domain import (
    MIN_SIDE_LENGTH,
    ORIGIN_X,
    ORIGIN_Y,
    InvalidSplitPlace,
    Position,
    Rectangle,
    Vector,
)
from src.geometry.ops import (
    IncompatibleRectangles,
    merge_horizontally,
    merge_vertically,
)

__all__ = [
    # Constants
    "ORIGIN_X",
    "ORIGIN_Y",
    "MIN_SIDE_LENGTH",
    # Value types
    "Vector",
    "Position",
    "Rectangle",
    # Merge
    "merge_horizontally",
    "merge_vertically",
    # Exceptions
    "InvalidSplitPlace",
    "IncompatibleRectangles",
]
