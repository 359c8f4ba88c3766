"""
Structural operations over rectangles.
"""

from src.geometry.ops.merging import (
    IncompatibleRectangles,
    merge_horizontally,
    merge_vertically,
)

__all__ = [
    "IncompatibleRectangles",
    "merge_horizontally",
    "merge_vertically",
]
