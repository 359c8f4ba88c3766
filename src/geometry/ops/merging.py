"""
Merging — gluing edge-adjacent rectangles

Inverse of Rectangle.split_horizontally / split_vertically.

ADJACENCY:
    merge_horizontally(r1, r2): r2 sits directly on top of r1
        r1.width() == r2.width()
        r1.pos().x == r2.pos().x
        r2.pos().y == r1.pos().y + r1.height()
    merge_vertically(r1, r2): r2 sits directly right of r1
        r1.height() == r2.height()
        r1.pos().y == r2.pos().y
        r2.pos().x == r1.pos().x + r1.width()

ROUND TRIP:
    merge_horizontally(r1, r2).split_horizontally(r1.height()) == (r1, r2)
    merge_vertically(r1, r2).split_vertically(r1.width()) == (r1, r2)

Inputs are never modified.
"""

import logging
from typing import NoReturn

from src.geometry.domain.rectangle import Rectangle

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IncompatibleRectangles(ValueError):
    """
    The two rectangles do not share a full common edge.

    Either the sides along the edge differ, the rectangles are offset
    along the edge, or they are not touching.
    """


# =============================================================================
# MERGE
# =============================================================================


def merge_horizontally(rect1: Rectangle, rect2: Rectangle) -> Rectangle:
    """
    Glue rect2 onto the top edge of rect1.

    Args:
        rect1: Lower rectangle
        rect2: Upper rectangle

    Returns:
        Rectangle spanning both, with rect1's corner

    Raises:
        IncompatibleRectangles: If the top edge of rect1 is not exactly the
            bottom edge of rect2
    """
    pos1, pos2 = rect1.pos(), rect2.pos()

    if rect1.width() != rect2.width():
        _reject("merge_horizontally", f"widths differ: {rect1.width()} != {rect2.width()}")

    if pos1.x != pos2.x:
        _reject("merge_horizontally", f"x positions differ: {pos1.x} != {pos2.x}")

    if pos2.y != pos1.y + rect1.height():
        _reject(
            "merge_horizontally",
            f"edges not adjacent: top of rect1 is y={pos1.y + rect1.height()}, "
            f"bottom of rect2 is y={pos2.y}",
        )

    merged = Rectangle(rect1.width(), rect1.height() + rect2.height(), pos1)
    logger.debug("merge_horizontally: %r + %r -> %r", rect1, rect2, merged)
    return merged


def merge_vertically(rect1: Rectangle, rect2: Rectangle) -> Rectangle:
    """
    Glue rect2 onto the right edge of rect1.

    Args:
        rect1: Left rectangle
        rect2: Right rectangle

    Returns:
        Rectangle spanning both, with rect1's corner

    Raises:
        IncompatibleRectangles: If the right edge of rect1 is not exactly the
            left edge of rect2
    """
    pos1, pos2 = rect1.pos(), rect2.pos()

    if rect1.height() != rect2.height():
        _reject("merge_vertically", f"heights differ: {rect1.height()} != {rect2.height()}")

    if pos1.y != pos2.y:
        _reject("merge_vertically", f"y positions differ: {pos1.y} != {pos2.y}")

    if pos2.x != pos1.x + rect1.width():
        _reject(
            "merge_vertically",
            f"edges not adjacent: right of rect1 is x={pos1.x + rect1.width()}, "
            f"left of rect2 is x={pos2.x}",
        )

    merged = Rectangle(rect1.width() + rect2.width(), rect1.height(), pos1)
    logger.debug("merge_vertically: %r + %r -> %r", rect1, rect2, merged)
    return merged


def _reject(operation: str, reason: str) -> NoReturn:
    logger.debug("%s rejected: %s", operation, reason)
    raise IncompatibleRectangles(f"{operation}: {reason}")
