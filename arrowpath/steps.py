"""Pure functions for planning arrow paths.

An arrow is decomposed into straight hops. Each hop is a *step*: a function
that takes the end of the previous hop ``(x, y)`` and returns the end of this
one. Folding the steps over the arrow's anchor yields the flat coordinate list
``[x1, y1, x2, y2, ...]`` the path renderer consumes.

A step need not be relative: ``line_to(target)`` ignores its input and jumps
straight to the target's coordinates.
"""

import logging
from collections.abc import Callable, Sequence

from arrowpath.types import Anchor, Point

logger = logging.getLogger(__name__)

Step = Callable[[float, float], Point]


def plan(origin: Anchor, steps: Sequence[Step]) -> list[float]:
    """Fold steps over the origin into a flat coordinate list.

    The origin itself is not part of the result, so ``k`` steps always give
    ``k`` coordinate pairs. No steps gives an empty list.
    """
    points: list[float] = [origin.x, origin.y]
    for step in steps:
        point = step(points[-2], points[-1])
        points.extend((point.x, point.y))
    del points[:2]

    logger.debug(f"Planned {len(steps)} steps from ({origin.x}, {origin.y})")
    return points


def pairs(points: Sequence[float]) -> list[Point]:
    """Convert a flat coordinate list into points."""
    if len(points) % 2:
        raise ValueError(f"Coordinate list must have an even length, got {len(points)}")
    return [Point(x=points[i], y=points[i + 1]) for i in range(0, len(points), 2)]


# =============================================================================
# Step factories
# =============================================================================


def line_to(anchor: Anchor) -> Step:
    """Step straight to an anchor's coordinates."""
    x, y = anchor.x, anchor.y
    return lambda _x, _y: Point(x=x, y=y)


def offset(dx: float, dy: float) -> Step:
    """Step by a fixed displacement from the previous point."""
    return lambda x, y: Point(x=x + dx, y=y + dy)


def horizontal_to(x: float) -> Step:
    """Step horizontally to an absolute x, keeping y."""
    return lambda _x, y: Point(x=x, y=y)


def vertical_to(y: float) -> Step:
    """Step vertically to an absolute y, keeping x."""
    return lambda x, _y: Point(x=x, y=y)
