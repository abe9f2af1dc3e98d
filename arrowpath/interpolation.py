"""Pure functions for curve interpolation.

This module contains stateless, pure mathematical functions for
flattening curves into discrete points. No side effects or I/O.
"""

import math

from arrowpath.types import Point


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def quadratic_bezier(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate quadratic bezier at t."""
    one_minus_t = 1 - t
    return Point(
        x=one_minus_t**2 * p0.x + 2 * one_minus_t * t * p1.x + t**2 * p2.x,
        y=one_minus_t**2 * p0.y + 2 * one_minus_t * t * p1.y + t**2 * p2.y,
    )


def interpolate_quadratic(
    p0: Point, p1: Point, p2: Point, steps_per_unit: float = 0.5
) -> list[Point]:
    """Sample a quadratic bezier, excluding its start point."""
    dist = distance(p0, p1) + distance(p1, p2)  # Rough estimate
    steps = max(10, int(dist * steps_per_unit))
    return [quadratic_bezier(p0, p1, p2, j / steps) for j in range(1, steps + 1)]
