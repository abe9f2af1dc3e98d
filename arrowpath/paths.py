"""Arrow path rendering.

Pure functions turning a flat coordinate list into drawing commands: straight
segments joined by quadratic-curve corners, followed by a chevron arrowhead at
the final point. No state access.
"""

import logging
import math
from collections.abc import Sequence

from arrowpath.types import (
    ArrowStyle,
    ClosePath,
    DrawCommand,
    Fill,
    Point,
    RenderMode,
    Shape,
    Stroke,
    sign,
)
from arrowpath.types.commands import line_to, move_to, quadratic_curve_to

logger = logging.getLogger(__name__)


def corner_radius_for(dx1: float, dy1: float, dx2: float, dy2: float, radius: float) -> float:
    """Rounding distance at a joint between two segments.

    Each segment allows at most half its length on its dominant axis, so
    corners never overlap on short hops.
    """
    br1 = min(radius, max(abs(dx1) / 2, abs(dy1) / 2))
    br2 = min(radius, max(abs(dx2) / 2, abs(dy2) / 2))
    return min(br1, br2)


def arrowhead_angle(points: Sequence[float]) -> float:
    """Heading of the final segment, in radians.

    Coincident end points give 0.
    """
    dx = points[-2] - points[-4]
    dy = points[-1] - points[-3]
    if dx == 0 and dy == 0:
        return 0.0
    return math.atan2(dy, dx)


def chevron(
    points: Sequence[float],
    length: float = 10.0,
    angle: float = math.radians(30),
) -> tuple[Point, Point, Point]:
    """Wing, tip and wing of the arrowhead at the end of the path."""
    heading = arrowhead_angle(points)
    tip_x, tip_y = points[-2], points[-1]
    left = Point(
        x=tip_x - length * math.cos(heading - angle),
        y=tip_y - length * math.sin(heading - angle),
    )
    right = Point(
        x=tip_x - length * math.cos(heading + angle),
        y=tip_y - length * math.sin(heading + angle),
    )
    return left, Point(x=tip_x, y=tip_y), right


def _path_commands(points: Sequence[float], corner_radius: float) -> list[DrawCommand]:
    """Build the rounded polyline for a coordinate list of at least two points."""
    commands: list[DrawCommand] = [move_to(points[0], points[1])]

    if len(points) == 4:
        # Only a start and an end, nothing to round
        commands.append(line_to(points[2], points[3]))
        return commands

    n = 0
    while n < len(points) - 4:
        dx1 = points[n + 2] - points[n]
        dy1 = points[n + 3] - points[n + 1]
        dx2 = points[n + 4] - points[n + 2]
        dy2 = points[n + 5] - points[n + 3]
        br = corner_radius_for(dx1, dy1, dx2, dy2, corner_radius)

        # Pull back from the joint along the incoming segment, never past
        # the previous point on either axis
        x1 = points[n] + (abs(dx1) - min(br, abs(dx1))) * sign(dx1)
        y1 = points[n + 1] + (abs(dy1) - min(br, abs(dy1))) * sign(dy1)
        commands.append(line_to(x1, y1))

        n += 2
        # Push forward along the outgoing segment, curving over the joint
        x2 = points[n] + min(br, abs(dx2)) * sign(dx2)
        y2 = points[n + 1] + min(br, abs(dy2)) * sign(dy2)
        commands.append(quadratic_curve_to(points[n], points[n + 1], x2, y2))

    commands.append(line_to(points[-2], points[-1]))
    return commands


def render(points: Sequence[float], style: ArrowStyle | None = None) -> list[Shape]:
    """Render a flat coordinate list as arrow shapes.

    Args:
        points: ``[x0, y0, x1, y1, ...]``; fewer than two points draws nothing
        style: Arrow style (uses defaults if None)

    Returns:
        In composite mode a ``path`` shape and a filled ``arrowhead`` shape;
        in integrated mode a single ``path`` shape with the chevron appended.

    Raises:
        ValueError: If the coordinate list has an odd length.
    """
    if len(points) % 2:
        raise ValueError(f"Coordinate list must have an even length, got {len(points)}")
    if len(points) < 4:
        return []
    if style is None:
        style = ArrowStyle()

    commands = _path_commands(points, style.corner_radius)
    left, tip, right = chevron(points, style.pointer_length, style.pointer_angle)

    if style.mode == RenderMode.INTEGRATED:
        commands.extend(
            [line_to(left.x, left.y), move_to(tip.x, tip.y), line_to(right.x, right.y)]
        )
        commands.append(Stroke())
        logger.debug(f"Rendered integrated arrow with {len(points) // 2} points")
        return [
            Shape(
                name="path",
                commands=commands,
                stroke=style.stroke,
                stroke_width=style.stroke_width,
                hit_stroke_width=style.hit_stroke_width,
            )
        ]

    commands.append(Stroke())
    head: list[DrawCommand] = [
        move_to(left.x, left.y),
        line_to(tip.x, tip.y),
        line_to(right.x, right.y),
        ClosePath(),
        Fill(),
        Stroke(),
    ]
    logger.debug(f"Rendered composite arrow with {len(points) // 2} points")
    return [
        Shape(
            name="path",
            commands=commands,
            stroke=style.stroke,
            fill=style.fill,
            stroke_width=style.stroke_width,
            hit_stroke_width=style.hit_stroke_width,
        ),
        Shape(
            name="arrowhead",
            commands=head,
            stroke=style.stroke,
            fill=style.fill,
            stroke_width=0,
            hit_stroke_width=0,
        ),
    ]
