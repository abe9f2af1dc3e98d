"""Arrows between two anchors.

An arrow starts at a source anchor and, once ``to()`` is called, points at a
target anchor. Subclasses change the route by overriding ``calculate_steps``;
planning and rendering are shared.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

from arrowpath.canvas import group_to_svg_elements
from arrowpath.paths import render
from arrowpath.steps import Step, horizontal_to, line_to, offset, plan, vertical_to
from arrowpath.types import Anchor, ArrowStyle, Shape

logger = logging.getLogger(__name__)


@dataclass
class ArrowGroup:
    """Rendered arrow handed to the host.

    Attributes:
        key: Opaque key supplied by the caller for re-render diffing
        width: Absolute x distance between source and target
        height: Absolute y distance between source and target
        shapes: Primitives to draw, in order
        style: Style the shapes were rendered with
    """

    key: Hashable | None
    width: float
    height: float
    shapes: list[Shape]
    style: ArrowStyle = field(default_factory=ArrowStyle)

    @property
    def path(self) -> Shape:
        """The stroked path shape."""
        return next(shape for shape in self.shapes if shape.name == "path")

    def on_pointer_enter(self) -> None:
        """Widen the stroke while hovered."""
        self.path.stroke_width = self.style.hovered_stroke_width

    def on_pointer_leave(self) -> None:
        """Restore the normal stroke width."""
        self.path.stroke_width = self.style.stroke_width

    def to_svg(self) -> str:
        """Serialize the arrow as an SVG <g> of its shapes."""
        group = ET.Element("g")
        if self.key is not None:
            group.set("data-key", str(self.key))
        group.extend(group_to_svg_elements(self.shapes))
        return ET.tostring(group, encoding="unicode")


class GenericArrow:
    """A straight arrow between two anchors."""

    def __init__(self, source: Anchor) -> None:
        self.source = source
        self.target: Anchor | None = None
        self.width: float = 0
        self.height: float = 0

    @property
    def x(self) -> float:
        return self.source.x

    @property
    def y(self) -> float:
        return self.source.y

    def to(self, target: Anchor) -> GenericArrow:
        """Point the arrow at a target, recomputing its extent."""
        self.target = target
        self.width = abs(target.x - self.source.x)
        self.height = abs(target.y - self.source.y)
        return self

    def calculate_steps(self) -> list[Step]:
        """Steps taken from the source to the target.

        Each step maps the end of the previous hop to the end of the next;
        the first receives the source coordinates.
        """
        if self.target is None:
            return []
        return [line_to(self.target)]

    def points(self) -> list[float]:
        """Flat coordinate list from the source through every step."""
        planned = plan(self.source, self.calculate_steps())
        if not planned:
            return []
        return [self.source.x, self.source.y, *planned]

    def draw(
        self, key: Hashable | None = None, style: ArrowStyle | None = None
    ) -> ArrowGroup | None:
        """Render the arrow.

        Returns None when there is no target to draw to.
        """
        if style is None:
            style = ArrowStyle.from_settings()

        points = self.points()
        if not points:
            logger.debug(f"Arrow {key!r} has no target, nothing to draw")
            return None

        return ArrowGroup(
            key=key,
            width=self.width,
            height=self.height,
            shapes=render(points, style),
            style=style,
        )


class ElbowArrow(GenericArrow):
    """Horizontal to the target's column, then vertical into it."""

    def calculate_steps(self) -> list[Step]:
        if self.target is None:
            return []
        return [horizontal_to(self.target.x), vertical_to(self.target.y)]


class DetourArrow(GenericArrow):
    """Leaves sideways, runs vertically, then turns back into the target.

    Useful for routing around the source when the target sits above or
    below it.
    """

    def __init__(self, source: Anchor, margin: float = 20.0) -> None:
        super().__init__(source)
        self.margin = margin

    def calculate_steps(self) -> list[Step]:
        if self.target is None:
            return []
        return [
            offset(self.margin, 0),
            vertical_to(self.target.y),
            line_to(self.target),
        ]


class WaypointArrow(GenericArrow):
    """Passes through fixed waypoints on its way to the target."""

    def __init__(self, source: Anchor, waypoints: list[Anchor] | None = None) -> None:
        super().__init__(source)
        self.waypoints = list(waypoints or [])

    def calculate_steps(self) -> list[Step]:
        if self.target is None:
            return []
        return [line_to(waypoint) for waypoint in self.waypoints] + [line_to(self.target)]
