"""Arrow style definitions."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from arrowpath.config import Settings


class RenderMode(str, Enum):
    """How the arrowhead is composited with the path."""

    COMPOSITE = "composite"  # Path shape plus a separate filled arrowhead shape
    INTEGRATED = "integrated"  # Chevron strokes appended to the path itself


class ArrowStyle(BaseModel):
    """Style and geometry parameters for drawing an arrow."""

    stroke: str = "#FFFFFF"  # Hex color
    fill: str = "#FFFFFF"  # Hex color, used by the composite arrowhead
    stroke_width: float = 1.0  # Normal stroke width
    hovered_stroke_width: float = 2.0  # Stroke width while the pointer is over the arrow
    hit_stroke_width: float = 5.0  # Hit-test width for the host

    corner_radius: float = 40.0  # Max rounding distance at a joint
    pointer_length: float = 10.0  # Length of each chevron wing
    pointer_angle: float = math.radians(30)  # Wing angle off the reversed heading (radians)

    mode: RenderMode = RenderMode.COMPOSITE

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> ArrowStyle:
        """Build a style from application settings."""
        if config is None:
            from arrowpath.config import settings as config

        return cls(
            stroke=config.arrow_color,
            fill=config.arrow_color,
            stroke_width=config.arrow_stroke_width,
            hovered_stroke_width=config.arrow_hovered_stroke_width,
            hit_stroke_width=config.arrow_hit_stroke_width,
            corner_radius=config.corner_radius,
            pointer_length=config.pointer_length,
            pointer_angle=math.radians(config.pointer_angle_degrees),
            mode=config.render_mode,
        )
