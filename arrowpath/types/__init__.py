"""Type definitions for arrow rendering.

This package contains all type definitions organized into focused modules:
- geometry: Core geometry types (Point, Anchor)
- commands: Canvas drawing commands
- styles: Arrow style and render mode
- shapes: Drawable shape model
"""

from arrowpath.types.commands import (
    ClosePath,
    DrawCommand,
    Fill,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    Stroke,
)
from arrowpath.types.geometry import (
    Anchor,
    Point,
    clamp_value,
    sign,
)
from arrowpath.types.shapes import Shape
from arrowpath.types.styles import ArrowStyle, RenderMode

__all__ = [
    # Geometry
    "Anchor",
    "Point",
    "clamp_value",
    "sign",
    # Commands
    "ClosePath",
    "DrawCommand",
    "Fill",
    "LineTo",
    "MoveTo",
    "QuadraticCurveTo",
    "Stroke",
    # Styles
    "ArrowStyle",
    "RenderMode",
    # Shapes
    "Shape",
]
