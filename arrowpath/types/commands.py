"""Drawing command types.

These mirror the primitives of an immediate-mode 2D canvas context
(``moveTo``, ``lineTo``, ``quadraticCurveTo``, ``closePath``, ``fill``,
``stroke``). A host replays them in order against its own canvas API.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from arrowpath.types.geometry import Point


class MoveTo(BaseModel):
    """Start a new subpath at a point."""

    model_config = ConfigDict(frozen=True)

    type: Literal["move_to"] = "move_to"
    to: Point


class LineTo(BaseModel):
    """Straight segment from the current point."""

    model_config = ConfigDict(frozen=True)

    type: Literal["line_to"] = "line_to"
    to: Point


class QuadraticCurveTo(BaseModel):
    """Quadratic bezier from the current point through a control point."""

    model_config = ConfigDict(frozen=True)

    type: Literal["quadratic_curve_to"] = "quadratic_curve_to"
    control: Point
    to: Point


class ClosePath(BaseModel):
    """Close the current subpath back to its start."""

    model_config = ConfigDict(frozen=True)

    type: Literal["close_path"] = "close_path"


class Fill(BaseModel):
    """Fill everything drawn since the last move."""

    model_config = ConfigDict(frozen=True)

    type: Literal["fill"] = "fill"


class Stroke(BaseModel):
    """Stroke the current path."""

    model_config = ConfigDict(frozen=True)

    type: Literal["stroke"] = "stroke"


DrawCommand = Annotated[
    MoveTo | LineTo | QuadraticCurveTo | ClosePath | Fill | Stroke,
    Field(discriminator="type"),
]


def move_to(x: float, y: float) -> MoveTo:
    return MoveTo(to=Point(x=x, y=y))


def line_to(x: float, y: float) -> LineTo:
    return LineTo(to=Point(x=x, y=y))


def quadratic_curve_to(cpx: float, cpy: float, x: float, y: float) -> QuadraticCurveTo:
    return QuadraticCurveTo(control=Point(x=cpx, y=cpy), to=Point(x=x, y=y))
