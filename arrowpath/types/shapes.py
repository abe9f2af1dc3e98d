"""Shape model: one drawable primitive of an arrow."""

from typing import Literal

from pydantic import BaseModel

from arrowpath.types.commands import DrawCommand


class Shape(BaseModel):
    """A sequence of drawing commands plus the paint attributes to apply.

    ``stroke_width`` is mutable so hover hooks can adjust it in place.
    """

    name: Literal["path", "arrowhead"]
    commands: list[DrawCommand]
    stroke: str
    fill: str | None = None
    stroke_width: float
    hit_stroke_width: float = 0.0
