"""Core geometry types."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A 2D point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


@runtime_checkable
class Anchor(Protocol):
    """Anything an arrow can start from or point at.

    Only ``x`` and ``y`` are read; anchors are never mutated.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def sign(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp_value(value: float, low: float, high: float) -> float:
    """Clamp a value to a range [low, high]."""
    return max(low, min(high, value))
