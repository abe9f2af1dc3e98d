"""Canvas conversion utilities.

Pure functions turning drawing commands into SVG path data or flattened
polylines - no state access.
"""

from collections.abc import Sequence
from xml.etree import ElementTree as ET

from arrowpath.interpolation import interpolate_quadratic
from arrowpath.types import DrawCommand, Point, Shape


def _fmt(value: float) -> str:
    return f"{value:g}"


def commands_to_svg_d(commands: Sequence[DrawCommand]) -> str:
    """Convert drawing commands to an SVG path 'd' attribute.

    Paint commands (fill, stroke) carry no geometry and are skipped.
    """
    d_parts: list[str] = []

    for command in commands:
        match command.type:
            case "move_to":
                d_parts.append(f"M {_fmt(command.to.x)} {_fmt(command.to.y)}")
            case "line_to":
                d_parts.append(f"L {_fmt(command.to.x)} {_fmt(command.to.y)}")
            case "quadratic_curve_to":
                d_parts.append(
                    f"Q {_fmt(command.control.x)} {_fmt(command.control.y)} "
                    f"{_fmt(command.to.x)} {_fmt(command.to.y)}"
                )
            case "close_path":
                d_parts.append("Z")

    return " ".join(d_parts)


def commands_to_polylines(
    commands: Sequence[DrawCommand], steps_per_unit: float = 0.5
) -> list[list[tuple[float, float]]]:
    """Flatten drawing commands into one polyline per subpath.

    Quadratic curves are sampled; a close-path repeats the subpath's start.
    """
    polylines: list[list[tuple[float, float]]] = []
    current: list[tuple[float, float]] = []

    for command in commands:
        match command.type:
            case "move_to":
                if len(current) >= 2:
                    polylines.append(current)
                current = [(command.to.x, command.to.y)]
            case "line_to":
                current.append((command.to.x, command.to.y))
            case "quadratic_curve_to":
                if not current:
                    current = [(command.control.x, command.control.y)]
                start = Point(x=current[-1][0], y=current[-1][1])
                samples = interpolate_quadratic(start, command.control, command.to, steps_per_unit)
                current.extend((p.x, p.y) for p in samples)
            case "close_path":
                if current:
                    current.append(current[0])

    if len(current) >= 2:
        polylines.append(current)
    return polylines


def shape_to_svg_element(shape: Shape) -> ET.Element:
    """Convert a shape to an SVG <path> element.

    Only shapes that issue a fill command are filled.
    """
    fills = shape.fill is not None and any(c.type == "fill" for c in shape.commands)
    return ET.Element(
        "path",
        {
            "d": commands_to_svg_d(shape.commands),
            "stroke": shape.stroke,
            "stroke-width": _fmt(shape.stroke_width),
            "fill": shape.fill if fills and shape.fill else "none",
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
        },
    )


def group_to_svg_elements(shapes: Sequence[Shape]) -> list[ET.Element]:
    """Convert an arrow's shapes to SVG <path> elements, skipping empty ones."""
    elements: list[ET.Element] = []
    for shape in shapes:
        element = shape_to_svg_element(shape)
        if element.get("d"):
            elements.append(element)
    return elements
