"""CLI for arrowpath - inspect and render arrows.

Usage:
    python -m arrowpath.cli commands --from 0,0 --to 100,50
    python -m arrowpath.cli svg --from 0,0 --to 100,50 --shape elbow
    python -m arrowpath.cli render --from 0,0 --to 100,50 --via 50,0 -o arrow.png
"""

import logging
from dataclasses import replace
from enum import Enum
from pathlib import Path as FilePath
from typing import cast

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from arrowpath.arrows import ArrowGroup, DetourArrow, ElbowArrow, GenericArrow, WaypointArrow
from arrowpath.canvas import commands_to_svg_d
from arrowpath.config import settings
from arrowpath.logging_config import setup_dev_logging
from arrowpath.rendering import options_from_settings, render_arrows
from arrowpath.types import ArrowStyle, Point, RenderMode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="arrowpath",
    help="Plan and render rounded arrows between two points",
    add_completion=False,
)
console = Console()


class ArrowShape(str, Enum):
    """Routing used between the two end points."""

    STRAIGHT = "straight"
    ELBOW = "elbow"
    DETOUR = "detour"


def _parse_point(value: str) -> Point:
    """Parse an "X,Y" option value."""
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError as e:
        raise typer.BadParameter(f"Expected X,Y but got {value!r}") from e
    return Point(x=x, y=y)


def _build_arrow(
    source: str,
    target: str,
    via: list[str] | None,
    shape: ArrowShape,
    margin: float,
) -> GenericArrow:
    start = _parse_point(source)
    if via:
        if shape != ArrowShape.STRAIGHT:
            raise typer.BadParameter("--via can only be combined with --shape straight")
        arrow: GenericArrow = WaypointArrow(start, [_parse_point(v) for v in via])
    elif shape == ArrowShape.ELBOW:
        arrow = ElbowArrow(start)
    elif shape == ArrowShape.DETOUR:
        arrow = DetourArrow(start, margin=margin)
    else:
        arrow = GenericArrow(start)
    return arrow.to(_parse_point(target))


def _draw(
    source: str,
    target: str,
    via: list[str] | None,
    shape: ArrowShape,
    margin: float,
    mode: RenderMode | None,
    corner_radius: float | None,
) -> ArrowGroup:
    style = ArrowStyle.from_settings()
    if mode is not None:
        style.mode = mode
    if corner_radius is not None:
        style.corner_radius = corner_radius

    group = _build_arrow(source, target, via, shape, margin).draw(key=0, style=style)
    if group is None:
        console.print("[red]Nothing to draw[/red]")
        raise typer.Exit(1)
    return group


# Shared option declarations
FromOption = typer.Option(..., "--from", "-f", help="Start point as X,Y")
ToOption = typer.Option(..., "--to", "-t", help="End point as X,Y")
ViaOption = typer.Option(None, "--via", help="Waypoint as X,Y (repeatable)")
ShapeOption = typer.Option(ArrowShape.STRAIGHT, "--shape", "-s", help="Arrow routing")
MarginOption = typer.Option(20.0, "--margin", help="Side offset for detour arrows")
ModeOption = typer.Option(None, "--mode", "-m", help="Arrowhead compositing mode")
RadiusOption = typer.Option(None, "--corner-radius", "-r", help="Override corner radius")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


@app.command("commands")
def show_commands(
    source: str = FromOption,
    target: str = ToOption,
    via: list[str] = ViaOption,
    shape: ArrowShape = ShapeOption,
    margin: float = MarginOption,
    mode: RenderMode = ModeOption,
    corner_radius: float = RadiusOption,
    verbose: bool = VerboseOption,
) -> None:
    """List the drawing commands for an arrow.

    Examples:
        arrowpath commands --from 0,0 --to 100,0
        arrowpath commands -f 0,0 -t 50,50 --shape elbow --mode integrated
    """
    setup_dev_logging(verbose)
    group = _draw(source, target, via, shape, margin, mode, corner_radius)

    for shape_model in group.shapes:
        table = Table(
            title=f"{shape_model.name} (stroke width {shape_model.stroke_width:g})",
            box=box.ROUNDED,
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Command", style="cyan")
        table.add_column("Control")
        table.add_column("To", style="green")

        for i, command in enumerate(shape_model.commands):
            control = getattr(command, "control", None)
            to = getattr(command, "to", None)
            table.add_row(
                str(i),
                command.type,
                f"({control.x:g}, {control.y:g})" if control else "-",
                f"({to.x:g}, {to.y:g})" if to else "-",
            )
        console.print(table)

    console.print(f"\nBounding box: {group.width:g} x {group.height:g}")


@app.command("svg")
def show_svg(
    source: str = FromOption,
    target: str = ToOption,
    via: list[str] = ViaOption,
    shape: ArrowShape = ShapeOption,
    margin: float = MarginOption,
    mode: RenderMode = ModeOption,
    corner_radius: float = RadiusOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the SVG path data of each arrow shape."""
    setup_dev_logging(verbose)
    group = _draw(source, target, via, shape, margin, mode, corner_radius)
    for shape_model in group.shapes:
        console.print(f"[bold]{shape_model.name}[/bold]: {commands_to_svg_d(shape_model.commands)}")


@app.command("render")
def render_png(
    source: str = FromOption,
    target: str = ToOption,
    output: FilePath = typer.Option(..., "--output", "-o", help="PNG file to write"),
    via: list[str] = ViaOption,
    shape: ArrowShape = ShapeOption,
    margin: float = MarginOption,
    mode: RenderMode = ModeOption,
    corner_radius: float = RadiusOption,
    width: int = typer.Option(settings.canvas_width, "--width", help="Image width"),
    height: int = typer.Option(settings.canvas_height, "--height", help="Image height"),
    verbose: bool = VerboseOption,
) -> None:
    """Rasterize an arrow to a PNG file.

    Examples:
        arrowpath render -f 20,20 -t 300,200 --shape elbow -o elbow.png
    """
    setup_dev_logging(verbose)
    group = _draw(source, target, via, shape, margin, mode, corner_radius)

    options = replace(
        options_from_settings(), width=width, height=height, output_format="bytes"
    )
    png = cast(bytes, render_arrows([group], options))

    try:
        output.write_bytes(png)
    except OSError as e:
        console.print(f"[red]Error writing {output}: {e}[/red]")
        raise typer.Exit(1) from e

    logger.info(f"Wrote {len(png)} bytes to {output}")
    console.print(f"[green]Wrote {output}[/green] ({width}x{height})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
