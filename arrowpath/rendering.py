"""Raster rendering for arrow groups.

This module provides a unified API for rendering arrows to images with
configurable options for background, dimensions, and output format.
"""

from __future__ import annotations

import asyncio
import base64
import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from PIL import Image, ImageDraw

from arrowpath.arrows import ArrowGroup
from arrowpath.canvas import commands_to_polylines
from arrowpath.types import clamp_value

logger = logging.getLogger(__name__)


def hex_to_rgba(hex_color: str, opacity: float = 1.0) -> tuple[int, int, int, int]:
    """Convert hex color and opacity to RGBA tuple."""
    hex_color = hex_color.lstrip("#")
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return (r, g, b, int(clamp_value(opacity, 0.0, 1.0) * 255))


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for arrow rendering.

    Attributes:
        width: Output image width in pixels
        height: Output image height in pixels
        background_color: Background color as hex string or RGBA tuple
        steps_per_unit: Sampling density for curved corners
        output_format: Return type - "image" (PIL), "bytes", or "base64"
        optimize_png: Enable PNG optimization (slower but smaller)
    """

    width: int = 800
    height: int = 600
    background_color: str | tuple[int, int, int, int] = "#1a1a2e"
    steps_per_unit: float = 0.5
    output_format: Literal["image", "bytes", "base64"] = "bytes"
    optimize_png: bool = False

    def _parse_background(self) -> tuple[int, int, int, int]:
        """Parse background_color to RGBA tuple."""
        if isinstance(self.background_color, tuple):
            return self.background_color
        return hex_to_rgba(self.background_color, 1.0)


def options_from_settings() -> RenderOptions:
    """Render options matching the configured canvas."""
    from arrowpath.config import settings

    return RenderOptions(
        width=settings.canvas_width,
        height=settings.canvas_height,
        background_color=settings.background_color,
        steps_per_unit=settings.curve_steps_per_unit,
    )


def _draw_group(draw: ImageDraw.ImageDraw, group: ArrowGroup, steps_per_unit: float) -> None:
    for shape in group.shapes:
        polylines = commands_to_polylines(shape.commands, steps_per_unit)
        fills = shape.fill is not None and any(c.type == "fill" for c in shape.commands)

        for polyline in polylines:
            if fills:
                draw.polygon(polyline, fill=hex_to_rgba(shape.fill))
            if shape.stroke_width > 0:
                width = max(1, round(shape.stroke_width))
                draw.line(polyline, fill=hex_to_rgba(shape.stroke), width=width, joint="curve")


def render_arrows(
    groups: Sequence[ArrowGroup],
    options: RenderOptions | None = None,
) -> Image.Image | bytes | str:
    """Core sync function to render arrow groups to an image.

    Args:
        groups: Rendered arrows to draw, in order
        options: Render configuration (uses defaults if None)

    Returns:
        PIL Image, PNG bytes, or base64 string depending on options.output_format
    """
    if options is None:
        options = RenderOptions()

    # Create image with background
    img = Image.new("RGBA", (options.width, options.height), options._parse_background())
    draw_layer = Image.new("RGBA", (options.width, options.height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(draw_layer)

    for group in groups:
        _draw_group(draw, group, options.steps_per_unit)
    logger.info(f"Rendered {len(groups)} arrows at {options.width}x{options.height}")

    img = Image.alpha_composite(img, draw_layer)
    img = img.convert("RGB")

    # Return in requested format
    if options.output_format == "image":
        return img

    buffer = io.BytesIO()
    img.save(buffer, format="PNG", optimize=options.optimize_png)
    png_bytes = buffer.getvalue()

    if options.output_format == "base64":
        return base64.standard_b64encode(png_bytes).decode("utf-8")

    return png_bytes


async def render_arrows_async(
    groups: Sequence[ArrowGroup],
    options: RenderOptions | None = None,
) -> Image.Image | bytes | str:
    """Async wrapper for render_arrows (runs in thread pool)."""
    return await asyncio.to_thread(render_arrows, groups, options)
