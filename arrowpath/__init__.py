"""Rounded, multi-segment arrows between two anchors."""

from arrowpath.arrows import ArrowGroup, DetourArrow, ElbowArrow, GenericArrow, WaypointArrow
from arrowpath.keys import KeyAllocator
from arrowpath.paths import render
from arrowpath.steps import plan

__all__ = [
    "ArrowGroup",
    "DetourArrow",
    "ElbowArrow",
    "GenericArrow",
    "KeyAllocator",
    "WaypointArrow",
    "plan",
    "render",
]
